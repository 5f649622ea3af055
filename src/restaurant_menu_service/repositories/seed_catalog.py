"""Built-in catalog used when no stored menu document exists."""

from decimal import Decimal

from restaurant_menu_service.models.menu_models import (
    Catalog,
    Category,
    FoodItem,
    MultilingualText,
)


def build_seed_catalog() -> Catalog:
    """Create the starter menu.

    Returns:
        Catalog: Four categories and two fully translated sample dishes
    """
    return Catalog(
        categories=(
            Category(
                id="cat-1",
                name=MultilingualText(en="Appetizers", ar="مقبلات", ru="Закуски", zh="小吃"),
            ),
            Category(
                id="cat-2",
                name=MultilingualText(
                    en="Main Course", ar="الطباق الرئيسية", ru="Основное блюдо", zh="主食"
                ),
            ),
            Category(
                id="cat-3",
                name=MultilingualText(en="Desserts", ar="حلويات", ru="Десерты", zh="甜点"),
            ),
            Category(
                id="cat-4",
                name=MultilingualText(en="Drinks", ar="مشروبات", ru="Напитки", zh="饮料"),
            ),
        ),
        items=(
            FoodItem(
                id="item-1",
                name=MultilingualText(
                    en="Hummus with Pita",
                    ar="حمص مع خبز بيتا",
                    ru="Хумус с питой",
                    zh="鹰嘴豆泥配皮塔饼",
                ),
                description=MultilingualText(
                    en="Classic middle eastern chickpeas dip served with fresh pita.",
                    ar="غمس الحمص الشرق أوسطي الكلاسيكي يقدم مع خبز بيتا الطازج.",
                    ru="Классический ближневосточный соус из нута, подается со свежей питой.",
                    zh="经典的中东鹰嘴豆泥，搭配新鲜的皮塔饼。",
                ),
                price=Decimal("15"),
                category="cat-1",
                image_url=(
                    "https://images.unsplash.com/photo-1577906030551-5b91627210e7"
                    "?auto=format&fit=crop&q=80&w=800"
                ),
                is_vegan=True,
                is_vegetarian=True,
            ),
            FoodItem(
                id="item-2",
                name=MultilingualText(
                    en="Mixed Grill", ar="مشاوي مشكلة", ru="Ассорти на гриле", zh="混合烧烤"
                ),
                description=MultilingualText(
                    en="A selection of marinated lamb and chicken grilled to perfection.",
                    ar="مجموعة مختارة من لحم الغنم والدجاج المتبل المشوي بإتقان.",
                    ru="Ассорти из маринованной баранины и курицы, приготовленное на гриле.",
                    zh="精选腌制羊肉和鸡肉，烤至完美。",
                ),
                price=Decimal("45"),
                category="cat-2",
                image_url=(
                    "https://images.unsplash.com/photo-1544025162-d76694265947"
                    "?auto=format&fit=crop&q=80&w=800"
                ),
                is_spicy=True,
                is_special_offer=True,
            ),
        ),
    )

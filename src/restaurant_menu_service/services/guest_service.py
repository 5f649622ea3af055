"""Guest-facing view of the menu.

Guests only ever read the catalog. Text is resolved to the selected language
without falling back to English: an untranslated slot is shown as an empty
string.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from restaurant_menu_service.models.menu_models import (
    Catalog,
    FoodItem,
    Language,
    MultilingualText,
    get_language_info,
)
from restaurant_menu_service.models.query_models import ALL_CATEGORIES
from restaurant_menu_service.services.query_service import matches_category


class GuestLabels(BaseModel):
    """Fixed interface strings for one language."""

    vegan: str
    vegetarian: str
    spicy: str
    currency: str
    menu: str
    subtitle: str


LABELS: dict[Language, GuestLabels] = {
    Language.EN: GuestLabels(
        vegan="Vegan",
        vegetarian="Vegetarian",
        spicy="Spicy",
        currency="AED",
        menu="Menu",
        subtitle="Crystal Plaza Al Qasimia",
    ),
    Language.AR: GuestLabels(
        vegan="نباتي صرف",
        vegetarian="نباتي",
        spicy="حار",
        currency="درهم",
        menu="القائمة",
        subtitle="كريستال بلازا القاسمية",
    ),
    Language.RU: GuestLabels(
        vegan="Веган",
        vegetarian="Вегетарианское",
        spicy="Острое",
        currency="AED",
        menu="Меню",
        subtitle="Crystal Plaza Al Qasimia",
    ),
    Language.ZH: GuestLabels(
        vegan="纯素",
        vegetarian="素食",
        spicy="辣",
        currency="AED",
        menu="菜单",
        subtitle="Crystal Plaza Al Qasimia",
    ),
}


class GuestCategory(BaseModel):
    """A category tab in the selected language."""

    id: str
    name: str


class GuestItem(BaseModel):
    """A dish as shown to guests in the selected language.

    Serialized with the same camelCase keys as FoodItem.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    description: str
    price: Decimal
    category: str
    image_url: str
    is_vegan: bool
    is_vegetarian: bool
    is_spicy: bool
    is_special_offer: bool


class GuestMenu(BaseModel):
    """Everything the guest page needs for one language and category tab."""

    language: Language
    direction: str
    active_category: str
    labels: GuestLabels
    categories: list[GuestCategory]
    items: list[GuestItem]


def labels_for(language: Language) -> GuestLabels:
    """Label bundle for a language."""
    return LABELS[Language(language)]


def resolve_text(text: MultilingualText, language: Language) -> str:
    """Select the slot for ``language``; an empty slot stays empty."""
    return text.get(language)


def default_category(catalog: Catalog) -> str:
    """The tab a guest lands on: the first category, or "all" if there are none."""
    return catalog.categories[0].id if catalog.categories else ALL_CATEGORIES


def guest_items(catalog: Catalog, category_filter: str = ALL_CATEGORIES) -> list[FoodItem]:
    """Available items in catalog order, restricted to a category tab.

    Args:
        catalog: Catalog to read
        category_filter: "all" or a category id

    Returns:
        list: Items a guest may see
    """
    return [
        item
        for item in catalog.items
        if item.is_available and matches_category(item, category_filter)
    ]


def guest_menu(
    catalog: Catalog,
    language: Language = Language.EN,
    category_filter: str | None = None,
) -> GuestMenu:
    """Build the guest menu for a language and category tab.

    Args:
        catalog: Catalog to read
        language: Language selected by the guest
        category_filter: "all", a category id, or None for the default tab

    Returns:
        GuestMenu with all text resolved to ``language``
    """
    language = Language(language)
    active = category_filter if category_filter is not None else default_category(catalog)

    return GuestMenu(
        language=language,
        direction=get_language_info(language).direction,
        active_category=active,
        labels=labels_for(language),
        categories=[
            GuestCategory(id=category.id, name=resolve_text(category.name, language))
            for category in catalog.categories
        ],
        items=[
            GuestItem(
                id=item.id,
                name=resolve_text(item.name, language),
                description=resolve_text(item.description, language),
                price=item.price,
                category=item.category,
                image_url=item.image_url,
                is_vegan=item.is_vegan,
                is_vegetarian=item.is_vegetarian,
                is_spicy=item.is_spicy,
                is_special_offer=item.is_special_offer,
            )
            for item in guest_items(catalog, active)
        ],
    )

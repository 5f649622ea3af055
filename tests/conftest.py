"""Shared pytest fixtures and configuration for all tests."""

import os

os.environ.setdefault("ENVIRONMENT", "test")

from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402

from restaurant_menu_service.models.menu_models import (  # noqa: E402
    Catalog,
    Category,
    FoodItem,
    MultilingualText,
)


@pytest.fixture
def full_name() -> MultilingualText:
    """Fixture providing a translation-complete name."""
    return MultilingualText(en="Salmon", ar="سلمون", ru="Лосось", zh="鲜")


@pytest.fixture
def sample_catalog() -> Catalog:
    """Fixture providing a small catalog with two categories and four items."""
    return Catalog(
        categories=(
            Category(id="cat-1", name=MultilingualText(en="Starters", ar="مقبلات", ru="Закуски", zh="小吃")),
            Category(id="cat-2", name=MultilingualText(en="Mains", ar="الرئيسية", ru="Основное", zh="主食")),
        ),
        items=(
            FoodItem(
                id="item-a",
                name=MultilingualText(en="Salmon", ar="سلمون", ru="Лосось", zh="鲜"),
                price=Decimal("30"),
                category="cat-2",
            ),
            FoodItem(
                id="item-b",
                name=MultilingualText(en="apple tart", ar="تارت التفاح", ru="Яблочный тарт", zh="苹果挞"),
                price=Decimal("12"),
                category="cat-1",
                is_special_offer=True,
            ),
            FoodItem(
                id="item-c",
                name=MultilingualText(en="Bread"),
                category="cat-1",
                is_available=False,
            ),
            FoodItem(
                id="item-d",
                name=MultilingualText(en="Zucchini Fritters", ar="", ru="", zh=""),
                category="cat-gone",
                is_special_offer=True,
            ),
        ),
    )

"""Read-only filtering, search and sorting of catalog items for the admin dashboard."""

import locale
import unicodedata

from restaurant_menu_service.models.menu_models import Catalog, FoodItem, Language
from restaurant_menu_service.models.query_models import (
    ALL_CATEGORIES,
    AvailabilityFilter,
    CatalogQuery,
    SortOrder,
)


def matches_category(item: FoodItem, category_filter: str) -> bool:
    """Check an item against a category filter.

    Items whose category no longer exists only match ``"all"``.
    """
    return category_filter == ALL_CATEGORIES or item.category == category_filter


def matches_search(item: FoodItem, search_term: str) -> bool:
    """Case-insensitive substring match against the item name in every language.

    An empty or whitespace-only term matches every item.
    """
    needle = search_term.strip().casefold()
    if not needle:
        return True
    return any(needle in item.name.get(language).casefold() for language in Language)


def matches_availability(item: FoodItem, availability_filter: AvailabilityFilter) -> bool:
    if availability_filter == AvailabilityFilter.AVAILABLE:
        return item.is_available
    if availability_filter == AvailabilityFilter.HIDDEN:
        return not item.is_available
    return True


def fold_name(value: str) -> str:
    """Casefold and strip accents, so "Éclair" compares like "eclair"."""
    normalized = unicodedata.normalize("NFKD", value)
    return "".join(char for char in normalized if not unicodedata.combining(char)).casefold()


def name_sort_key(item: FoodItem) -> str:
    """Locale-aware, case- and accent-insensitive key on the canonical name.

    Folding happens before ``strxfrm`` so the order is alphabetical even when
    the process collation locale is "C".
    """
    return locale.strxfrm(fold_name(item.name.en))


def sort_items(items: list[FoodItem], sort_order: SortOrder) -> list[FoodItem]:
    """Order items without changing the relative order of equal ones.

    Python's sort is stable, also with ``reverse=True``, so special offers keep
    catalog order among themselves under DEFAULT, and items with equal names
    keep catalog order under either name ordering.
    """
    if sort_order == SortOrder.DEFAULT:
        return sorted(items, key=lambda item: not item.is_special_offer)
    return sorted(items, key=name_sort_key, reverse=sort_order == SortOrder.DESCENDING)


def query_items(catalog: Catalog, query: CatalogQuery) -> list[FoodItem]:
    """Derive the admin item list for a query.

    Filters are applied in order (category, search, availability) and the
    result is then sorted. The catalog is never modified, so the same catalog
    and query always give the same list.

    Args:
        catalog: Catalog to read
        query: Filter, search and sort settings

    Returns:
        list: Matching items in display order
    """
    items = [
        item
        for item in catalog.items
        if matches_category(item, query.category_filter)
        and matches_search(item, query.search_term)
        and matches_availability(item, query.availability_filter)
    ]
    return sort_items(items, query.sort_order)

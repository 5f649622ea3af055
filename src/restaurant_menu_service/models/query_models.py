"""Admin catalog query models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

ALL_CATEGORIES = "all"


class AvailabilityFilter(str, Enum):
    """Three-way availability selector."""

    ALL = "all"
    AVAILABLE = "available"
    HIDDEN = "hidden"


class SortOrder(str, Enum):
    """Item ordering regimes for the admin dashboard.

    DEFAULT lists special offers first and otherwise keeps catalog order.
    ASCENDING and DESCENDING order by canonical name.
    """

    DEFAULT = "default"
    ASCENDING = "ascending"
    DESCENDING = "descending"


class CatalogQuery(BaseModel):
    """Filter, search and sort settings for listing catalog items."""

    model_config = ConfigDict(frozen=True)

    category_filter: str = Field(
        default=ALL_CATEGORIES, description="'all' or a category id"
    )
    search_term: str = Field(default="", description="Matched against item names in every language")
    availability_filter: AvailabilityFilter = Field(default=AvailabilityFilter.ALL)
    sort_order: SortOrder = Field(default=SortOrder.DEFAULT)

"""Menu data models.

These models describe the restaurant catalog: categories and dishes whose
text is held in four languages. All models are frozen; a change to the menu
always produces a new Catalog that replaces the previous one.

The serialized form uses camelCase keys (``imageUrl``, ``isVegan``...) so a
stored document keeps the layout of the browser-storage document the menu
was first kept in.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Language(str, Enum):
    """Languages the menu is published in. English is the canonical language."""

    EN = "en"
    AR = "ar"
    RU = "ru"
    ZH = "zh"


@dataclass(frozen=True)
class LanguageInfo:
    """Display metadata for a menu language."""

    code: Language
    name: str
    label: str
    flag: str
    direction: str


LANGUAGES: tuple[LanguageInfo, ...] = (
    LanguageInfo(Language.EN, "English", "English", "🇺🇸", "ltr"),
    LanguageInfo(Language.AR, "Arabic", "العربية", "🇦🇪", "rtl"),
    LanguageInfo(Language.RU, "Russian", "Русский", "🇷🇺", "ltr"),
    LanguageInfo(Language.ZH, "Chinese", "中文", "🇨🇳", "ltr"),
)

CANONICAL_LANGUAGE = Language.EN
TRANSLATED_LANGUAGES: tuple[Language, ...] = (Language.AR, Language.RU, Language.ZH)


def get_language_info(language: Language) -> LanguageInfo:
    """Look up display metadata for a language."""
    return next(info for info in LANGUAGES if info.code == language)


class MultilingualText(BaseModel):
    """A canonical English string paired with its Arabic, Russian and Chinese variants.

    Translated slots may be empty strings, meaning "not translated yet".
    """

    model_config = ConfigDict(frozen=True)

    en: str = Field(default="", description="Canonical English text")
    ar: str = Field(default="", description="Arabic translation")
    ru: str = Field(default="", description="Russian translation")
    zh: str = Field(default="", description="Simplified Chinese translation")

    def get(self, language: Language) -> str:
        """Return the slot for a language, empty string if untranslated."""
        return str(getattr(self, Language(language).value))

    @property
    def canonical(self) -> str:
        return self.en

    @property
    def missing_languages(self) -> list[Language]:
        """Languages whose slot is empty or whitespace-only."""
        return [language for language in Language if not self.get(language).strip()]

    @property
    def is_translation_complete(self) -> bool:
        """True when all four slots hold text."""
        return not self.missing_languages

    def with_canonical(self, text: str) -> "MultilingualText":
        """Return a copy whose canonical slot is exactly ``text``."""
        return self.model_copy(update={"en": text})


class Category(BaseModel):
    """Menu category model."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier for the category")
    name: MultilingualText = Field(..., description="Category name")


class FoodItem(BaseModel):
    """Menu item model.

    ``category`` is a plain reference to a Category id. It is not enforced:
    a category may be deleted while items still point at it.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Unique identifier for the menu item")
    name: MultilingualText = Field(..., description="Item name")
    description: MultilingualText = Field(
        default_factory=MultilingualText, description="Item description"
    )
    price: Decimal = Field(default=Decimal("0"), description="Item price", ge=0)
    category: str = Field(default="", description="Category this item belongs to")
    image_url: str = Field(default="", description="Image URL or embedded data URI")
    is_vegan: bool = Field(default=False)
    is_vegetarian: bool = Field(default=False)
    is_spicy: bool = Field(default=False)
    is_available: bool = Field(default=True, description="Whether item is shown to guests")
    is_special_offer: bool = Field(default=False, description="Listed first in the admin view")

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, v: object) -> object:
        """Accept JSON floats without binary rounding artifacts."""
        if isinstance(v, float):
            return Decimal(str(v))
        return v


class Catalog(BaseModel):
    """The whole menu: the single unit of persistence.

    Category and item ids are unique within their sequences. Sequence order is
    insertion order; it drives guest tab order and default item order.
    """

    model_config = ConfigDict(frozen=True)

    categories: tuple[Category, ...] = Field(default=())
    items: tuple[FoodItem, ...] = Field(default=())

    @field_validator("categories", "items")
    @classmethod
    def validate_unique_ids(cls, v: tuple) -> tuple:
        """Validate that ids are unique within a sequence."""
        ids = [entry.id for entry in v]
        if len(ids) != len(set(ids)):
            raise ValueError("ids must be unique")
        return v

    def get_category(self, category_id: str) -> Category | None:
        return next((c for c in self.categories if c.id == category_id), None)

    def get_item(self, item_id: str) -> FoodItem | None:
        return next((i for i in self.items if i.id == item_id), None)

    def to_document(self) -> str:
        """Serialize to the JSON document layout."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_document(cls, document: str) -> "Catalog":
        """Parse a JSON document produced by ``to_document``."""
        return cls.model_validate_json(document)


class ItemFields(BaseModel):
    """A partial FoodItem, as sent by the admin form.

    Only fields that were explicitly set take part in a merge; see
    ``merge_item``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: MultilingualText | None = None
    description: MultilingualText | None = None
    price: Decimal | None = Field(default=None, ge=0)
    category: str | None = None
    image_url: str | None = None
    is_vegan: bool | None = None
    is_vegetarian: bool | None = None
    is_spicy: bool | None = None
    is_available: bool | None = None
    is_special_offer: bool | None = None

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, v: object) -> object:
        """Accept JSON floats without binary rounding artifacts."""
        if isinstance(v, float):
            return Decimal(str(v))
        return v

    def provided(self) -> dict[str, object]:
        """Fields the caller set, with None treated as "not provided"."""
        return {
            field: getattr(self, field)
            for field in self.model_fields_set
            if getattr(self, field) is not None
        }


def merge_item(existing: FoodItem, patch: ItemFields) -> FoodItem:
    """Merge provided patch fields over an existing item.

    Replacement is shallow: a provided ``name`` or ``description`` replaces
    the whole MultilingualText, never individual language slots. The id is
    never changed by a merge.
    """
    return existing.model_copy(update=patch.provided())

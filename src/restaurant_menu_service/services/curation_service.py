"""Curation service for creating, editing and deleting menu content."""

import asyncio
import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from restaurant_menu_service.adapters.base_translator import TranslationAdapter
from restaurant_menu_service.models.menu_models import (
    Catalog,
    Category,
    FoodItem,
    ItemFields,
    MultilingualText,
    TRANSLATED_LANGUAGES,
    merge_item,
)
from restaurant_menu_service.observability import traced
from restaurant_menu_service.observability.metrics import record_translation_skipped
from restaurant_menu_service.services.catalog_store import CatalogStore
from restaurant_menu_service.services.exceptions import (
    ConfirmationRequiredError,
    MenuValidationError,
    NotFoundError,
    RecordBusyError,
)

logger = logging.getLogger(__name__)


@dataclass
class CurationResult:
    """Result of a curation operation.

    Attributes:
        catalog: The catalog after the operation
        record_id: Id of the category or item the operation touched
        persisted: Whether the durable store accepted the new catalog
        translation_complete: Whether every text field of the record has all
            four languages; False is a non-blocking notice for the admin
    """

    catalog: Catalog
    record_id: str
    persisted: bool = True
    translation_complete: bool = True


class CurationService:
    """Business rules for curating categories and dishes.

    Every change is built as a new Catalog and committed to the store as a
    whole. Saves of names and descriptions go through the translation
    completeness policy: text missing any translated slot is sent to the
    translation adapter once, the adapter's result only fills slots that are
    empty, the canonical English text is never replaced, and a failed
    translation never prevents the save.

    The translation call is the only await in this service. While a record is
    waiting on it, another save of the same record is rejected with
    RecordBusyError.
    """

    def __init__(self, store: CatalogStore, translator: TranslationAdapter) -> None:
        """Initialize the CurationService.

        Args:
            store: Holder of the current catalog
            translator: Translation provider adapter
        """
        self.store = store
        self.translator = translator
        self._in_flight: set[str] = set()

    # Categories

    @traced("curation.add_category")
    async def add_category(self, name: MultilingualText) -> CurationResult:
        """Append a new category.

        Args:
            name: Category name; the English slot is required

        Returns:
            CurationResult for the new category

        Raises:
            MenuValidationError: If the English name is empty
            RecordBusyError: If the same category is already being added
        """
        self._require_canonical(name, "Category name")

        with self._busy(f"category:new:{name.en}"):
            name = await self._complete_translations(name, "name")

        catalog = self.store.current
        category = Category(id=self._new_id("cat", {c.id for c in catalog.categories}), name=name)
        new_catalog = catalog.model_copy(update={"categories": (*catalog.categories, category)})

        logger.info(f"Category {category.id} added")
        return self._commit(new_catalog, category.id, name.is_translation_complete)

    @traced("curation.edit_category")
    async def edit_category(self, category_id: str, name: MultilingualText) -> CurationResult:
        """Replace the name of a category, keeping its position.

        Args:
            category_id: Category to edit
            name: New category name, replacing every language slot

        Returns:
            CurationResult for the edited category

        Raises:
            NotFoundError: If the category does not exist
            MenuValidationError: If the English name is empty
            RecordBusyError: If this category is already being saved
        """
        if self.store.current.get_category(category_id) is None:
            raise NotFoundError("Category", category_id)
        self._require_canonical(name, "Category name")

        with self._busy(f"category:{category_id}"):
            name = await self._complete_translations(name, "name")

        # The catalog may have changed while translation was awaited
        catalog = self.store.current
        if catalog.get_category(category_id) is None:
            raise NotFoundError("Category", category_id)

        categories = tuple(
            c.model_copy(update={"name": name}) if c.id == category_id else c
            for c in catalog.categories
        )
        new_catalog = catalog.model_copy(update={"categories": categories})

        logger.info(f"Category {category_id} updated")
        return self._commit(new_catalog, category_id, name.is_translation_complete)

    @traced("curation.delete_category")
    def delete_category(self, category_id: str, confirmed: bool = False) -> CurationResult:
        """Remove a category.

        Items that reference the category are left as they are; their category
        reference becomes dangling and they show up only under "all".

        Args:
            category_id: Category to remove
            confirmed: Explicit confirmation from the admin

        Returns:
            CurationResult; the catalog is unchanged if the id does not exist

        Raises:
            ConfirmationRequiredError: If the deletion was not confirmed
        """
        if not confirmed:
            raise ConfirmationRequiredError(f"Deleting category '{category_id}' must be confirmed")

        catalog = self.store.current
        if catalog.get_category(category_id) is None:
            return CurationResult(catalog=catalog, record_id=category_id)

        categories = tuple(c for c in catalog.categories if c.id != category_id)
        orphaned = sum(1 for item in catalog.items if item.category == category_id)
        logger.info(f"Category {category_id} deleted, {orphaned} items left without a category")
        return self._commit(catalog.model_copy(update={"categories": categories}), category_id)

    # Items

    @traced("curation.add_item")
    async def add_item(self, fields: ItemFields) -> CurationResult:
        """Append a new dish.

        Omitted fields take the item defaults: available, not vegan,
        vegetarian, spicy or on offer, price 0. An omitted category falls back
        to the first category, matching the admin form.

        Args:
            fields: Item fields; ``name`` with an English slot is required

        Returns:
            CurationResult for the new item

        Raises:
            MenuValidationError: If the English name is missing or empty
            RecordBusyError: If the same item is already being added
        """
        if fields.name is None:
            raise MenuValidationError("Item name is required")
        self._require_canonical(fields.name, "Item name")

        with self._busy(f"item:new:{fields.name.en}"):
            values = fields.provided()
            name, description = await asyncio.gather(
                self._complete_translations(fields.name, "name"),
                self._complete_translations(
                    fields.description or MultilingualText(), "description"
                ),
            )

        catalog = self.store.current
        values.update(name=name, description=description)
        if "category" not in values and catalog.categories:
            values["category"] = catalog.categories[0].id

        item = FoodItem(id=self._new_id("item", {i.id for i in catalog.items}), **values)
        new_catalog = catalog.model_copy(update={"items": (*catalog.items, item)})

        logger.info(f"Item {item.id} added")
        return self._commit(new_catalog, item.id, self._is_item_complete(item))

    @traced("curation.edit_item")
    async def edit_item(self, item_id: str, fields: ItemFields) -> CurationResult:
        """Merge fields over an existing dish.

        Args:
            item_id: Item to edit
            fields: Fields to replace; see ``merge_item``

        Returns:
            CurationResult for the edited item

        Raises:
            NotFoundError: If the item does not exist
            MenuValidationError: If a provided name has an empty English slot
            RecordBusyError: If this item is already being saved
        """
        existing = self.store.current.get_item(item_id)
        if existing is None:
            raise NotFoundError("Item", item_id)
        if fields.name is not None:
            self._require_canonical(fields.name, "Item name")

        merged = merge_item(existing, fields)
        with self._busy(f"item:{item_id}"):
            name, description = await asyncio.gather(
                self._complete_translations(merged.name, "name"),
                self._complete_translations(merged.description, "description"),
            )

        catalog = self.store.current
        current = catalog.get_item(item_id)
        if current is None:
            raise NotFoundError("Item", item_id)

        updated = merge_item(current, fields).model_copy(
            update={"name": name, "description": description}
        )
        items = tuple(updated if i.id == item_id else i for i in catalog.items)
        new_catalog = catalog.model_copy(update={"items": items})

        logger.info(f"Item {item_id} updated")
        return self._commit(new_catalog, item_id, self._is_item_complete(updated))

    @traced("curation.delete_item")
    def delete_item(self, item_id: str, confirmed: bool = False) -> CurationResult:
        """Remove a dish.

        Args:
            item_id: Item to remove
            confirmed: Explicit confirmation from the admin

        Returns:
            CurationResult; the catalog is unchanged if the id does not exist

        Raises:
            ConfirmationRequiredError: If the deletion was not confirmed
        """
        if not confirmed:
            raise ConfirmationRequiredError(f"Deleting item '{item_id}' must be confirmed")

        catalog = self.store.current
        if catalog.get_item(item_id) is None:
            return CurationResult(catalog=catalog, record_id=item_id)

        items = tuple(i for i in catalog.items if i.id != item_id)
        logger.info(f"Item {item_id} deleted")
        return self._commit(catalog.model_copy(update={"items": items}), item_id)

    # Translation

    @traced("curation.preview_translation")
    async def preview_translation(self, text: str) -> MultilingualText | None:
        """Translate text for the admin form without touching the catalog.

        Args:
            text: Canonical English text

        Returns:
            MultilingualText, or None if translation is unavailable
        """
        return await self.translator.translate(text)

    async def _complete_translations(self, text: MultilingualText, field: str) -> MultilingualText:
        """Fill empty translated slots of ``text`` from the translation adapter.

        Args:
            text: Text as entered by the admin
            field: Field name, for metrics and logs

        Returns:
            MultilingualText with the same English slot; slots that were filled
            in by hand are kept
        """
        if text.is_translation_complete:
            record_translation_skipped(field)
            return text
        if not text.en.strip():
            return text

        try:
            translated = await self.translator.translate(text.en)
        except Exception as e:
            logger.error(f"Translation adapter raised for {field} {text.en!r}: {e}")
            translated = None

        if translated is None:
            logger.warning(f"Translation unavailable for {field} {text.en!r}, saving as entered")
            return text

        slots = {
            language.value: text.get(language) if text.get(language).strip() else translated.get(language)
            for language in TRANSLATED_LANGUAGES
        }
        return MultilingualText(en=text.en, **slots)

    # Helpers

    def _commit(
        self, catalog: Catalog, record_id: str, translation_complete: bool = True
    ) -> CurationResult:
        persisted = self.store.commit(catalog)
        return CurationResult(
            catalog=catalog,
            record_id=record_id,
            persisted=persisted,
            translation_complete=translation_complete,
        )

    @contextmanager
    def _busy(self, record_key: str) -> Iterator[None]:
        """Mark a record as being saved for the duration of the block."""
        if record_key in self._in_flight:
            raise RecordBusyError(record_key)
        self._in_flight.add(record_key)
        try:
            yield
        finally:
            self._in_flight.discard(record_key)

    @staticmethod
    def _require_canonical(text: MultilingualText, label: str) -> None:
        if not text.en.strip():
            raise MenuValidationError(f"{label} in English is required")

    @staticmethod
    def _new_id(prefix: str, existing: set[str]) -> str:
        """Generate an id not present in ``existing``."""
        while True:
            candidate = f"{prefix}-{uuid.uuid4().hex[:12]}"
            if candidate not in existing:
                return candidate

    @staticmethod
    def _is_item_complete(item: FoodItem) -> bool:
        # An item without a description has nothing to translate there
        description_complete = (
            item.description.is_translation_complete or not item.description.en.strip()
        )
        return item.name.is_translation_complete and description_complete

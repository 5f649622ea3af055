"""In-memory holder of the current catalog, persisted on every commit."""

import logging

from restaurant_menu_service.models.menu_models import Catalog
from restaurant_menu_service.observability.metrics import record_catalog_save
from restaurant_menu_service.repositories.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class CatalogStore:
    """Single source of truth for the menu.

    The catalog is loaded once from the repository. Every accepted change is
    committed as a whole new Catalog and written through to the repository.
    There is one writer (the admin session), so the last write wins.
    """

    def __init__(self, repository: CatalogRepository) -> None:
        """Initialize the store and load the current catalog.

        Args:
            repository: Durable store for the catalog document
        """
        self.repository = repository
        self._current = repository.load()
        logger.info(
            f"Catalog loaded with {len(self._current.categories)} categories "
            f"and {len(self._current.items)} items"
        )

    @property
    def current(self) -> Catalog:
        """The committed catalog."""
        return self._current

    def commit(self, catalog: Catalog) -> bool:
        """Replace the current catalog and persist it.

        The in-memory value is replaced even when the write fails; the change
        is then only lost on restart.

        Args:
            catalog: The new catalog

        Returns:
            bool: True if the durable store accepted the write, False otherwise
        """
        self._current = catalog
        persisted = self.repository.save(catalog)
        record_catalog_save(persisted)
        if not persisted:
            logger.error("Catalog change kept in memory but not persisted")
        return persisted

"""Unit tests for the catalog document repository."""

import json
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from restaurant_menu_service.models.menu_models import Catalog
from restaurant_menu_service.repositories.catalog_repository import (
    DEFAULT_NAMESPACE,
    CatalogRepository,
)
from restaurant_menu_service.repositories.seed_catalog import build_seed_catalog


def client_error(operation: str) -> ClientError:
    return ClientError(
        {"Error": {"Code": "InternalServerError", "Message": "Server error"}}, operation
    )


@pytest.mark.unit
class TestCatalogRepository:
    """Test suite for CatalogRepository."""

    @pytest.fixture
    def mock_dynamodb(self) -> MagicMock:
        """Create a mock DynamoDB resource."""
        return MagicMock()

    @pytest.fixture
    def repository(self, mock_dynamodb: MagicMock) -> CatalogRepository:
        """Create a CatalogRepository with mocked DynamoDB."""
        return CatalogRepository(dynamodb_resource=mock_dynamodb, table_name="test-menu")

    def test_repository_initialization(self, mock_dynamodb: MagicMock) -> None:
        """Test that repository initializes correctly."""
        repo = CatalogRepository(dynamodb_resource=mock_dynamodb, table_name="test-table")
        assert repo.table_name == "test-table"
        assert repo.namespace == DEFAULT_NAMESPACE
        mock_dynamodb.Table.assert_called_once_with("test-table")

    def test_load_stored_document(
        self, repository: CatalogRepository, mock_dynamodb: MagicMock, sample_catalog: Catalog
    ) -> None:
        """Test loading a stored catalog document."""
        mock_dynamodb.Table.return_value.get_item.return_value = {
            "Item": {"namespace": DEFAULT_NAMESPACE, "document": sample_catalog.to_document()}
        }

        catalog = repository.load()

        assert catalog == sample_catalog
        mock_dynamodb.Table.return_value.get_item.assert_called_once_with(
            Key={"namespace": DEFAULT_NAMESPACE}
        )

    def test_load_original_document_layout(
        self, repository: CatalogRepository, mock_dynamodb: MagicMock
    ) -> None:
        """Test loading a document with numeric prices and camelCase flags."""
        document = {
            "categories": [{"id": "cat-1", "name": {"en": "Drinks", "ar": "", "ru": "", "zh": ""}}],
            "items": [
                {
                    "id": "item-1700000000000",
                    "name": {"en": "Mint Tea", "ar": "", "ru": "", "zh": ""},
                    "description": {"en": "", "ar": "", "ru": "", "zh": ""},
                    "price": 8.5,
                    "category": "cat-1",
                    "imageUrl": "",
                    "isVegan": True,
                    "isVegetarian": True,
                    "isSpicy": False,
                    "isAvailable": True,
                }
            ],
        }
        mock_dynamodb.Table.return_value.get_item.return_value = {
            "Item": {"namespace": DEFAULT_NAMESPACE, "document": json.dumps(document)}
        }

        catalog = repository.load()

        assert catalog.items[0].name.en == "Mint Tea"
        assert catalog.items[0].is_special_offer is False
        assert str(catalog.items[0].price) == "8.5"

    def test_load_missing_document_returns_seed(
        self, repository: CatalogRepository, mock_dynamodb: MagicMock
    ) -> None:
        """Test that an absent document falls back to the seed catalog."""
        mock_dynamodb.Table.return_value.get_item.return_value = {}

        catalog = repository.load()

        assert catalog == build_seed_catalog()
        assert len(catalog.categories) >= 2
        assert len(catalog.items) >= 1

    def test_load_malformed_document_returns_seed(
        self, repository: CatalogRepository, mock_dynamodb: MagicMock
    ) -> None:
        """Test that a corrupt document falls back to the seed catalog."""
        mock_dynamodb.Table.return_value.get_item.return_value = {
            "Item": {"namespace": DEFAULT_NAMESPACE, "document": "{not json"}
        }

        assert repository.load() == build_seed_catalog()

    def test_load_dynamodb_error_returns_seed(
        self, repository: CatalogRepository, mock_dynamodb: MagicMock
    ) -> None:
        """Test that DynamoDB errors fall back to the seed catalog."""
        mock_dynamodb.Table.return_value.get_item.side_effect = client_error("GetItem")

        assert repository.load() == build_seed_catalog()

    def test_save_writes_whole_document(
        self, repository: CatalogRepository, mock_dynamodb: MagicMock, sample_catalog: Catalog
    ) -> None:
        """Test that save writes the full catalog under the namespace key."""
        assert repository.save(sample_catalog) is True

        mock_dynamodb.Table.return_value.put_item.assert_called_once()
        item = mock_dynamodb.Table.return_value.put_item.call_args.kwargs["Item"]
        assert item["namespace"] == DEFAULT_NAMESPACE
        assert Catalog.from_document(item["document"]) == sample_catalog

    def test_save_dynamodb_error(
        self, repository: CatalogRepository, mock_dynamodb: MagicMock, sample_catalog: Catalog
    ) -> None:
        """Test that DynamoDB errors on save return False."""
        mock_dynamodb.Table.return_value.put_item.side_effect = client_error("PutItem")

        assert repository.save(sample_catalog) is False

    def test_custom_namespace(self, mock_dynamodb: MagicMock, sample_catalog: Catalog) -> None:
        """Test that a custom namespace is used as the document key."""
        repo = CatalogRepository(
            dynamodb_resource=mock_dynamodb, table_name="test-menu", namespace="other_menu"
        )

        repo.save(sample_catalog)

        item = mock_dynamodb.Table.return_value.put_item.call_args.kwargs["Item"]
        assert item["namespace"] == "other_menu"

"""Unit tests for main application entry point."""

import locale
import os
from unittest.mock import MagicMock, Mock, patch

import pytest
from fastapi import FastAPI

from restaurant_menu_service.adapters.gemini_translator import DEFAULT_MODEL
from src.main import (
    configure_collation,
    create_application,
    create_session_store,
    create_translator,
    get_dynamodb_resource,
)


@pytest.mark.unit
class TestGetDynamoDBResource:
    """Tests for get_dynamodb_resource function."""

    @patch.dict(os.environ, {"DYNAMODB_ENDPOINT": "", "AWS_REGION": "us-west-2"}, clear=True)
    @patch("src.main.boto3.resource")
    def test_creates_aws_resource_when_no_endpoint(self, mock_boto3_resource: Mock) -> None:
        """Test that AWS DynamoDB resource is created when no local endpoint configured."""
        mock_resource = MagicMock()
        mock_boto3_resource.return_value = mock_resource

        result = get_dynamodb_resource()

        mock_boto3_resource.assert_called_once_with("dynamodb", region_name="us-west-2")
        assert result == mock_resource

    @patch.dict(
        os.environ,
        {
            "DYNAMODB_ENDPOINT": "http://localhost:8000",
            "AWS_REGION": "us-east-1",
            "AWS_ACCESS_KEY_ID": "local",
            "AWS_SECRET_ACCESS_KEY": "local-secret",
        },
        clear=True,
    )
    @patch("src.main.boto3.resource")
    def test_creates_local_resource_when_endpoint_provided(self, mock_boto3_resource: Mock) -> None:
        """Test that local DynamoDB resource is created when endpoint configured."""
        mock_resource = MagicMock()
        mock_boto3_resource.return_value = mock_resource

        result = get_dynamodb_resource()

        mock_boto3_resource.assert_called_once_with(
            "dynamodb",
            endpoint_url="http://localhost:8000",
            region_name="us-east-1",
            aws_access_key_id="local",
            aws_secret_access_key="local-secret",
        )
        assert result == mock_resource

    @patch.dict(os.environ, {"DYNAMODB_ENDPOINT": ""}, clear=True)
    @patch("src.main.boto3.resource")
    def test_uses_default_region_when_not_specified(self, mock_boto3_resource: Mock) -> None:
        """Test that default region us-east-1 is used when AWS_REGION not set."""
        get_dynamodb_resource()

        mock_boto3_resource.assert_called_once_with("dynamodb", region_name="us-east-1")


@pytest.mark.unit
class TestCreateTranslator:
    """Tests for create_translator function."""

    @patch.dict(
        os.environ,
        {
            "GEMINI_API_KEY": "test-gemini-key",
            "GEMINI_MODEL": "gemini-test",
            "TRANSLATION_TIMEOUT_SECONDS": "5",
        },
        clear=True,
    )
    def test_creates_configured_translator(self) -> None:
        """Test that the Gemini adapter picks up its environment settings."""
        translator = create_translator()

        assert translator.provider_name == "gemini"
        assert translator.api_key == "test-gemini-key"
        assert translator.model == "gemini-test"
        assert translator.timeout_seconds == 5.0

    @patch.dict(os.environ, {}, clear=True)
    def test_translator_without_key_uses_defaults(self) -> None:
        """Test that a missing key still yields an adapter with default settings."""
        translator = create_translator()

        assert translator.api_key is None
        assert translator.model == DEFAULT_MODEL
        assert translator.timeout_seconds == 20.0


@pytest.mark.unit
class TestCreateSessionStore:
    """Tests for create_session_store function."""

    @patch.dict(os.environ, {}, clear=True)
    def test_default_credential(self) -> None:
        """Test that the built-in admin credential is used when none is configured."""
        sessions = create_session_store()

        assert sessions.login("betsi", "cph1") is not None

    @patch.dict(os.environ, {"ADMIN_USERNAME": "chef", "ADMIN_PASSWORD": "s3cret"}, clear=True)
    def test_configured_credential(self) -> None:
        """Test that ADMIN_USERNAME and ADMIN_PASSWORD replace the default."""
        sessions = create_session_store()

        assert sessions.login("chef", "s3cret") is not None
        assert sessions.login("betsi", "cph1") is None


@pytest.mark.unit
class TestConfigureCollation:
    """Tests for configure_collation function."""

    @patch.dict(os.environ, {"COLLATION_LOCALE": "en_US.UTF-8"}, clear=True)
    @patch("src.main.locale.setlocale")
    def test_sets_configured_collation(self, mock_setlocale: Mock) -> None:
        """Test that COLLATION_LOCALE is applied to LC_COLLATE."""
        mock_setlocale.return_value = "en_US.UTF-8"

        configure_collation()

        mock_setlocale.assert_called_once_with(locale.LC_COLLATE, "en_US.UTF-8")

    @patch.dict(os.environ, {}, clear=True)
    @patch("src.main.locale.setlocale")
    def test_defaults_to_environment_locale(self, mock_setlocale: Mock) -> None:
        """Test that the environment locale is used when nothing is configured."""
        configure_collation()

        mock_setlocale.assert_called_once_with(locale.LC_COLLATE, "")

    @patch.dict(os.environ, {"COLLATION_LOCALE": "xx_XX.UTF-8"}, clear=True)
    @patch("src.main.locale.setlocale")
    def test_missing_locale_does_not_fail_startup(self, mock_setlocale: Mock) -> None:
        """Test that an uninstalled locale is tolerated."""
        mock_setlocale.side_effect = locale.Error("unsupported locale setting")

        configure_collation()

        mock_setlocale.assert_called_once()


@pytest.mark.unit
class TestCreateApplication:
    """Tests for create_application function."""

    @patch("src.main.configure_collation")
    @patch("src.main.setup_observability")
    @patch("src.main.configure_logging")
    @patch("src.main.get_dynamodb_resource")
    @patch("src.main.CatalogRepository")
    @patch("src.main.CatalogStore")
    @patch("src.main.CurationService")
    @patch("src.main.create_translator")
    @patch("src.main.create_session_store")
    @patch("src.main.create_app")
    @patch.dict(
        os.environ,
        {
            "LOG_LEVEL": "DEBUG",
            "DYNAMODB_MENU_TABLE": "test-menu-table",
            "MENU_NAMESPACE": "test_namespace",
        },
        clear=True,
    )
    def test_creates_application_with_all_dependencies(
        self,
        mock_create_app: Mock,
        mock_create_sessions: Mock,
        mock_create_translator: Mock,
        mock_curation_service: Mock,
        mock_catalog_store: Mock,
        mock_catalog_repo: Mock,
        mock_get_dynamodb: Mock,
        mock_configure_logging: Mock,
        mock_setup_observability: Mock,
        mock_configure_collation: Mock,
    ) -> None:
        """Test that application is created with all dependencies properly wired."""
        mock_dynamodb = MagicMock()
        mock_get_dynamodb.return_value = mock_dynamodb

        mock_repository = MagicMock()
        mock_catalog_repo.return_value = mock_repository

        mock_store = MagicMock()
        mock_catalog_store.return_value = mock_store

        mock_translator = MagicMock()
        mock_create_translator.return_value = mock_translator

        mock_curation = MagicMock()
        mock_curation_service.return_value = mock_curation

        mock_sessions = MagicMock()
        mock_create_sessions.return_value = mock_sessions

        mock_app = MagicMock(spec=FastAPI)
        mock_create_app.return_value = mock_app

        result = create_application()

        mock_configure_logging.assert_called_once_with("DEBUG")
        mock_catalog_repo.assert_called_once_with(
            dynamodb_resource=mock_dynamodb,
            table_name="test-menu-table",
            namespace="test_namespace",
        )
        mock_catalog_store.assert_called_once_with(repository=mock_repository)
        mock_curation_service.assert_called_once_with(store=mock_store, translator=mock_translator)
        mock_create_app.assert_called_once_with(
            store=mock_store,
            curation_service=mock_curation,
            sessions=mock_sessions,
        )
        mock_configure_collation.assert_called_once_with()
        mock_setup_observability.assert_called_once_with(mock_app)
        assert result == mock_app

    @patch("src.main.configure_collation")
    @patch("src.main.setup_observability")
    @patch("src.main.configure_logging")
    @patch("src.main.get_dynamodb_resource")
    @patch("src.main.CatalogRepository")
    @patch("src.main.CatalogStore")
    @patch("src.main.create_app")
    @patch.dict(os.environ, {}, clear=True)
    def test_uses_default_table_and_namespace(
        self,
        mock_create_app: Mock,
        mock_catalog_store: Mock,
        mock_catalog_repo: Mock,
        mock_get_dynamodb: Mock,
        mock_configure_logging: Mock,
        mock_setup_observability: Mock,
        mock_configure_collation: Mock,
    ) -> None:
        """Test the defaults used when no table or namespace is configured."""
        mock_get_dynamodb.return_value = MagicMock()
        mock_create_app.return_value = MagicMock(spec=FastAPI)

        create_application()

        mock_configure_logging.assert_called_once_with("INFO")
        kwargs = mock_catalog_repo.call_args.kwargs
        assert kwargs["table_name"] == "restaurant-menu-catalog"
        assert kwargs["namespace"] == "crystal_plaza_menu_data"

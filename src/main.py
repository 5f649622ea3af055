"""Main application entry point for the restaurant menu service.

This module provides the FastAPI application factory and configuration
for running the service locally or in production.
"""

import locale
import logging
import os
from typing import Any

import boto3
from fastapi import FastAPI

from restaurant_menu_service.adapters.base_translator import TranslationAdapter
from restaurant_menu_service.adapters.gemini_translator import DEFAULT_MODEL, GeminiTranslationAdapter
from restaurant_menu_service.auth.admin_session import AdminCredentialValidator, AdminSessionStore
from restaurant_menu_service.handlers.api_handler import create_app
from restaurant_menu_service.observability import configure_logging, setup_observability
from restaurant_menu_service.repositories.catalog_repository import (
    DEFAULT_NAMESPACE,
    CatalogRepository,
)
from restaurant_menu_service.services.catalog_store import CatalogStore
from restaurant_menu_service.services.curation_service import CurationService

logger = logging.getLogger(__name__)


def get_dynamodb_resource() -> Any:
    """Create DynamoDB resource with appropriate configuration.

    Returns:
        Boto3 DynamoDB resource configured for environment
    """
    endpoint_url = os.getenv("DYNAMODB_ENDPOINT")
    region = os.getenv("AWS_REGION", "us-east-1")

    if endpoint_url:
        logger.info(f"Using local DynamoDB at {endpoint_url}")
        return boto3.resource(
            "dynamodb",
            endpoint_url=endpoint_url,
            region_name=region,
            aws_access_key_id=os.getenv("AWS_ACCESS_KEY_ID"),
            aws_secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY"),
        )

    logger.info(f"Using AWS DynamoDB in region {region}")
    # Production - boto3 will use default credential chain (IAM role, env vars, etc.)
    return boto3.resource("dynamodb", region_name=region)


def create_translator() -> TranslationAdapter:
    """Create the translation adapter from environment variables.

    Returns:
        Configured Gemini adapter; without GEMINI_API_KEY every translation
        reports unavailable and menu changes are saved untranslated
    """
    api_key = os.getenv("GEMINI_API_KEY")
    if not api_key:
        logger.warning("GEMINI_API_KEY not configured - menu text will not be auto-translated")

    return GeminiTranslationAdapter(
        api_key=api_key,
        model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        timeout_seconds=float(os.getenv("TRANSLATION_TIMEOUT_SECONDS", "20")),
    )


def configure_collation() -> None:
    """Set the collation locale used to order dish names in the admin list.

    COLLATION_LOCALE defaults to "", the locale of the environment. A locale
    that is not installed is logged and the current collation is kept.
    """
    requested = os.getenv("COLLATION_LOCALE", "")
    try:
        active = locale.setlocale(locale.LC_COLLATE, requested)
    except locale.Error as e:
        logger.warning(f"Collation locale {requested!r} unavailable, keeping current: {e}")
        return

    logger.info(f"Collation locale set to {active}")


def create_session_store() -> AdminSessionStore:
    """Create the admin session store from environment variables.

    Returns:
        AdminSessionStore checking ADMIN_USERNAME / ADMIN_PASSWORD
    """
    validator = AdminCredentialValidator(
        username=os.getenv("ADMIN_USERNAME", "betsi"),
        password=os.getenv("ADMIN_PASSWORD", "cph1"),
    )
    return AdminSessionStore(validator=validator)


def create_application() -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    This factory function:
    1. Configures logging and the name collation locale
    2. Creates the DynamoDB-backed catalog store
    3. Creates the translation adapter and curation service
    4. Creates the FastAPI app with guest and admin endpoints
    5. Sets up observability

    Returns:
        Configured FastAPI application instance
    """
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))
    configure_collation()

    logger.info("Initializing restaurant menu service...")

    table_name = os.getenv("DYNAMODB_MENU_TABLE", "restaurant-menu-catalog")
    namespace = os.getenv("MENU_NAMESPACE", DEFAULT_NAMESPACE)
    repository = CatalogRepository(
        dynamodb_resource=get_dynamodb_resource(),
        table_name=table_name,
        namespace=namespace,
    )
    store = CatalogStore(repository=repository)

    logger.info(f"Catalog store configured - table: {table_name}, namespace: {namespace}")

    curation_service = CurationService(store=store, translator=create_translator())

    app = create_app(
        store=store,
        curation_service=curation_service,
        sessions=create_session_store(),
    )
    setup_observability(app)

    logger.info("Restaurant menu service initialized successfully")

    return app


# Create the FastAPI application instance (only when not in test mode)
# This prevents the app from being created during test collection
if os.getenv("ENVIRONMENT") != "test":  # noqa: SIM108
    app = create_application()
else:
    # Create a placeholder app for test imports
    app = FastAPI()


if __name__ == "__main__":
    """Run the application with uvicorn when executed directly."""
    import uvicorn

    port = int(os.getenv("PORT", "8001"))
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Starting development server on {host}:{port}")
    logger.info(f"API documentation available at http://{host}:{port}/docs")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )

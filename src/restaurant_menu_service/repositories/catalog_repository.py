"""DynamoDB repository for the menu catalog document.

The whole catalog is stored as one JSON document in a single DynamoDB item,
keyed by an application namespace. Following the rest of the service, we use
simple return values (seed catalog / False) for expected failures rather than
raising exceptions.
"""

import logging

from botocore.exceptions import BotoCoreError, ClientError
from mypy_boto3_dynamodb.service_resource import DynamoDBServiceResource, Table
from pydantic import ValidationError

from restaurant_menu_service.models.menu_models import Catalog
from restaurant_menu_service.repositories.seed_catalog import build_seed_catalog

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "crystal_plaza_menu_data"


class CatalogRepository:
    """Repository for loading and saving the catalog document.

    Manages one DynamoDB item with ``namespace`` as partition key and the
    serialized catalog in the ``document`` attribute.
    """

    def __init__(
        self,
        dynamodb_resource: DynamoDBServiceResource,
        table_name: str,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        """Initialize repository.

        Args:
            dynamodb_resource: Boto3 DynamoDB resource
            table_name: Name of the DynamoDB table
            namespace: Key of the catalog document
        """
        self.dynamodb = dynamodb_resource
        self.table_name = table_name
        self.namespace = namespace
        self.table: Table = dynamodb_resource.Table(table_name)

    def load(self) -> Catalog:
        """Read the catalog document.

        Returns:
            Catalog: The stored catalog, or the seed catalog if the document is
            absent, unreadable or malformed
        """
        try:
            response = self.table.get_item(Key={"namespace": self.namespace})
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to load catalog document, using seed catalog: {e}")
            return build_seed_catalog()

        if "Item" not in response or "document" not in response["Item"]:
            logger.info(f"No catalog document under '{self.namespace}', using seed catalog")
            return build_seed_catalog()

        try:
            return Catalog.from_document(response["Item"]["document"])
        except ValidationError as e:
            logger.error(f"Stored catalog document is malformed, using seed catalog: {e}")
            return build_seed_catalog()

    def save(self, catalog: Catalog) -> bool:
        """Write the whole catalog document.

        Args:
            catalog: Catalog to save

        Returns:
            bool: True if save succeeded, False otherwise
        """
        try:
            self.table.put_item(
                Item={"namespace": self.namespace, "document": catalog.to_document()}
            )
            return True

        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to save catalog document: {e}")
            return False

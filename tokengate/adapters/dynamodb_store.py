"""
DynamoDB Credential Store - AWS-native credential storage.
"""

from typing import Optional, Dict, Any
from tokengate.ports.credential_store_port import CredentialStorePort
from tokengate.domain.credential import Credential
from tokengate.errors import CredentialStoreError, DuplicateCredentialError


class DynamoDBCredentialStore(CredentialStorePort):
    """
    DynamoDB-backed credential storage.

    Requires: pip install boto3

    Table schema:
        - Partition key: identifier (S)
    """

    def __init__(
        self,
        table_name: str = "tokengate-credentials",
        region_name: str = "us-east-1",
        timeout: float = 5.0,
        table=None,
    ):
        """
        Initialize DynamoDB credential store.

        Args:
            table_name: DynamoDB table name
            region_name: AWS region
            timeout: Connect/read timeout in seconds
            table: Pre-built boto3 Table resource (skips client creation)
        """
        try:
            import boto3
            from botocore.config import Config
            from botocore.exceptions import BotoCoreError, ClientError
        except ImportError:
            raise ImportError("boto3 package required: pip install boto3")

        self._client_error = ClientError
        self._botocore_error = BotoCoreError
        self._table_name = table_name

        if table is None:
            config = Config(
                connect_timeout=timeout,
                read_timeout=timeout,
                retries={"total_max_attempts": 1},
            )
            dynamodb = boto3.resource("dynamodb", region_name=region_name, config=config)
            table = dynamodb.Table(table_name)
        self._table = table

    def find_by_identifier(self, identifier: str) -> Optional[Credential]:
        """Get a credential from DynamoDB."""
        try:
            response = self._table.get_item(
                Key={"identifier": identifier},
                ConsistentRead=True,
            )
        except (self._client_error, self._botocore_error) as e:
            raise CredentialStoreError(f"dynamodb lookup failed: {e}") from e

        if "Item" not in response:
            return None

        try:
            return self._item_to_credential(response["Item"])
        except (KeyError, ValueError) as e:
            raise CredentialStoreError(f"corrupt credential record for {identifier!r}") from e

    def insert(self, credential: Credential) -> None:
        """Insert a credential with a conditional put (no overwrite)."""
        try:
            self._table.put_item(
                Item=self._credential_to_item(credential),
                ConditionExpression="attribute_not_exists(identifier)",
            )
        except self._client_error as e:
            if e.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                raise DuplicateCredentialError(credential.identifier) from e
            raise CredentialStoreError(f"dynamodb insert failed: {e}") from e
        except self._botocore_error as e:
            raise CredentialStoreError(f"dynamodb insert failed: {e}") from e

    def _credential_to_item(self, credential: Credential) -> Dict[str, Any]:
        """Convert Credential to DynamoDB item."""
        return credential.to_dict()

    def _item_to_credential(self, item: Dict[str, Any]) -> Credential:
        """Convert DynamoDB item to Credential."""
        return Credential.from_dict(item)

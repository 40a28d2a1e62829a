"""
AWS Secrets Manager Secret Source - AWS-native secret loading.
"""

import json
from typing import Optional
from tokengate.ports.secret_source_port import SecretSourcePort
from tokengate.errors import SecretSourceError


class AWSSecretsSource(SecretSourcePort):
    """
    AWS Secrets Manager secret source.

    Accepts either a plain SecretString or a JSON object with a "value" key.
    Requires: pip install boto3
    """

    def __init__(
        self,
        region_name: str = "us-east-1",
        prefix: str = "tokengate/",
        client=None,
    ):
        """
        Initialize AWS Secrets Manager source.

        Args:
            region_name: AWS region
            prefix: Secret name prefix (default: tokengate/)
            client: Pre-built secretsmanager client
        """
        try:
            import boto3
            from botocore.exceptions import BotoCoreError, ClientError
        except ImportError:
            raise ImportError("boto3 package required: pip install boto3")

        self._errors = (BotoCoreError, ClientError)
        self._prefix = prefix
        self._client = client or boto3.client("secretsmanager", region_name=region_name)

    def _get_secret_id(self, name: str) -> str:
        """Get full secret ID for a name."""
        return f"{self._prefix}{name}"

    def load(self, name: str) -> Optional[str]:
        secret_id = self._get_secret_id(name)

        try:
            response = self._client.get_secret_value(SecretId=secret_id)
        except self._client.exceptions.ResourceNotFoundException:
            return None
        except self._errors as e:
            raise SecretSourceError(f"Secrets Manager read failed for {secret_id}: {e}") from e

        secret_string = response.get("SecretString")
        if secret_string is None:
            return None

        try:
            data = json.loads(secret_string)
        except json.JSONDecodeError:
            return secret_string

        if isinstance(data, dict):
            return data.get("value")
        return secret_string

# spacebits/sources/secrets.py
import logging
from typing import Optional, Protocol

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from spacebits.errors import SecretResolutionError

log = logging.getLogger(__name__)


class SecretResolver(Protocol):
    def resolve(self, name: str) -> str:
        """Return the decrypted value of the named secret."""
        ...


class SsmSecretResolver:
    """Reads SecureString parameters from AWS Systems Manager Parameter Store."""
    def __init__(self, client=None, region_name: Optional[str] = None):
        self.client = client or boto3.client("ssm", region_name=region_name)

    def resolve(self, name: str) -> str:
        log.info("resolving secret parameter %s", name)
        try:
            resp = self.client.get_parameter(Name=name, WithDecryption=True)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "")
            raise SecretResolutionError(f"parameter {name} could not be read ({code or e})") from e
        except BotoCoreError as e:
            raise SecretResolutionError(f"parameter {name} could not be read ({e})") from e

        value = (resp.get("Parameter") or {}).get("Value")
        if not value:
            raise SecretResolutionError(f"parameter {name} has no value")
        return value

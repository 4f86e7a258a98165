"""Secret sources for the app registration client secret.

In Azure Functions the secret usually lives in Key Vault and is surfaced
to the process as an app setting through a Key Vault reference, so reading
the environment is enough to resolve it.
"""

import logging
import os
from collections.abc import Mapping

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class EnvironmentSecretSource:
    """Reads secrets from process environment variables."""

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix

    def get_secret(self, name: str) -> str:
        key = f"{self.prefix}{name}"
        value = os.environ.get(key)
        if not value:
            logger.error(f"Secret {key} is not set in the environment")
            raise ConfigurationError(f"Secret not found: {key}", details={"name": key})
        return value


class MappingSecretSource:
    """Serves secrets from an in-memory mapping."""

    def __init__(self, secrets: Mapping[str, str]) -> None:
        self._secrets = dict(secrets)

    def get_secret(self, name: str) -> str:
        try:
            return self._secrets[name]
        except KeyError:
            raise ConfigurationError(f"Secret not found: {name}", details={"name": name}) from None

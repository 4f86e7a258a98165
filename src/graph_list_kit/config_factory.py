"""Factory helpers for building ``GraphConfig`` instances.

Supports explicit values, dictionaries, ``.env`` files and plain
environment variables, and layering several configs on top of each other.
Every validation problem surfaces as ``ConfigurationError``.
"""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .exceptions import ConfigurationError
from .models.config import GraphConfig

logger = logging.getLogger(__name__)

DEFAULT_ENV_SEARCH_PATHS = (".env", ".env.local")


def _build(**kwargs: Any) -> GraphConfig:
    try:
        return GraphConfig(**kwargs)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


class ConfigFactory:
    """Builds validated configuration objects."""

    @staticmethod
    def create(**kwargs: Any) -> GraphConfig:
        """Create a config from keyword arguments (environment fills the rest).

        Raises:
            ConfigurationError: If a value is invalid
        """
        return _build(**kwargs)

    @staticmethod
    def from_dict(values: dict[str, Any]) -> GraphConfig:
        """Create a config from a dictionary of field values."""
        return _build(**values)

    @staticmethod
    def from_environment_only() -> GraphConfig:
        """Create a config from ``GRAPH_LIST_*`` environment variables only."""
        return _build(_env_file=None)

    @staticmethod
    def from_env_file(path: str | Path, required: bool = False) -> GraphConfig:
        """Load a config from a ``.env`` file, with environment variables taking precedence.

        Args:
            path: Path to the ``.env`` file
            required: Raise if the file does not exist instead of falling
                back to the environment

        Raises:
            ConfigurationError: If the file is required but missing, or a
                value is invalid
        """
        env_path = Path(path)
        if not env_path.is_file():
            if required:
                raise ConfigurationError(f".env file not found: {env_path}")
            logger.debug(f"No .env file at {env_path}, using environment variables")
            return ConfigFactory.from_environment_only()

        logger.debug(f"Loading configuration from {env_path}")
        return _build(_env_file=env_path)

    @staticmethod
    def from_env(
        search_paths: Sequence[str | Path] = DEFAULT_ENV_SEARCH_PATHS,
        required: bool = False,
    ) -> GraphConfig:
        """Load a config from the first ``.env`` file found in ``search_paths``.

        Raises:
            ConfigurationError: If ``required`` and no file exists
        """
        for candidate in search_paths:
            if Path(candidate).is_file():
                return ConfigFactory.from_env_file(candidate, required=True)

        if required:
            raise ConfigurationError(
                f"No .env file found in: {', '.join(str(p) for p in search_paths)}"
            )
        return ConfigFactory.from_environment_only()

    @staticmethod
    def merge(*configs: GraphConfig, base: GraphConfig | None = None) -> GraphConfig:
        """Layer configs; explicitly set fields of later configs win.

        Raises:
            ValueError: If no configs are given
        """
        if not configs:
            raise ValueError("At least one config is required to merge")

        merged: dict[str, Any] = base.model_dump() if base is not None else {}
        for config in configs:
            merged.update(config.model_dump(exclude_unset=True))
        return _build(**merged)


def load_config(env_file: str | Path | None = None, required: bool = False) -> GraphConfig:
    """Load configuration from a ``.env`` file or the default search paths."""
    if env_file is not None:
        return ConfigFactory.from_env_file(env_file, required=required)
    return ConfigFactory.from_env(required=required)


def create_config(**kwargs: Any) -> GraphConfig:
    """Shortcut for ``ConfigFactory.create``."""
    return ConfigFactory.create(**kwargs)

"""Protocols for dependency injection.

These structural types let callers swap in their own HTTP client,
authentication, configuration or secret storage without subclassing
anything from this package.
"""

from typing import Any, Protocol, runtime_checkable

import httpx


@runtime_checkable
class AsyncHTTPClient(Protocol):
    """Async HTTP client interface (satisfied by ``httpx.AsyncClient``)."""

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send a request and return the full response."""
        ...

    async def aclose(self) -> None:
        """Release pooled connections."""
        ...


@runtime_checkable
class AuthProvider(Protocol):
    """Supplies authentication headers for list requests."""

    def get_headers(self) -> dict[str, str]:
        """Return headers to merge into every request."""
        ...

    def validate_token(self) -> bool:
        """Return True if the held credential looks usable."""
        ...


@runtime_checkable
class ConfigProvider(Protocol):
    """Settings consumed by the clients (satisfied by ``GraphConfig``)."""

    def get_graph_base_url(self) -> str: ...

    def get_authority_url(self) -> str: ...

    @property
    def default_scope(self) -> str: ...

    @property
    def timeout(self) -> float: ...

    @property
    def max_connections(self) -> int: ...

    @property
    def verify_ssl(self) -> bool: ...

    @property
    def page_limit(self) -> int: ...

    @property
    def max_concurrency(self) -> int | None: ...

    @property
    def strict_classification(self) -> bool: ...


@runtime_checkable
class SecretSource(Protocol):
    """Looks up a named secret such as an app registration client secret."""

    def get_secret(self, name: str) -> str:
        """Return the secret value.

        Raises:
            ConfigurationError: If the secret does not exist
        """
        ...

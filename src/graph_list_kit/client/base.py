"""Base class for the token, paging and bulk clients.

Holds configuration, builds request headers, and scopes the lifetime of the
underlying HTTP client to a single top-level operation.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from ..auth.bearer import BearerTokenAuth
from ..exceptions import ConfigurationError
from ..models.config import GraphConfig
from ..models.credentials import AccessToken
from ..protocols import AsyncHTTPClient, AuthProvider, ConfigProvider

logger = logging.getLogger(__name__)

# httpx.InvalidURL is not an HTTPError; a malformed cursor or item id raises it
TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


class BaseClient:
    """Shared plumbing for graph-list-kit clients.

    Without an injected HTTP client, each top-level operation opens its own
    ``httpx.AsyncClient`` and closes it when the operation ends, so no
    headers or connections leak between calls. An injected client is reused
    for every operation and never closed here; its owner closes it.

    Not intended to be used directly.
    """

    def __init__(
        self,
        config: ConfigProvider | None = None,
        http_client: AsyncHTTPClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Settings provider (defaults to ``GraphConfig()``)
            http_client: Async HTTP client to reuse across operations
        """
        self.config: ConfigProvider = config if config is not None else GraphConfig()
        self.graph_base_url = self.config.get_graph_base_url()
        self._http_client = http_client

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create an async HTTP client with connection pooling.

        Returns:
            Configured httpx.AsyncClient instance
        """
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            limits=httpx.Limits(
                max_connections=self.config.max_connections,
                max_keepalive_connections=self.config.max_connections,
            ),
        )

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncHTTPClient]:
        """Yield the HTTP client for one top-level operation."""
        if self._http_client is not None:
            yield self._http_client
            return

        client = self._create_default_http_client()
        try:
            yield client
        finally:
            await client.aclose()

    def _get_headers(
        self,
        auth: AuthProvider | None = None,
        extra_headers: dict[str, str] | None = None,
    ) -> dict[str, str]:
        """Build request headers.

        Args:
            auth: Authentication provider, if the request needs one
            extra_headers: Additional headers to include

        Returns:
            Complete headers dictionary
        """
        headers = {"Accept": "application/json"}
        if auth is not None:
            headers.update(auth.get_headers())
        if extra_headers:
            headers.update(extra_headers)
        return headers

    @staticmethod
    def _bearer(token: AccessToken | str) -> BearerTokenAuth:
        """Wrap a token for request headers.

        Raises:
            ConfigurationError: If the token is empty
        """
        auth = BearerTokenAuth(token)
        if not auth.validate_token():
            raise ConfigurationError("Access token is required and cannot be empty")
        return auth

"""Asynchronous facade over the token, paging and bulk clients.

One object, one configuration, one (optional) injected HTTP client for
the whole acquire-token / read / write workflow.
"""

import logging
from collections.abc import Mapping, Sequence

from ..models.credentials import AccessToken, Credentials
from ..models.request import PageQuery, ResourceLocator, WriteItem
from ..models.result import Failure, Success
from ..operations.bulk import BulkMutator
from ..operations.classifier import ResultClassifier
from ..operations.pagination import PageFetcher
from ..operations.token import TokenClient
from ..protocols import AsyncHTTPClient, ConfigProvider
from .base import BaseClient

logger = logging.getLogger(__name__)


class GraphListClient(BaseClient):
    """Asynchronous client for Microsoft Graph SharePoint lists.

    Example:
        ```python
        import asyncio
        from graph_list_kit import Credentials, GraphListClient, ResourceLocator, NewItem

        async def main():
            client = GraphListClient()
            token = (await client.acquire_token(credentials)).unwrap()
            locator = ResourceLocator(site_id="contoso.sharepoint.com,1,2", list_id="abc")

            read = await client.get_items(locator, token)
            print(read.value)

            write = await client.create_items(
                [NewItem(json_body='{"fields": {"Title": "Widget"}}')], locator, token
            )
            print(write.ok)

        asyncio.run(main())
        ```

    If an HTTP client is injected it is shared by every call and stays
    open; its owner closes it. Without one, each call opens and closes its
    own client, so there is nothing for this facade to release.
    """

    def __init__(
        self,
        config: ConfigProvider | None = None,
        http_client: AsyncHTTPClient | None = None,
        classifier: ResultClassifier | None = None,
    ) -> None:
        super().__init__(config, http_client)
        self.tokens = TokenClient(self.config, http_client)
        self.pages = PageFetcher(self.config, http_client)
        self.bulk = BulkMutator(self.config, http_client, classifier=classifier)

        logger.info(f"Initialized Graph list client for {self.graph_base_url}")

    async def __aenter__(self) -> "GraphListClient":
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the facade. An injected HTTP client is left open."""
        logger.info("Closed Graph list client")

    async def acquire_token(self, credentials: Credentials) -> Success[AccessToken] | Failure:
        """Exchange credentials for a bearer token. See ``TokenClient``."""
        return await self.tokens.acquire_token(credentials)

    async def get_items(
        self,
        locator: ResourceLocator,
        token: AccessToken | str,
        query: PageQuery | None = None,
    ) -> Success[str] | Failure:
        """Read every item of a list as one JSON array. See ``PageFetcher``."""
        return await self.pages.fetch_all(locator, token, query)

    async def create_items(
        self,
        items: Sequence[WriteItem] | None,
        locator: ResourceLocator,
        token: AccessToken | str,
    ) -> Success[str] | Failure:
        """Create list items concurrently. See ``BulkMutator.execute``."""
        return await self.bulk.execute(items, locator, token)

    async def update_items(
        self,
        updates: Mapping[str, str] | None,
        locator: ResourceLocator,
        token: AccessToken | str,
    ) -> Success[str] | Failure:
        """Patch list item fields concurrently. See ``BulkMutator.execute_updates``."""
        return await self.bulk.execute_updates(updates, locator, token)

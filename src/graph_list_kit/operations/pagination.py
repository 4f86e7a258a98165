"""Paginated reads of list items.

Pages are requested one after another, following the ``@odata.nextLink``
cursor each page advertises, and their item arrays are concatenated into a
single JSON array. The raw text of every item is kept exactly as the
server sent it.
"""

import logging
from typing import NamedTuple

from ..client.base import TRANSPORT_ERRORS, BaseClient
from ..exceptions import (
    GraphListError,
    PageTransportError,
    UnparsableBodyError,
    UpstreamStatusError,
)
from ..models.credentials import AccessToken
from ..models.request import PageQuery, ResourceLocator
from ..models.result import Failure, Success
from ..protocols import AuthProvider
from ..utils.json_scan import find_member, scan_object

logger = logging.getLogger(__name__)

ITEMS_KEY = "value"
NEXT_LINK_KEY = "@odata.nextLink"


class RawPage(NamedTuple):
    """Item array contents and continuation cursor of one page."""

    item_fragment: str
    next_cursor: str | None


def parse_page(body: str) -> RawPage:
    """Extract the item array text and next-page cursor from a page body.

    Keys are matched ignoring case, so ``Value`` or ``@odata.NEXTLINK`` are
    found too.

    Args:
        body: Raw response text

    Returns:
        RawPage with the text between the array brackets (stripped) and the
        cursor, or None when this is the last page

    Raises:
        UnparsableBodyError: If the body is not a JSON object with an item array
    """
    try:
        members = scan_object(body)
    except ValueError as e:
        raise UnparsableBodyError(
            f"Unable to parse page response as a JSON object: {e}",
            details={"body_preview": body[:500]},
        ) from e

    items = find_member(members, ITEMS_KEY)
    if items is None or not isinstance(items.value, list):
        raise UnparsableBodyError(
            f"Page response has no '{ITEMS_KEY}' array",
            details={"body_preview": body[:500]},
        )

    cursor = find_member(members, NEXT_LINK_KEY)
    next_cursor = cursor.value if cursor is not None and isinstance(cursor.value, str) else None

    return RawPage(
        item_fragment=items.raw[1:-1].strip(),
        next_cursor=next_cursor or None,
    )


class PageFetcher(BaseClient):
    """Reads every item of a list, page by page.

    Example:
        >>> fetcher = PageFetcher(config)
        >>> result = await fetcher.fetch_all(locator, token, PageQuery(item_fields=["Title"]))
        >>> if result.ok:
        ...     items = json.loads(result.value)
    """

    def build_items_url(self, locator: ResourceLocator, query: PageQuery) -> str:
        """Build the first page URL including any ``expand``/``select`` filters."""
        return locator.items_url(self.graph_base_url) + query.build_query_string()

    async def fetch_all(
        self,
        locator: ResourceLocator,
        token: AccessToken | str,
        query: PageQuery | None = None,
    ) -> Success[str] | Failure:
        """Fetch all pages of a list and combine their items.

        Stops at the last page or after ``query.page_limit`` requests,
        whichever comes first. Hitting the limit is not an error; it is
        logged and reported as ``details["truncated"]``.

        Args:
            locator: Site and list to read
            token: Bearer token
            query: Field filters and page limit (defaults to the configured limit)

        Returns:
            Success with the JSON array text, or Failure when any page fails.
            Pages fetched before a failure are discarded.
        """
        if query is None:
            query = PageQuery(page_limit=self.config.page_limit)

        try:
            auth = self._bearer(token)
            url = self.build_items_url(locator, query)
            collection, pages, truncated = await self._fetch_pages(url, auth, query.page_limit)
        except GraphListError as e:
            logger.error(f"Read of list {locator.list_id} failed: {e.message}")
            return Failure.from_error(e)

        logger.info(f"Read {pages} page(s) from list {locator.list_id}")
        return Success(value=collection, details={"pages": pages, "truncated": truncated})

    async def _fetch_pages(
        self, url: str, auth: AuthProvider, page_limit: int
    ) -> tuple[str, int, bool]:
        headers = self._get_headers(auth)
        fragments: list[str] = []
        pages = 0
        truncated = False

        async with self._session() as client:
            for _ in range(page_limit):
                logger.debug(f"GET {url}")
                try:
                    response = await client.request("GET", url, headers=headers)
                except TRANSPORT_ERRORS as e:
                    raise PageTransportError(f"Page request failed: {e}") from e
                pages += 1

                body = response.text
                if response.status_code != 200:
                    raise UpstreamStatusError(
                        f"{response.status_code} : {body}",
                        status_code=response.status_code,
                        body=body,
                    )

                page = parse_page(body)
                if page.item_fragment:
                    fragments.append(page.item_fragment)

                if page.next_cursor is None:
                    break
                url = page.next_cursor
            else:
                truncated = True
                logger.warning(
                    f"Stopped after {page_limit} page(s) with more pages available; "
                    "the result is incomplete"
                )

        return "[" + ", ".join(fragments) + "]", pages, truncated

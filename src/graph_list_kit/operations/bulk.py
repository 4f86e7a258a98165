"""Concurrent bulk creation and partial update of list items.

Every item becomes one request. All requests are dispatched together over
one HTTP client and the batch completes only when every request has
produced a response or failed; one item's failure never cancels another.
"""

import asyncio
import contextlib
import logging
from collections.abc import Mapping, Sequence

from pydantic import ValidationError

from ..client.base import TRANSPORT_ERRORS, BaseClient
from ..exceptions import BulkError, BulkTransportError, GraphListError, NoItemsError
from ..models.credentials import AccessToken
from ..models.request import ResourceLocator, UpdateItem, WriteItem
from ..models.result import Failure, Success, WriteOutcome
from ..protocols import AsyncHTTPClient, AuthProvider, ConfigProvider
from .classifier import ResultClassifier

logger = logging.getLogger(__name__)


class BulkMutator(BaseClient):
    """Writes many list items concurrently and merges the responses.

    Response bodies are joined in completion order, not submission order.
    Use ``details["outcomes"]`` (each outcome carries the submission index
    and item id) to correlate responses with items.

    Example:
        >>> mutator = BulkMutator(config)
        >>> items = [NewItem(json_body='{"fields": {"Title": "A"}}')]
        >>> result = await mutator.execute(items, locator, token)
        >>> print(result.ok, result.value if result.ok else result.payload)
    """

    def __init__(
        self,
        config: ConfigProvider | None = None,
        http_client: AsyncHTTPClient | None = None,
        classifier: ResultClassifier | None = None,
    ) -> None:
        """Initialize the bulk mutator.

        Args:
            config: Settings provider (defaults to ``GraphConfig()``)
            http_client: Async HTTP client to reuse across operations
            classifier: Verdict for combined responses (defaults to the
                marker scan, strict if the config says so)
        """
        super().__init__(config, http_client)
        self.classifier = classifier or ResultClassifier(
            strict=self.config.strict_classification
        )

    async def execute(
        self,
        items: Sequence[WriteItem] | None,
        locator: ResourceLocator,
        token: AccessToken | str,
    ) -> Success[str] | Failure:
        """Send every item concurrently and classify the combined response.

        ``NewItem`` entries are POSTed to the collection root and
        ``UpdateItem`` entries PATCHed to ``{root}/{id}/fields``.

        Args:
            items: Items to write
            locator: Target site and list
            token: Bearer token

        Returns:
            Success or Failure carrying the combined response text, or a
            Failure with NoItemsError / BulkTransportError
        """
        try:
            if not items:
                raise NoItemsError("No list items were provided, or the collection was empty")
            auth = self._bearer(token)
            outcomes = await self._dispatch(list(items), locator, auth)
        except GraphListError as e:
            logger.error(f"Bulk write to list {locator.list_id} failed: {e.message}")
            return Failure.from_error(e)

        transport_failures = [o for o in outcomes if o.transport_failed]
        if transport_failures:
            error = BulkTransportError(
                transport_failures[0].error or "Transport failure",
                details={"outcomes": outcomes},
            )
            logger.error(
                f"{len(transport_failures)} of {len(outcomes)} request(s) to list "
                f"{locator.list_id} failed at the transport level"
            )
            return Failure.from_error(error)

        combined = ", ".join(o.body for o in outcomes)
        logger.info(f"Bulk write to list {locator.list_id} completed ({len(outcomes)} item(s))")
        return self.classifier.classify(combined, outcomes)

    async def execute_updates(
        self,
        updates: Mapping[str, str] | None,
        locator: ResourceLocator,
        token: AccessToken | str,
    ) -> Success[str] | Failure:
        """Partially update items keyed by id.

        Args:
            updates: Mapping of item id to JSON body for its fields
            locator: Target site and list
            token: Bearer token

        Returns:
            Same as ``execute``
        """
        if not updates:
            error = NoItemsError("No update fields were provided, or the mapping was empty")
            logger.error(f"Bulk update of list {locator.list_id} failed: {error.message}")
            return Failure.from_error(error)

        items = []
        for item_id, body in updates.items():
            try:
                items.append(UpdateItem(id=item_id, json_body=body))
            except ValidationError as e:
                problems = "; ".join(err["msg"] for err in e.errors())
                error = BulkError(
                    f"Invalid update for item {item_id!r}: {problems}",
                    details={"item_id": item_id},
                )
                logger.error(f"Bulk update of list {locator.list_id} failed: {error.message}")
                return Failure.from_error(error)

        return await self.execute(items, locator, token)

    async def _dispatch(
        self,
        items: list[WriteItem],
        locator: ResourceLocator,
        auth: AuthProvider,
    ) -> list[WriteOutcome]:
        collection_url = locator.items_url(self.graph_base_url)
        headers = self._get_headers(auth, {"Content-Type": "application/json"})
        outcomes: list[WriteOutcome] = []

        max_concurrency = self.config.max_concurrency
        semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

        async def send_one(idx: int, item: WriteItem, client: AsyncHTTPClient) -> None:
            method = item.http_method
            url = item.target_url(collection_url)

            guard = semaphore if semaphore is not None else contextlib.nullcontext()
            async with guard:
                logger.debug(f"{method} {url}")
                try:
                    response = await client.request(
                        method, url, content=item.json_body.encode("utf-8"), headers=headers
                    )
                except TRANSPORT_ERRORS as e:
                    logger.warning(f"{method} {url} failed: {e}")
                    outcome = WriteOutcome(index=idx, item_id=item.item_id, error=str(e) or repr(e))
                else:
                    logger.debug(f"Response: {response.status_code}")
                    outcome = WriteOutcome(
                        index=idx,
                        item_id=item.item_id,
                        status_code=response.status_code,
                        body=response.text,
                    )

            outcomes.append(outcome)

        async with self._session() as client:
            await asyncio.gather(*(send_one(i, item, client) for i, item in enumerate(items)))

        return outcomes

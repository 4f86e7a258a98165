"""Exception hierarchy for graph-list-kit.

Component internals raise these exceptions; the public operations catch
them at their boundary and hand them back inside a ``Failure`` result.
"""

from typing import Any


class GraphListError(Exception):
    """Base exception for all graph-list-kit errors.

    Attributes:
        message: Human readable error message
        details: Additional diagnostic context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(GraphListError):
    """Raised when configuration or a required secret is invalid or missing."""


# Authentication


class AuthError(GraphListError):
    """Raised when the identity endpoint refuses or garbles a token request.

    ``status_code`` is None when the request never produced a response.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code
        self.body = body


# Read path


class FetchError(GraphListError):
    """Base exception for paginated read failures."""


class UpstreamStatusError(FetchError):
    """Raised when a page request returns anything other than HTTP 200."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code
        self.body = body


class UnparsableBodyError(FetchError):
    """Raised when a page body has no recognizable item array."""


class PageTransportError(FetchError):
    """Raised when a page request fails below the HTTP layer."""


# Write path


class BulkError(GraphListError):
    """Base exception for bulk write failures."""


class NoItemsError(BulkError):
    """Raised when a bulk operation is called without any items."""


class BulkTransportError(BulkError):
    """Raised when at least one request in a batch failed at the transport level.

    The per-item outcomes recorded before the join are kept in
    ``details["outcomes"]``.
    """


class ClassifiedFailure(GraphListError):
    """Raised when a combined bulk response contains a known failure marker."""

    def __init__(
        self, message: str, marker: str | None = None, details: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message, details=details)
        self.marker = marker

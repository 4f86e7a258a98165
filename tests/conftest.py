"""Pytest configuration and shared fixtures."""

from collections.abc import Callable

import pytest

from graph_list_kit import AccessToken, Credentials, GraphConfig, ResourceLocator

GRAPH_BASE_URL = "https://graph.test/v1.0"
AUTHORITY_URL = "https://login.test"


@pytest.fixture
def graph_config() -> GraphConfig:
    """Create a test configuration pointing at fake hosts.

    Returns:
        Test configuration
    """
    return GraphConfig(graph_base_url=GRAPH_BASE_URL, authority_url=AUTHORITY_URL)


@pytest.fixture
def locator() -> ResourceLocator:
    """Create a locator for the test list."""
    return ResourceLocator(site_id="site-1", list_id="list-1")


@pytest.fixture
def access_token() -> AccessToken:
    """Create a test bearer token."""
    return AccessToken(
        token_type="Bearer",
        expires_in=3599,
        ext_expires_in=3599,
        access_token="test-access-token",
    )


@pytest.fixture
def credentials() -> Credentials:
    """Create test app registration credentials."""
    return Credentials(
        client_id="client-123",
        client_secret="shh-secret",
        tenant_id="tenant-456",
        scope="https://graph.microsoft.com/.default",
    )


@pytest.fixture
def make_page() -> Callable[..., str]:
    """Build raw page bodies with a given item array text.

    The returned callable takes the text placed between the array brackets
    and an optional continuation cursor.
    """

    def _make_page(items: str, next_link: str | None = None) -> str:
        body = '{"@odata.context": "https://graph.test/$metadata#items", "value": [' + items + "]"
        if next_link is not None:
            body += f', "@odata.nextLink": "{next_link}"'
        return body + "}"

    return _make_page

"""Configuration model for graph-list-kit.

Values can be passed explicitly or read from ``GRAPH_LIST_*`` environment
variables and ``.env`` files.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GRAPH_BASE_URL = "https://graph.microsoft.com/v1.0"
DEFAULT_AUTHORITY_URL = "https://login.microsoftonline.com"
DEFAULT_SCOPE = "https://graph.microsoft.com/.default"


class GraphConfig(BaseSettings):
    """Settings shared by the token, paging and bulk clients.

    Example:
        >>> config = GraphConfig(timeout=10.0, page_limit=5)
        >>> config.get_graph_base_url()
        'https://graph.microsoft.com/v1.0'
    """

    model_config = SettingsConfigDict(
        env_prefix="GRAPH_LIST_",
        env_file=None,
        extra="ignore",
    )

    graph_base_url: str = Field(
        default=DEFAULT_GRAPH_BASE_URL,
        description="Microsoft Graph root including the API version",
    )
    authority_url: str = Field(
        default=DEFAULT_AUTHORITY_URL,
        description="Identity provider root; the tenant id is appended per request",
    )
    default_scope: str = Field(
        default=DEFAULT_SCOPE,
        description="Scope requested when credentials do not name one",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    max_connections: int = Field(default=100, ge=1, description="Connection pool size")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    page_limit: int = Field(
        default=50, ge=1, description="Default maximum number of pages per read"
    )
    max_concurrency: int | None = Field(
        default=None,
        ge=1,
        description="Cap on bulk requests in flight; None dispatches every item at once",
    )
    strict_classification: bool = Field(
        default=False,
        description="Also treat non-2xx bulk outcomes as failures",
    )

    @field_validator("graph_base_url", "authority_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def get_graph_base_url(self) -> str:
        """Get the Graph API root without a trailing slash."""
        return self.graph_base_url

    def get_authority_url(self) -> str:
        """Get the identity provider root without a trailing slash."""
        return self.authority_url

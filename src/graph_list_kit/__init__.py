"""graph-list-kit: an async client for Microsoft Graph SharePoint lists.

This package provides:
- Client credentials token exchange
- Paginated reads that follow ``@odata.nextLink`` and combine every page
  into one JSON array
- Concurrent bulk creation and partial update of list items
- Success/failure classification of combined bulk responses
"""

from .__version__ import __version__
from .client import BaseClient, GraphListClient
from .config_factory import ConfigFactory, create_config, load_config
from .exceptions import (
    AuthError,
    BulkError,
    BulkTransportError,
    ClassifiedFailure,
    ConfigurationError,
    FetchError,
    GraphListError,
    NoItemsError,
    PageTransportError,
    UnparsableBodyError,
    UpstreamStatusError,
)
from .auth import BearerTokenAuth, EnvironmentSecretSource, MappingSecretSource
from .models import (
    AccessToken,
    Credentials,
    Failure,
    GraphConfig,
    ListItem,
    NewItem,
    PageQuery,
    ResourceLocator,
    Success,
    UpdateItem,
    UserLookupData,
    UserLookupItem,
    UserLookupMetaData,
    WriteItem,
    WriteOutcome,
    parse_items,
)
from .operations import BulkMutator, PageFetcher, ResultClassifier, TokenClient, classify
from .protocols import AsyncHTTPClient, AuthProvider, ConfigProvider, SecretSource

__all__ = [
    "__version__",
    # Clients
    "BaseClient",
    "GraphListClient",
    "TokenClient",
    "PageFetcher",
    "BulkMutator",
    "ResultClassifier",
    "classify",
    # Configuration
    "GraphConfig",
    "ConfigFactory",
    "load_config",
    "create_config",
    # Authentication
    "Credentials",
    "AccessToken",
    "BearerTokenAuth",
    "EnvironmentSecretSource",
    "MappingSecretSource",
    # Requests and results
    "ResourceLocator",
    "PageQuery",
    "WriteItem",
    "NewItem",
    "UpdateItem",
    "Success",
    "Failure",
    "WriteOutcome",
    # Items
    "ListItem",
    "UserLookupData",
    "UserLookupItem",
    "UserLookupMetaData",
    "parse_items",
    # Protocols (for dependency injection)
    "AsyncHTTPClient",
    "AuthProvider",
    "ConfigProvider",
    "SecretSource",
    # Exceptions
    "GraphListError",
    "ConfigurationError",
    "AuthError",
    "FetchError",
    "UpstreamStatusError",
    "UnparsableBodyError",
    "PageTransportError",
    "BulkError",
    "NoItemsError",
    "BulkTransportError",
    "ClassifiedFailure",
]

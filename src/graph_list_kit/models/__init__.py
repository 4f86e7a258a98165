"""Data models for graph-list-kit."""

from .config import GraphConfig
from .credentials import AccessToken, Credentials
from .items import ListItem, UserLookupData, UserLookupItem, UserLookupMetaData, parse_items
from .request import NewItem, PageQuery, ResourceLocator, UpdateItem, WriteItem
from .result import Failure, Success, WriteOutcome

__all__ = [
    # Configuration
    "GraphConfig",
    # Authentication
    "Credentials",
    "AccessToken",
    # Requests
    "ResourceLocator",
    "PageQuery",
    "WriteItem",
    "NewItem",
    "UpdateItem",
    # Results
    "Success",
    "Failure",
    "WriteOutcome",
    # Items
    "ListItem",
    "UserLookupData",
    "UserLookupItem",
    "UserLookupMetaData",
    "parse_items",
]

"""Client classes for Microsoft Graph list access."""

from .async_client import GraphListClient
from .base import BaseClient

__all__ = ["BaseClient", "GraphListClient"]

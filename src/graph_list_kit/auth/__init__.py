"""Authentication helpers: bearer headers and client secret sources."""

from .bearer import BearerTokenAuth
from .secrets import EnvironmentSecretSource, MappingSecretSource

__all__ = [
    "BearerTokenAuth",
    "EnvironmentSecretSource",
    "MappingSecretSource",
]

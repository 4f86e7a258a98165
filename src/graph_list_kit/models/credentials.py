"""Credential and token models for the client credentials flow."""

from pydantic import BaseModel, Field, SecretStr

from ..protocols import SecretSource


class Credentials(BaseModel):
    """App registration credentials exchanged for an access token.

    Without a scope, the token client requests the configured
    ``default_scope``.

    The secret is wrapped in ``SecretStr`` so it never shows up in reprs or
    logs.
    """

    client_id: str = Field(min_length=1)
    client_secret: SecretStr
    tenant_id: str = Field(min_length=1)
    scope: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_secret_source(
        cls,
        client_id: str,
        tenant_id: str,
        secret_name: str,
        source: SecretSource,
        scope: str | None = None,
    ) -> "Credentials":
        """Build credentials whose client secret comes from a secret source.

        Args:
            client_id: Application (client) ID
            tenant_id: Directory (tenant) ID
            secret_name: Name the secret is stored under
            source: Where to look the secret up
            scope: Requested scope (defaults to the configured scope)

        Returns:
            Credentials instance

        Raises:
            ConfigurationError: If the source has no such secret
        """
        return cls(
            client_id=client_id,
            client_secret=SecretStr(source.get_secret(secret_name)),
            tenant_id=tenant_id,
            scope=scope,
        )


class AccessToken(BaseModel):
    """Bearer token returned by the identity endpoint.

    Renewal is the caller's job; nothing here refreshes the token.
    """

    token_type: str
    expires_in: int
    ext_expires_in: int
    access_token: str

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"AccessToken(token_type={self.token_type!r}, expires_in={self.expires_in})"

    __repr__ = __str__

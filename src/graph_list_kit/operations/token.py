"""Client credentials token exchange against the Microsoft identity platform."""

import logging

from pydantic import ValidationError

from ..client.base import TRANSPORT_ERRORS, BaseClient
from ..exceptions import AuthError, GraphListError
from ..models.credentials import AccessToken, Credentials
from ..models.result import Failure, Success

logger = logging.getLogger(__name__)


class TokenClient(BaseClient):
    """Exchanges app registration credentials for a bearer token.

    One POST per call, no caching and no retry.

    Example:
        >>> token_client = TokenClient(GraphConfig())
        >>> result = await token_client.acquire_token(credentials)
        >>> if result.ok:
        ...     token = result.value
    """

    def token_url(self, tenant_id: str) -> str:
        return f"{self.config.get_authority_url()}/{tenant_id}/oauth2/v2.0/token"

    async def acquire_token(self, credentials: Credentials) -> Success[AccessToken] | Failure:
        """Request an access token with the client credentials grant.

        Args:
            credentials: Client id, secret, tenant id and (optional) scope

        Returns:
            Success with the AccessToken, or Failure carrying an AuthError
        """
        try:
            token = await self._request_token(credentials)
        except GraphListError as e:
            logger.error(f"Token request for tenant {credentials.tenant_id} failed: {e.message}")
            return Failure.from_error(e)

        logger.info(f"Acquired {token.token_type} token (expires in {token.expires_in}s)")
        return Success(value=token)

    async def _request_token(self, credentials: Credentials) -> AccessToken:
        url = self.token_url(credentials.tenant_id)
        form = {
            "client_id": credentials.client_id,
            "scope": credentials.scope or self.config.default_scope,
            "client_secret": credentials.client_secret.get_secret_value(),
            "grant_type": "client_credentials",
        }

        logger.debug(f"POST {url} client_id={credentials.client_id}")

        async with self._session() as client:
            try:
                response = await client.request(
                    "POST", url, data=form, headers=self._get_headers()
                )
            except TRANSPORT_ERRORS as e:
                raise AuthError(f"Token request failed: {e}") from e

        body = response.text
        if response.status_code != 200:
            raise AuthError(
                f"{response.status_code} : {body}",
                status_code=response.status_code,
                body=body,
            )

        try:
            return AccessToken.model_validate_json(body)
        except ValidationError as e:
            raise AuthError(
                f"Unable to parse token response: {e.error_count()} validation error(s)",
                status_code=response.status_code,
                body=body,
            ) from e

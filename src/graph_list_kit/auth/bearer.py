"""Bearer token authentication for list requests."""

from ..models.credentials import AccessToken


class BearerTokenAuth:
    """Adds ``Authorization: Bearer <token>`` to list requests.

    Accepts either an ``AccessToken`` or the raw token string.
    """

    def __init__(self, token: AccessToken | str) -> None:
        self._token = token.access_token if isinstance(token, AccessToken) else token

    def get_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._token}"}

    def validate_token(self) -> bool:
        return bool(self._token and self._token.strip())

"""Tests for result and credential models."""

import pytest
from pydantic import SecretStr

from graph_list_kit import (
    AccessToken,
    Credentials,
    Failure,
    MappingSecretSource,
    NoItemsError,
    Success,
    WriteOutcome,
)


def test_success_unwrap() -> None:
    result = Success(value="[]", details={"pages": 1})

    assert result.ok is True
    assert result.unwrap() == "[]"


def test_failure_unwrap_raises_carried_error() -> None:
    error = NoItemsError("nothing to do", details={"why": "empty"})
    result = Failure.from_error(error)

    assert result.ok is False
    assert result.payload == "nothing to do"
    assert result.details == {"why": "empty"}
    with pytest.raises(NoItemsError):
        result.unwrap()


def test_failure_payload_override() -> None:
    result = Failure.from_error(NoItemsError("short"), payload="long combined text")

    assert result.payload == "long combined text"
    assert result.error.message == "short"


class TestWriteOutcome:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [(200, True), (201, True), (204, True), (400, False), (500, False), (None, False)],
    )
    def test_is_success(self, status, expected) -> None:
        assert WriteOutcome(index=0, status_code=status).is_success is expected

    def test_transport_failed(self) -> None:
        assert WriteOutcome(index=0, error="reset").transport_failed
        assert not WriteOutcome(index=0, status_code=500).transport_failed


class TestCredentials:
    def test_secret_hidden_in_repr(self) -> None:
        credentials = Credentials(client_id="c", client_secret="hunter2", tenant_id="t")

        assert "hunter2" not in repr(credentials)
        assert credentials.client_secret.get_secret_value() == "hunter2"

    def test_scope_defaults_to_none(self) -> None:
        credentials = Credentials(client_id="c", client_secret=SecretStr("s"), tenant_id="t")

        assert credentials.scope is None

    def test_from_secret_source(self) -> None:
        source = MappingSecretSource({"app-secret": "from-vault"})

        credentials = Credentials.from_secret_source(
            client_id="c", tenant_id="t", secret_name="app-secret", source=source
        )

        assert credentials.client_secret.get_secret_value() == "from-vault"


def test_access_token_repr_hides_token() -> None:
    token = AccessToken(
        token_type="Bearer", expires_in=3599, ext_expires_in=3599, access_token="eyJsecret"
    )

    assert "eyJsecret" not in repr(token)
    assert "eyJsecret" not in str(token)

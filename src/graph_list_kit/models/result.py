"""Result models returned by every public operation.

Operations never raise past their boundary. They return either a
``Success`` carrying the value or a ``Failure`` carrying diagnostic text
and the exception that caused it.
"""

from typing import Any, Generic, Literal, NoReturn, TypeVar

from pydantic import BaseModel, Field

from ..exceptions import GraphListError

T = TypeVar("T")


class WriteOutcome(BaseModel):
    """What happened to one item of a bulk write.

    ``error`` is set only when the request failed below the HTTP layer;
    non-2xx responses are outcomes with a body like any other.
    """

    index: int
    item_id: str | None = None
    status_code: int | None = None
    body: str = ""
    error: str | None = None

    model_config = {"frozen": True}

    @property
    def transport_failed(self) -> bool:
        return self.error is not None

    @property
    def is_success(self) -> bool:
        """True for a 2xx response."""
        return self.status_code is not None and 200 <= self.status_code < 300


class Success(BaseModel, Generic[T]):
    """Successful operation result.

    Attributes:
        value: The operation's payload
        details: Extra information such as page counts or per-item outcomes
    """

    value: T
    details: dict[str, Any] = Field(default_factory=dict)
    ok: Literal[True] = True

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def unwrap(self) -> T:
        return self.value


class Failure(BaseModel):
    """Failed operation result.

    Attributes:
        payload: Diagnostic text (combined response text or an error message)
        error: The exception describing the failure
    """

    payload: str
    error: GraphListError
    ok: Literal[False] = False

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @classmethod
    def from_error(cls, error: GraphListError, payload: str | None = None) -> "Failure":
        return cls(payload=payload if payload is not None else error.message, error=error)

    @property
    def details(self) -> dict[str, Any]:
        return self.error.details

    def unwrap(self) -> NoReturn:
        """Re-raise the carried error."""
        raise self.error

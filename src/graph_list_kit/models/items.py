"""Typed views over list items returned by a paginated read.

A read returns the raw JSON array text. These models are for callers that
want structured objects instead.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, Field, TypeAdapter

ItemT = TypeVar("ItemT", bound=BaseModel)


class ListItem(BaseModel):
    """Generic list item with its ``fields`` left as a dict."""

    etag: str | None = Field(None, alias="@odata.etag")
    id: str
    fields: dict[str, Any] = Field(default_factory=dict)

    model_config = {"populate_by_name": True, "extra": "allow"}


class UserLookupData(BaseModel):
    """Fields of an item in the hidden user information list."""

    etag: str | None = Field(None, alias="@odata.etag")
    id: str | None = None
    email: str | None = Field(None, alias="EMail")

    model_config = {"populate_by_name": True}


class UserLookupItem(BaseModel):
    """Item of a user lookup read, expanded with ``fields(select=EMail)``."""

    etag: str | None = Field(None, alias="@odata.etag")
    id: str
    fields_odata_context: str | None = Field(None, alias="fields@odata.context")
    lookup_data: UserLookupData | None = Field(None, alias="fields")

    model_config = {"populate_by_name": True}


class UserLookupMetaData(BaseModel):
    """A single user lookup response page."""

    odata_context: str | None = Field(None, alias="@odata.context")
    lookup_id_result: list[UserLookupItem] = Field(default_factory=list, alias="value")

    model_config = {"populate_by_name": True}


def parse_items(collection: str, model: type[ItemT]) -> list[ItemT]:
    """Validate an aggregated collection into typed items.

    Args:
        collection: JSON array text as returned by a paginated read
        model: Item model to validate each element against

    Returns:
        Items in collection order

    Raises:
        pydantic.ValidationError: If the text is not a matching JSON array

    Example:
        >>> items = parse_items('[{"id": "1", "fields": {"EMail": "a@b.c"}}]', UserLookupItem)
        >>> items[0].lookup_data.email
        'a@b.c'
    """
    return TypeAdapter(list[model]).validate_json(collection)  # type: ignore[valid-type]

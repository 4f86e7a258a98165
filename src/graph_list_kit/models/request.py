"""Request-side models: where to read or write, and what to send."""

from typing import ClassVar

from pydantic import BaseModel, Field, field_validator


class ResourceLocator(BaseModel):
    """Identifies one SharePoint list on one site."""

    site_id: str = Field(min_length=1)
    list_id: str = Field(min_length=1)

    model_config = {"frozen": True}

    def items_url(self, graph_base_url: str) -> str:
        """Build the collection root for this list.

        Args:
            graph_base_url: Graph root including the API version

        Returns:
            URL of the list's ``items`` collection
        """
        return f"{graph_base_url.rstrip('/')}/sites/{self.site_id}/lists/{self.list_id}/items"


class PageQuery(BaseModel):
    """Options for a single paginated read.

    ``page_limit`` bounds the number of page requests, not the number of
    items returned.

    Example:
        >>> PageQuery(item_fields=["Title", "EMail"], select_fields=["id"]).build_query_string()
        '?expand=fields(select=Title,EMail)&select=id'
    """

    item_fields: list[str] | None = None
    select_fields: list[str] | None = None
    page_limit: int = Field(default=50, ge=1)

    model_config = {"frozen": True}

    def build_query_string(self) -> str:
        """Render the ``expand``/``select`` query string, or "" when unfiltered."""
        parts: list[str] = []
        if self.item_fields is not None:
            parts.append(f"expand=fields(select={','.join(self.item_fields)})")
        if self.select_fields is not None:
            parts.append(f"select={','.join(self.select_fields)}")
        if not parts:
            return ""
        return "?" + "&".join(parts)


class WriteItem(BaseModel):
    """A single write against a list, carrying its pre-rendered JSON body.

    Subclasses decide the HTTP method and where relative to the collection
    root the body is sent.
    """

    json_body: str

    http_method: ClassVar[str] = "POST"

    model_config = {"frozen": True}

    @field_validator("json_body")
    @classmethod
    def body_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("json_body cannot be empty")
        return v

    @property
    def item_id(self) -> str | None:
        return None

    def target_url(self, collection_url: str) -> str:
        """Return the URL this item is written to."""
        return collection_url


class NewItem(WriteItem):
    """Creates a list item. The body is posted to the collection root.

    The body follows the Graph ``listItem`` create format, e.g.
    ``{"fields": {"Title": "Widget"}}``.
    """

    http_method: ClassVar[str] = "POST"


class UpdateItem(WriteItem):
    """Partially updates the fields of an existing list item."""

    id: str = Field(min_length=1)

    http_method: ClassVar[str] = "PATCH"

    @property
    def item_id(self) -> str | None:
        return self.id

    def target_url(self, collection_url: str) -> str:
        return f"{collection_url}/{self.id}/fields"

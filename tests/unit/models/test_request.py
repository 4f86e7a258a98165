"""Tests for request models."""

import pytest
from pydantic import ValidationError

from graph_list_kit import NewItem, PageQuery, ResourceLocator, UpdateItem


class TestResourceLocator:
    def test_items_url(self) -> None:
        locator = ResourceLocator(site_id="contoso.sharepoint.com,1,2", list_id="abc")

        assert (
            locator.items_url("https://graph.microsoft.com/v1.0/")
            == "https://graph.microsoft.com/v1.0/sites/contoso.sharepoint.com,1,2/lists/abc/items"
        )

    def test_ids_required(self) -> None:
        with pytest.raises(ValidationError):
            ResourceLocator(site_id="", list_id="abc")

    def test_immutable(self) -> None:
        locator = ResourceLocator(site_id="s", list_id="l")
        with pytest.raises(ValidationError):
            locator.list_id = "other"


class TestPageQuery:
    def test_defaults(self) -> None:
        query = PageQuery()

        assert query.page_limit == 50
        assert query.build_query_string() == ""

    @pytest.mark.parametrize("limit", [0, -1])
    def test_page_limit_must_be_positive(self, limit: int) -> None:
        with pytest.raises(ValidationError):
            PageQuery(page_limit=limit)

    def test_field_order_is_kept(self) -> None:
        query = PageQuery(item_fields=["Z", "A", "M"])

        assert query.build_query_string() == "?expand=fields(select=Z,A,M)"

    def test_empty_field_list_still_renders(self) -> None:
        assert PageQuery(select_fields=[]).build_query_string() == "?select="


class TestWriteItems:
    def test_new_item_targets_collection_root(self) -> None:
        item = NewItem(json_body='{"fields": {"Title": "A"}}')

        assert item.http_method == "POST"
        assert item.item_id is None
        assert item.target_url("https://g/items") == "https://g/items"

    def test_update_item_targets_fields(self) -> None:
        item = UpdateItem(id="42", json_body='{"Title": "B"}')

        assert item.http_method == "PATCH"
        assert item.item_id == "42"
        assert item.target_url("https://g/items") == "https://g/items/42/fields"

    def test_blank_body_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NewItem(json_body="   ")

    def test_update_requires_id(self) -> None:
        with pytest.raises(ValidationError):
            UpdateItem(id="", json_body="{}")

import json

import pytest

from creation_hub.models import ContentItem
from creation_hub.services.content_aggregator import normalize_row
from creation_hub.services.content_display import (
    describe_item,
    field_label,
    format_field,
    format_list_date,
    format_timestamp,
    get_type_icon,
)


@pytest.mark.parametrize(
    "content_type, icon",
    [
        ("Website Blog", "Globe"),
        ("Content Post Information", "Linkedin"),
        ("Technical Article Content", "FileText"),
        ("Carousel", "Image"),
        ("Newsletter", "Mail"),
        ("Thought Leadership", "Brain"),
        ("Something New", "FileText"),
        (None, "FileText"),
    ],
)
def test_type_icons(content_type, icon):
    assert get_type_icon(content_type) == icon


def test_list_date_formatting():
    assert format_list_date("2024-01-05") == "1/5/2024"
    assert format_list_date("") == "-"
    assert format_list_date("unknown") == "-"


def test_timestamp_formatting():
    assert format_timestamp("2024-01-05T15:04:09") == "1/5/2024, 3:04:09 PM"
    assert format_timestamp("2024-01-05T00:30:00") == "1/5/2024, 12:30:00 AM"
    assert format_timestamp(None) == "-"


def test_field_label():
    assert field_label("post_content") == "Post Content"
    assert field_label("title") == "Title"


class TestFormatField:
    def test_date_like_keys_are_formatted(self):
        assert format_field("created_at", "2024-01-05T15:04:09").value == "1/5/2024, 3:04:09 PM"
        assert format_field("publishDate", "").value == "-"

    def test_booleans(self):
        assert format_field("is_published", True).value == "Yes"
        assert format_field("is_published", False).value == "No"

    def test_empty_values(self):
        assert format_field("author", None).value == "-"
        assert format_field("author", "").value == "-"

    def test_structured_values_are_pretty_json(self):
        detail = format_field("tags", {"a": [1, 2]})
        assert detail.is_structured is True
        assert json.loads(detail.value) == {"a": [1, 2]}
        assert "\n" in detail.value

    def test_scalars_are_stringified(self):
        assert format_field("word_count", 1200).value == "1200"


def test_describe_item_lists_row_fields_in_row_order():
    row = {"slug": "launch", "id": 4, "title": "Launch", "created_at": "2024-01-05", "slide_count": 6}

    detail = describe_item(normalize_row(row, "Carousel"))

    keys = [f.key for f in detail.fields]
    assert keys == ["slug", "id", "title", "created_at", "slide_count", "type", "createdAt"]
    by_key = {f.key: f for f in detail.fields}
    assert by_key["slide_count"].label == "Slide Count"
    assert by_key["slide_count"].value == "6"
    assert by_key["createdAt"].value == "1/5/2024, 12:00:00 AM"
    assert detail.type == "Carousel"
    assert detail.id == 4


def test_describe_item_keeps_source_position_of_type():
    row = {"type": "stale", "title": "Deck", "id": 1}

    detail = describe_item(normalize_row(row, "Carousel"))

    assert [f.key for f in detail.fields] == ["type", "title", "id", "createdAt"]
    assert detail.fields[0].value == "Carousel"


def test_describe_item_omits_columns_the_row_never_had():
    item = ContentItem.model_validate({"type": "Carousel", "createdAt": "", "slide_count": 6})

    keys = [f.key for f in describe_item(item).fields]

    assert "status" not in keys
    assert "author" not in keys
    assert "title" not in keys
    assert set(keys) == {"type", "createdAt", "slide_count"}

"""
Display helpers for repository items: type icons, list dates and the
field-by-field detail view.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional

from dateutil import parser as date_parser

from ..models import ContentItem, FieldDetail, ItemDetailResponse

EMPTY_VALUE = "-"
DEFAULT_ICON = "FileText"

# Icon names from the front end's icon set
CONTENT_TYPE_ICONS: Dict[str, str] = {
    "Website Blog": "Globe",
    "Content Post Information": "Linkedin",
    "Technical Article Content": "FileText",
    "Carousel": "Image",
    "Newsletter": "Mail",
    "Facebook Post": "Facebook",
    "Twitter Post": "Twitter",
    "Thought Leadership": "Brain",
}


def get_type_icon(content_type: Optional[str]) -> str:
    return CONTENT_TYPE_ICONS.get(content_type or "", DEFAULT_ICON)


def _parse(value: Any) -> Optional[datetime]:
    if not value or not isinstance(value, str):
        return None
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError):
        return None


def format_list_date(value: Any) -> str:
    """``M/D/YYYY``, or ``-`` when the date is missing."""
    parsed = _parse(value)
    if parsed is None:
        return EMPTY_VALUE
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def format_timestamp(value: Any) -> str:
    """``M/D/YYYY, H:MM:SS AM``, or ``-`` when the date is missing."""
    parsed = _parse(value)
    if parsed is None:
        return EMPTY_VALUE
    hour = parsed.hour % 12 or 12
    meridiem = "AM" if parsed.hour < 12 else "PM"
    return (
        f"{parsed.month}/{parsed.day}/{parsed.year}, "
        f"{hour}:{parsed.minute:02d}:{parsed.second:02d} {meridiem}"
    )


def field_label(key: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in key.replace("_", " ").split(" "))


def format_field(key: str, value: Any) -> FieldDetail:
    lowered = key.lower()
    if "date" in lowered or "created" in lowered:
        text = format_timestamp(value)
    elif isinstance(value, bool):
        text = "Yes" if value else "No"
    elif value is None or value == "":
        text = EMPTY_VALUE
    elif isinstance(value, (dict, list)):
        return FieldDetail(
            key=key,
            label=field_label(key),
            value=json.dumps(value, indent=2, ensure_ascii=False, default=str),
            is_structured=True,
        )
    else:
        text = str(value)
    return FieldDetail(key=key, label=field_label(key), value=text)


def describe_item(item: ContentItem) -> ItemDetailResponse:
    """Every field the row carried, in row order, formatted for the detail view."""
    fields: List[FieldDetail] = [format_field(key, value) for key, value in item.present_fields()]
    return ItemDetailResponse(type=item.type, id=item.id, title=item.title, fields=fields)

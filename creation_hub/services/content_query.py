"""
Search, type filtering and sorting over an aggregated content list.

Everything here is a pure function of the item list and the view state, except
the small set of mutators on ``RepositoryViewState`` that model what the user
clicks in the repository screen.
"""

import unicodedata
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import cmp_to_key
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from dateutil import parser as date_parser

from ..models import ContentItem, SortField, SortOrder, SortState

# Missing or unparsable dates sort as the earliest possible instant.
MISSING_DATE = float("-inf")


# ============================================================================
# FILTER STAGE
# ============================================================================


def is_listable(item: ContentItem) -> bool:
    """Rows without a string title and type never reach the list."""
    return isinstance(item.title, str) and isinstance(item.type, str)


def matches(item: ContentItem, search: str = "", selected_types: Sequence[str] = ()) -> bool:
    if not is_listable(item):
        return False
    if search.lower() not in item.title.lower():
        return False
    return not selected_types or item.type in selected_types


def filter_items(
    items: Iterable[ContentItem],
    search: str = "",
    selected_types: Sequence[str] = (),
) -> List[ContentItem]:
    return [item for item in items if matches(item, search, selected_types)]


# ============================================================================
# SORT STAGE
# ============================================================================


def _collation_key(value: str) -> Tuple[str, str, Tuple[bool, ...]]:
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return base, decomposed.casefold(), tuple(ch.isupper() for ch in value)


def locale_compare(a: str, b: str) -> int:
    """
    Three-way string comparison approximating a default locale collation.

    Letters compare case- and accent-insensitively first, then by accent,
    then lowercase before uppercase.
    """
    ka, kb = _collation_key(a), _collation_key(b)
    return (ka > kb) - (ka < kb)


def parse_timestamp(value: Any) -> float:
    """POSIX timestamp of an ISO-ish date string; naive values are read as UTC."""
    if not value or not isinstance(value, str):
        return MISSING_DATE
    try:
        parsed: datetime = date_parser.parse(value)
    except (ValueError, OverflowError):
        return MISSING_DATE
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def _sort_value(item: ContentItem, sort_by: SortField) -> Any:
    if sort_by == SortField.DATE:
        return parse_timestamp(item.createdAt)
    value = item.title if sort_by == SortField.TITLE else item.type
    return value if isinstance(value, str) else ""


def _compare_values(a: Any, b: Any, sort_by: SortField) -> int:
    if sort_by == SortField.DATE:
        return (a > b) - (a < b)
    return locale_compare(a, b)


def sort_items(
    items: Sequence[ContentItem],
    sort_by: SortField = SortField.DATE,
    sort_order: SortOrder = SortOrder.DESC,
) -> List[ContentItem]:
    """
    Stable sort on one key.

    Descending order negates the comparison instead of reversing the result,
    so items that compare equal keep their incoming order either way.
    """
    sign = -1 if sort_order == SortOrder.DESC else 1

    def compare(a: Tuple[Any, ContentItem], b: Tuple[Any, ContentItem]) -> int:
        return sign * _compare_values(a[0], b[0], sort_by)

    decorated = [(_sort_value(item, sort_by), item) for item in items]
    decorated.sort(key=cmp_to_key(compare))
    return [item for _, item in decorated]


def toggle_sort(current: SortState, field: SortField) -> SortState:
    """Same key flips direction; a new key starts descending."""
    if current.sort_by == field:
        order = SortOrder.ASC if current.sort_order == SortOrder.DESC else SortOrder.DESC
        return SortState(sort_by=field, sort_order=order)
    return SortState(sort_by=field, sort_order=SortOrder.DESC)


def display_key(item: ContentItem, index: int) -> str:
    """Source ids only repeat across sources, so type + id + position is unique."""
    return f"{item.type}-{item.id}-{index}"


# ============================================================================
# VIEW STATE
# ============================================================================


@dataclass
class RepositoryViewState:
    """Search, sort and type-filter state of one repository view."""

    content_types: List[str] = field(default_factory=list)
    search: str = ""
    sort_by: SortField = SortField.DATE
    sort_order: SortOrder = SortOrder.DESC
    selected_types: List[str] = field(default_factory=list)

    @property
    def sort_state(self) -> SortState:
        return SortState(sort_by=self.sort_by, sort_order=self.sort_order)

    def set_search(self, term: Optional[str]) -> None:
        self.search = term or ""

    def toggle_sort(self, sort_by: SortField) -> None:
        state = toggle_sort(self.sort_state, sort_by)
        self.sort_by, self.sort_order = state.sort_by, state.sort_order

    def add_type(self, content_type: str) -> None:
        if content_type not in self.selected_types:
            self.selected_types.append(content_type)

    def remove_type(self, content_type: str) -> None:
        self.selected_types = [t for t in self.selected_types if t != content_type]

    def clear_types(self) -> None:
        self.selected_types = []

    def select_all_types(self) -> None:
        self.selected_types = list(self.content_types)

    @property
    def all_types_selected(self) -> bool:
        return set(self.selected_types) == set(self.content_types)

    def apply(self, items: Iterable[ContentItem]) -> List[ContentItem]:
        filtered = filter_items(items, self.search, self.selected_types)
        return sort_items(filtered, self.sort_by, self.sort_order)

"""
Content aggregation for the Content Repository.

Reads every configured source concurrently, waits for all of them, and merges
their rows into one normalized list in source priority order. A source that
fails contributes nothing; the failure is logged and reported in the per-source
results but never fails the aggregation.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence

from ..config import ContentSource, settings
from ..models import ContentItem, SourceResult

logger = logging.getLogger("creation_hub.services.content_aggregator")


class RowSource(Protocol):
    """Anything that can return all rows of a named table."""

    async def select_all(self, table: str) -> List[Dict[str, Any]]:
        ...


@dataclass
class AggregationResult:
    items: List[ContentItem] = field(default_factory=list)
    sources: List[SourceResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.items)


def resolve_created_at(row: Dict[str, Any]) -> str:
    """First non-empty of ``createdAt`` / ``created_at``, else an empty string."""
    value = row.get("createdAt") or row.get("created_at") or ""
    return value if isinstance(value, str) else str(value)


def normalize_row(row: Dict[str, Any], label: str) -> ContentItem:
    """Copy every field of ``row``, then stamp the source label and creation date."""
    return ContentItem.from_row({**row, "type": label, "createdAt": resolve_created_at(row)})


class ContentAggregator:
    """Joins the rows of several sources into one list of ContentItem."""

    def __init__(self, client: RowSource, sources: Optional[Sequence[ContentSource]] = None):
        self.client = client
        self.sources: List[ContentSource] = list(sources if sources is not None else settings.content_sources)

    @property
    def content_types(self) -> List[str]:
        """Category labels this aggregator can produce, in priority order."""
        labels: List[str] = []
        for source in self.sources:
            if source.label not in labels:
                labels.append(source.label)
        return labels

    async def aggregate(self) -> AggregationResult:
        results = await asyncio.gather(
            *(self.client.select_all(source.table) for source in self.sources),
            return_exceptions=True,
        )

        aggregated = AggregationResult()
        for source, rows in zip(self.sources, results):
            if isinstance(rows, BaseException):
                if not isinstance(rows, Exception):
                    raise rows
                logger.warning(f"Source '{source.table}' failed, contributing no items: {rows}")
                aggregated.sources.append(
                    SourceResult(table=source.table, label=source.label, ok=False, error=str(rows))
                )
                continue

            items = [normalize_row(row, source.label) for row in rows or []]
            aggregated.items.extend(items)
            aggregated.sources.append(
                SourceResult(table=source.table, label=source.label, ok=True, count=len(items))
            )

        logger.info(
            f"Aggregated {aggregated.total} items from "
            f"{sum(1 for s in aggregated.sources if s.ok)}/{len(self.sources)} sources"
        )
        return aggregated

"""
Content Repository service.

Every call aggregates the configured sources afresh; nothing is cached between
requests. The list operation then runs the view state's filter and sort over
the aggregated items and decorates them for display.
"""

import logging
from typing import List, Optional, Sequence

from ..config import ContentSource
from ..models import ContentItem, ContentListItem, ContentListResponse
from .content_aggregator import ContentAggregator, RowSource
from .content_display import format_list_date, get_type_icon
from .content_query import RepositoryViewState, display_key

logger = logging.getLogger("creation_hub.services.content_repository")

NO_RESULTS_MESSAGE = "No content found matching your criteria."


class ContentRepositoryService:
    def __init__(self, client: RowSource, sources: Optional[Sequence[ContentSource]] = None):
        self.aggregator = ContentAggregator(client, sources)

    @property
    def content_types(self) -> List[str]:
        return self.aggregator.content_types

    def new_view(self) -> RepositoryViewState:
        return RepositoryViewState(content_types=self.content_types)

    async def list_content(self, view: RepositoryViewState) -> ContentListResponse:
        aggregated = await self.aggregator.aggregate()
        visible = view.apply(aggregated.items)

        return ContentListResponse(
            total=aggregated.total,
            count=len(visible),
            search=view.search,
            selected_types=list(view.selected_types),
            sort_by=view.sort_by,
            sort_order=view.sort_order,
            sources=aggregated.sources,
            items=[
                ContentListItem(
                    key=display_key(item, index),
                    icon=get_type_icon(item.type),
                    display_date=format_list_date(item.createdAt),
                    item=item,
                )
                for index, item in enumerate(visible)
            ],
            message=None if visible else NO_RESULTS_MESSAGE,
        )

    async def find_item(self, content_type: str, item_id: str) -> Optional[ContentItem]:
        """Look an item up by category label and source id."""
        aggregated = await self.aggregator.aggregate()
        for item in aggregated.items:
            if item.type == content_type and str(item.id) == str(item_id):
                return item
        logger.debug(f"No '{content_type}' item with id '{item_id}'")
        return None

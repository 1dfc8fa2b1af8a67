from .content_aggregator import ContentAggregator, AggregationResult, normalize_row
from .content_query import RepositoryViewState, filter_items, sort_items, toggle_sort
from .content_repository import ContentRepositoryService
from .linkedin_publisher import LinkedInPublisher
from .request_state import RequestTracker, SubmissionInProgressError, request_tracker

__all__ = [
    "ContentAggregator",
    "AggregationResult",
    "normalize_row",
    "RepositoryViewState",
    "filter_items",
    "sort_items",
    "toggle_sort",
    "ContentRepositoryService",
    "LinkedInPublisher",
    "RequestTracker",
    "SubmissionInProgressError",
    "request_tracker",
]

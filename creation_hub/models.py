# ============================================================================
# Creation Hub - Data Models
# ============================================================================
"""
Pydantic models shared by the services and the API layer.

Field names that cross the wire to the front end (``createdAt``, ``postAs``,
``companyName`` ...) keep the camelCase spelling the front end already uses.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


# ============================================================================
# CONTENT REPOSITORY
# ============================================================================


class SortField(str, Enum):
    """Keys the repository list can be sorted by."""
    TITLE = "title"
    TYPE = "type"
    DATE = "date"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ContentItem(BaseModel):
    """
    A source row reshaped into the common repository form.

    Only ``type`` and ``createdAt`` are guaranteed; ``title`` and the other
    passthrough fields keep whatever the source row held, so malformed rows
    survive aggregation and are dropped later by the filter stage. Every
    other column of the row is kept as an extra field.
    """

    model_config = ConfigDict(extra="allow")

    id: Any = None
    title: Any = None
    type: str
    createdAt: str = ""
    status: Any = None
    author: Any = None

    _row_keys: List[str] = PrivateAttr(default_factory=list)

    @classmethod
    def from_row(cls, data: Dict[str, Any]) -> "ContentItem":
        """Validate a normalized row and remember its column order."""
        item = cls.model_validate(data)
        item._row_keys = list(data)
        return item

    def present_fields(self) -> List[Tuple[str, Any]]:
        """Fields the row actually carried, in the row's own order."""
        values = self.model_dump()
        if self._row_keys:
            keys = self._row_keys
        else:
            present = set(self.model_fields_set) | set(self.model_extra or {})
            keys = [key for key in values if key in present]
        return [(key, values[key]) for key in keys if key in values]


class SourceResult(BaseModel):
    """Outcome of reading one source during an aggregation."""
    table: str
    label: str
    ok: bool
    count: int = 0
    error: Optional[str] = None


class SortState(BaseModel):
    sort_by: SortField = SortField.DATE
    sort_order: SortOrder = SortOrder.DESC


class SortToggleRequest(BaseModel):
    """Current sort state plus the key the user just picked."""
    current: SortState = Field(default_factory=SortState)
    field: SortField


class ContentListItem(BaseModel):
    key: str = Field(description="Display key, unique within one listing")
    icon: str
    display_date: str
    item: ContentItem


class ContentListResponse(BaseModel):
    total: int = Field(description="Items aggregated before filtering")
    count: int = Field(description="Items after filtering")
    search: str = ""
    selected_types: List[str] = Field(default_factory=list)
    sort_by: SortField
    sort_order: SortOrder
    sources: List[SourceResult] = Field(default_factory=list)
    items: List[ContentListItem] = Field(default_factory=list)
    message: Optional[str] = None


class ContentTypesResponse(BaseModel):
    types: List[str]


class FieldDetail(BaseModel):
    key: str
    label: str
    value: str
    is_structured: bool = False


class ItemDetailResponse(BaseModel):
    type: str
    id: Any = None
    title: Any = None
    fields: List[FieldDetail] = Field(default_factory=list)


# ============================================================================
# LINKEDIN WIZARD
# ============================================================================


class LinkedInFormData(BaseModel):
    """
    Wizard form state submitted from the preview step.

    Fields this service does not interpret are kept and forwarded to the
    webhook unchanged.
    """

    model_config = ConfigDict(extra="allow")

    postAs: Optional[str] = None
    companyName: Optional[str] = None
    targetAudience: Optional[str] = None
    approvalResponse: Optional[str] = None
    mediaUrl: Optional[str] = None


class PostPreview(BaseModel):
    author_name: str
    avatar_initial: str
    audience_line: str
    body: str
    has_media: bool = False
    status: str = "Content ready for posting"
    next_step: str = "Review content and post to LinkedIn"


class PostResult(BaseModel):
    """Outcome of a webhook submission, reduced to one user-facing message."""
    success: bool
    message: str
    redirect_to: Optional[str] = None


class MediaAttachment(BaseModel):
    filename: str
    content: bytes
    content_type: Optional[str] = None


# ============================================================================
# SYSTEM
# ============================================================================


class HealthStatus(BaseModel):
    status: str
    service: str
    version: str
    timestamp: datetime


class ErrorResponse(BaseModel):
    """
    Standard error response model for API errors.

    Attributes:
        error: Error category or type
        detail: Detailed error message
        timestamp: When the error occurred
    """
    error: str = Field(description="Error category or type")
    detail: Optional[str] = Field(default=None, description="Detailed error message")
    timestamp: datetime = Field(default_factory=datetime.now)

    def to_content(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

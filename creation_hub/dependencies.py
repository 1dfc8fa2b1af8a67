"""FastAPI dependency providers."""

from typing import Optional

from fastapi import Header, HTTPException

from .config import settings
from .connectors.supabase_client import get_supabase_client
from .services.content_repository import ContentRepositoryService
from .services.linkedin_publisher import LinkedInPublisher, default_publisher

ANONYMOUS_SESSION = "anonymous"


def get_content_repository() -> ContentRepositoryService:
    try:
        client = get_supabase_client()
    except ValueError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return ContentRepositoryService(client, settings.content_sources)


def get_publisher() -> LinkedInPublisher:
    return default_publisher


def get_session_id(x_session_id: Optional[str] = Header(None, alias="X-Session-ID")) -> str:
    return x_session_id or ANONYMOUS_SESSION

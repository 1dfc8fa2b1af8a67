# ============================================================================
# Creation Hub - Application Configuration
# ============================================================================
"""
Application configuration module using Pydantic Settings.

This module defines all configuration parameters for the Creation Hub content
service, including:
- API/CORS settings
- Backend-as-a-service (Supabase REST) connection
- Content sources aggregated by the Content Repository
- LinkedIn automation webhook

Environment Variables:
    Every field can be overridden by its upper-cased name, e.g. SUPABASE_URL.
    CONTENT_SOURCES takes a JSON list of {"table": ..., "label": ...} objects.

Usage:
    from creation_hub.config import settings
    labels = settings.content_type_labels
"""

from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ContentSource(BaseModel):
    """One backend table and the category label its rows are shown under."""

    table: str = Field(description="Table name as exposed by the REST API")
    label: str = Field(description="Category label assigned to every row of the table")


DEFAULT_CONTENT_SOURCES: List[ContentSource] = [
    ContentSource(table="website_blog", label="Website Blog"),
    ContentSource(table="carousel", label="Carousel"),
    ContentSource(table="Content Post Information", label="Content Post Information"),
    ContentSource(table="technical_article_content", label="Technical Article Content"),
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # API SETTINGS
    # =========================================================================
    api_title: str = "Creation Hub Content API"
    api_version: str = "1.0.0"
    debug: bool = Field(default=False, description="Enable verbose logging & dev helpers")
    log_level: str = Field(default="INFO", description="Root log level")

    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Allowed origins for CORS",
    )

    # =========================================================================
    # SUPABASE (DATA SOURCE) CONFIGURATION
    # =========================================================================
    supabase_url: Optional[str] = Field(default=None, description="Project URL, e.g. https://xyz.supabase.co")
    supabase_key: Optional[str] = Field(default=None, description="Anon or service key")
    supabase_timeout: float = Field(default=30.0, description="Timeout (s) for table reads")

    # =========================================================================
    # CONTENT REPOSITORY
    # =========================================================================
    content_sources: List[ContentSource] = Field(
        default_factory=lambda: [s.model_copy() for s in DEFAULT_CONTENT_SOURCES],
        description="Tables aggregated by the repository, in display priority order",
    )

    # =========================================================================
    # LINKEDIN WIZARD
    # =========================================================================
    linkedin_webhook_url: str = Field(
        default="https://n8n.getondataconsulting.in/webhook/likedinPost",
        description="Automation webhook receiving finished posts",
    )
    webhook_timeout: float = Field(default=30.0, description="Timeout (s) for the webhook call")
    post_success_redirect: str = Field(default="/", description="Where the client navigates after posting")
    export_app_name: str = Field(default="Creation Hub", description="Footer line of exported documents")
    request_history_size: int = Field(
        default=1024, ge=1, description="Settled export/post outcomes kept for status lookups"
    )

    @property
    def content_type_labels(self) -> List[str]:
        """Filter enumeration, derived from the configured sources."""
        return [source.label for source in self.content_sources]


# Global settings instance (imported elsewhere)
settings = Settings()

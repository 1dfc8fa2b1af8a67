"""External service clients: Supabase REST data source and the automation webhook."""

from .supabase_client import SupabaseClient, SupabaseError, get_supabase_client
from .webhook_client import WebhookClient, WebhookError

__all__ = [
    "SupabaseClient",
    "SupabaseError",
    "get_supabase_client",
    "WebhookClient",
    "WebhookError",
]

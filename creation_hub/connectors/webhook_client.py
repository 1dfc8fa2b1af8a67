"""
HTTP client for the LinkedIn automation webhook.

A single POST per call, no retries and no authentication headers. The body is
JSON, or multipart when a media file accompanies the form.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from creation_hub.config import settings
from creation_hub.models import MediaAttachment

logger = logging.getLogger("creation_hub.webhook_client")


class WebhookError(RuntimeError):
    """Raised when the webhook is unreachable or answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.status_code = status_code


def build_multipart_fields(payload: Dict[str, Any]) -> Dict[str, str]:
    """
    Flatten form state into multipart text parts.

    ``None`` values are skipped, dicts and lists are JSON-encoded, and
    booleans use the lowercase JSON spelling.
    """
    fields: Dict[str, str] = {}
    for key, value in payload.items():
        if key == "mediaFile" or value is None:
            continue
        if isinstance(value, (dict, list, bool)):
            fields[key] = json.dumps(value)
        else:
            fields[key] = str(value)
    return fields


class WebhookClient:
    """Posts finished wizard form state to the automation webhook."""

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.url = url or settings.linkedin_webhook_url
        self.timeout = timeout if timeout is not None else settings.webhook_timeout

    async def post_form(
        self,
        payload: Dict[str, Any],
        media: Optional[MediaAttachment] = None,
    ) -> int:
        """
        Send ``payload`` to the webhook.

        Returns:
            The HTTP status code of a successful (2xx) response.

        Raises:
            WebhookError: On transport failure or a non-2xx response.
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                if media is not None:
                    files: List[Tuple[str, Tuple[str, bytes, str]]] = [
                        (
                            "mediaFile",
                            (media.filename, media.content, media.content_type or "application/octet-stream"),
                        )
                    ]
                    response = await client.post(
                        self.url,
                        data=build_multipart_fields(payload),
                        files=files,
                    )
                else:
                    response = await client.post(
                        self.url,
                        headers={"Content-Type": "application/json"},
                        json=payload,
                    )
        except httpx.TimeoutException as e:
            raise WebhookError(f"Timeout calling webhook: {e}", status_code=504) from e
        except httpx.RequestError as e:
            raise WebhookError(f"Webhook request failed: {e}") from e

        if not response.is_success:
            raise WebhookError(
                f"Webhook HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        logger.info(f"Webhook accepted post: {response.status_code}")
        return response.status_code

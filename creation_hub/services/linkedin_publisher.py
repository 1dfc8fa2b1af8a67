"""
LinkedIn publishing service.

Wraps the Word export and the webhook submission behind the in-flight
tracker so a repeated click while one call is pending is refused rather than
run twice. Webhook failures are reduced to a single failed ``PostResult``;
nothing is retried.
"""

import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..config import settings
from ..connectors.webhook_client import WebhookClient, WebhookError
from ..models import LinkedInFormData, MediaAttachment, PostResult
from .linkedin_export import build_post_document, export_filename
from .request_state import RequestTracker, request_tracker

logger = logging.getLogger("creation_hub.services.linkedin_publisher")

EXPORT_ACTION = "export"
POST_ACTION = "post"

POST_SUCCESS_MESSAGE = "Post scheduled for LinkedIn! 🎉"
POST_FAILURE_MESSAGE = "Error posting to LinkedIn. Please try again."
EXPORT_FAILURE_MESSAGE = "Error generating document. Please try again."


def submitted_fields(form: LinkedInFormData, drop_empty: bool = False) -> Dict[str, Any]:
    """
    The form exactly as the client sent it: fields left out are not added
    back as nulls. With ``drop_empty`` null values are dropped as well.
    """
    present = set(form.model_fields_set) | set(form.model_extra or {})
    return {
        key: value
        for key, value in form.model_dump(exclude_none=drop_empty).items()
        if key in present
    }


class LinkedInPublisher:
    def __init__(
        self,
        webhook: Optional[WebhookClient] = None,
        tracker: Optional[RequestTracker] = None,
    ) -> None:
        self.webhook = webhook or WebhookClient()
        self.tracker = tracker if tracker is not None else request_tracker

    async def export_document(
        self,
        form: LinkedInFormData,
        session_id: str,
        media_attached: bool = False,
        now: Optional[datetime] = None,
    ) -> Tuple[str, bytes]:
        """
        Build the Word export off the event loop.

        Raises:
            SubmissionInProgressError: If an export for this session is pending
            DocumentExportError: If generation fails
        """
        moment = now or datetime.now()
        async with self.tracker.track(EXPORT_ACTION, session_id):
            content = await asyncio.to_thread(build_post_document, form, media_attached, moment)
        return export_filename(moment), content

    async def publish(
        self,
        form: LinkedInFormData,
        session_id: str,
        media: Optional[MediaAttachment] = None,
    ) -> PostResult:
        """
        Submit the form to the automation webhook.

        Raises:
            SubmissionInProgressError: If a post for this session is pending
        """
        payload = submitted_fields(form, drop_empty=media is not None)
        async with self.tracker.track(POST_ACTION, session_id):
            try:
                await self.webhook.post_form(payload, media=media)
            except WebhookError as e:
                logger.warning(f"LinkedIn post failed for session '{session_id}': {e}")
                self.tracker.settle(POST_ACTION, session_id, success=False)
                return PostResult(success=False, message=POST_FAILURE_MESSAGE)

        logger.info(f"LinkedIn post submitted for session '{session_id}'")
        return PostResult(
            success=True,
            message=POST_SUCCESS_MESSAGE,
            redirect_to=settings.post_success_redirect,
        )


default_publisher = LinkedInPublisher()

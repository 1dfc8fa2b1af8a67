# ============================================================================
# creation_hub/api/v1/routers/linkedin.py
# ============================================================================
"""
LinkedIn wizard, final preview step.

Usage:
    POST /api/v1/linkedin/preview
    POST /api/v1/linkedin/export        -> .docx download
    POST /api/v1/linkedin/post          JSON form state
    POST /api/v1/linkedin/post/media    multipart: form_data (JSON) + media_file

Export and post are refused with 409 while the same action is still pending
for the caller's X-Session-ID.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from fastapi.responses import Response

from ....dependencies import get_publisher, get_session_id
from ....models import LinkedInFormData, MediaAttachment, PostPreview, PostResult
from ....services.linkedin_export import DOCX_MEDIA_TYPE, DocumentExportError, build_preview
from ....services.linkedin_publisher import EXPORT_FAILURE_MESSAGE, LinkedInPublisher

router = APIRouter(prefix="/linkedin", tags=["LinkedIn"])
logger = logging.getLogger("creation_hub.api.linkedin")


@router.post("/preview", response_model=PostPreview)
async def preview_post(
    form: LinkedInFormData,
    media_attached: bool = Query(False, description="A media file accompanies the form"),
):
    return build_preview(form, media_attached)


@router.post("/export")
async def export_post(
    form: LinkedInFormData,
    media_attached: bool = Query(False, description="A media file accompanies the form"),
    session_id: str = Depends(get_session_id),
    publisher: LinkedInPublisher = Depends(get_publisher),
):
    """Download the post as a Word document."""
    try:
        filename, content = await publisher.export_document(form, session_id, media_attached)
    except DocumentExportError:
        raise HTTPException(status_code=500, detail=EXPORT_FAILURE_MESSAGE)

    return Response(
        content=content,
        media_type=DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/post", response_model=PostResult)
async def post_to_linkedin(
    form: LinkedInFormData,
    session_id: str = Depends(get_session_id),
    publisher: LinkedInPublisher = Depends(get_publisher),
):
    return await publisher.publish(form, session_id)


@router.post("/post/media", response_model=PostResult)
async def post_to_linkedin_with_media(
    form_data: str = Form(..., description="Wizard form state as JSON"),
    media_file: Optional[UploadFile] = File(None),
    session_id: str = Depends(get_session_id),
    publisher: LinkedInPublisher = Depends(get_publisher),
):
    form = LinkedInFormData.model_validate_json(form_data)

    media = None
    if media_file is not None and media_file.filename:
        media = MediaAttachment(
            filename=media_file.filename,
            content=await media_file.read(),
            content_type=media_file.content_type,
        )
        logger.info(f"Posting with media '{media.filename}' ({len(media.content)} bytes)")

    return await publisher.publish(form, session_id, media=media)

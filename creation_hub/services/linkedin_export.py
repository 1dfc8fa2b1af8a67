"""
Preview and Word export for the LinkedIn wizard's final step.

The preview mirrors what the post will look like on LinkedIn; the export
writes the same content, plus metadata lines, into a ``.docx`` document.
"""

import io
import logging
from datetime import datetime
from typing import Optional

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt, RGBColor

from ..config import settings
from ..models import LinkedInFormData, PostPreview

logger = logging.getLogger("creation_hub.services.linkedin_export")

DEFAULT_AUTHOR = "Your Name"
DEFAULT_INITIAL = "U"
EMPTY_BODY = "No approval response yet."
MEDIA_NOTE = "[Media attachment included]"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class DocumentExportError(RuntimeError):
    """Raised when the Word document cannot be generated."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


def author_name(form: LinkedInFormData) -> str:
    if form.postAs == "company" and form.companyName:
        return form.companyName
    return DEFAULT_AUTHOR


def post_body(form: LinkedInFormData) -> str:
    return form.approvalResponse or EMPTY_BODY


def has_media(form: LinkedInFormData, media_attached: bool = False) -> bool:
    return media_attached or bool(form.mediaUrl)


def build_preview(form: LinkedInFormData, media_attached: bool = False) -> PostPreview:
    name = author_name(form)
    initial = name[0].upper() if name != DEFAULT_AUTHOR else DEFAULT_INITIAL
    return PostPreview(
        author_name=name,
        avatar_initial=initial,
        audience_line=f"{form.targetAudience or ''} • Now",
        body=post_body(form),
        has_media=has_media(form, media_attached),
    )


def format_generated_on(moment: datetime) -> str:
    """e.g. ``October 19, 2026 at 03:45 PM``."""
    return f"{moment:%B} {moment.day}, {moment.year} at {moment:%I:%M %p}"


def export_filename(moment: datetime) -> str:
    return f"linkedin-post-{moment.date().isoformat()}.docx"


def _labelled_line(doc, label: str, value: str, space_after: int) -> None:
    paragraph = doc.add_paragraph()
    paragraph.add_run(label).bold = True
    paragraph.add_run(value)
    paragraph.paragraph_format.space_after = Pt(space_after)


def build_post_document(
    form: LinkedInFormData,
    media_attached: bool = False,
    now: Optional[datetime] = None,
) -> bytes:
    """
    Render the post into a Word document.

    Returns:
        DOCX file as bytes

    Raises:
        DocumentExportError: If document generation fails
    """
    moment = now or datetime.now()
    try:
        doc = Document()
        doc.core_properties.title = "LinkedIn Post Preview"

        heading = doc.add_heading("LINKEDIN POST PREVIEW", level=1)
        heading.alignment = WD_ALIGN_PARAGRAPH.CENTER
        heading.paragraph_format.space_after = Pt(15)

        _labelled_line(doc, "Posted by: ", author_name(form), 10)
        _labelled_line(doc, "Target Audience: ", form.targetAudience or "Not specified", 10)
        _labelled_line(doc, "Generated on: ", format_generated_on(moment), 20)

        content_heading = doc.add_heading("POST CONTENT:", level=2)
        content_heading.paragraph_format.space_after = Pt(10)

        # One paragraph per line keeps the post's own line breaks
        for line in post_body(form).split("\n"):
            paragraph = doc.add_paragraph(line or " ")
            paragraph.paragraph_format.space_after = Pt(5 if not line.strip() else 10)
            paragraph.paragraph_format.line_spacing = 1.5

        if has_media(form, media_attached):
            note = doc.add_paragraph()
            run = note.add_run(MEDIA_NOTE)
            run.italic = True
            run.font.color.rgb = RGBColor(0x66, 0x66, 0x66)
            note.paragraph_format.space_after = Pt(15)

        divider = doc.add_paragraph("---")
        divider.alignment = WD_ALIGN_PARAGRAPH.CENTER
        divider.paragraph_format.space_before = Pt(20)
        divider.paragraph_format.space_after = Pt(10)

        footer = doc.add_paragraph(f"Generated by {settings.export_app_name}")
        footer.alignment = WD_ALIGN_PARAGRAPH.CENTER
        footer.paragraph_format.space_after = Pt(10)

        buffer = io.BytesIO()
        doc.save(buffer)
        docx_bytes = buffer.getvalue()
    except Exception as e:
        logger.error(f"Error generating Word document: {e}", exc_info=True)
        raise DocumentExportError(f"DOCX generation failed: {e}") from e

    logger.debug(f"Generated DOCX: {len(docx_bytes)} bytes")
    return docx_bytes

"""Plain-text extraction from uploaded resume documents."""

import io
import logging

import pdfplumber
from docx import Document

from config import settings

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MEDIA_TYPE = "text/plain"

PDF_PLACEHOLDER = (
    "PDF content detected. Please paste the text content manually "
    "or use a DOCX file for automatic text extraction."
)


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def detect_media_type(content_type: str | None, filename: str | None = None) -> str | None:
    """Resolve the document type from the declared media type, falling back to the extension."""
    if content_type in (PDF_MEDIA_TYPE, DOCX_MEDIA_TYPE, TEXT_MEDIA_TYPE):
        return content_type
    name = (filename or "").lower()
    if name.endswith(".pdf"):
        return PDF_MEDIA_TYPE
    if name.endswith(".docx"):
        return DOCX_MEDIA_TYPE
    if name.endswith(".txt"):
        return TEXT_MEDIA_TYPE
    return None


def extract_text(
    content: bytes, content_type: str | None, filename: str | None = None
) -> str | None:
    """Extract resume text from an uploaded document.

    Returns None for unsupported types or when extraction fails, so the
    caller can fall back to pasted resume text.
    """
    media_type = detect_media_type(content_type, filename)
    try:
        if media_type == PDF_MEDIA_TYPE:
            if not settings.pdf_text_extraction:
                return PDF_PLACEHOLDER
            return extract_text_pdf(content)
        if media_type == DOCX_MEDIA_TYPE:
            return extract_text_docx(content)
        if media_type == TEXT_MEDIA_TYPE:
            return content.decode("utf-8", errors="replace").strip()
    except Exception as e:
        logger.error("Error extracting text from %s: %s", media_type, e)
        return None

    logger.warning("Unsupported resume media type: %s (%s)", content_type, filename)
    return None

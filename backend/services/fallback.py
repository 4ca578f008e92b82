"""Network-independent analysis returned when any pipeline stage fails."""

from models.analysis import AnalysisResult
from services.fixtures import FALLBACK_ANALYSIS


def generate_fallback_analysis() -> AnalysisResult:
    """Return the canned fallback record. It is fully immutable, so it is shared."""
    return FALLBACK_ANALYSIS

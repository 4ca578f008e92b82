"""Orchestrator: resume analysis pipeline.

Pipeline:
1. Sanitization (PDF container → plain text, sample text if nothing readable)
2. Sufficiency gate (reject text too short to analyze)
3. Prompt construction
4. Gemini generateContent call (single attempt)
5. JSON extraction from the model reply
6. Field-by-field repair into a complete AnalysisResult

Any failure along the way is logged and replaced with the fallback analysis,
so ``analyze`` always returns a usable result.
"""

import logging

from models.analysis import AnalysisResult
from services import content_extractor, content_sanitizer, prompt_builder, response_parser
from services.errors import AnalysisError, EndpointError
from services.fallback import generate_fallback_analysis
from services.gemini_client import GeminiClient, get_client
from services.result_validator import repair_result

logger = logging.getLogger(__name__)


async def _run_pipeline(file_content: str, client: GeminiClient | None) -> AnalysisResult:
    # --- Stage 1: Sanitization ---
    clean_content = content_sanitizer.clean_resume_content(file_content)
    logger.debug("Sanitized content length: %d", len(clean_content))

    # --- Stage 2: Sufficiency gate ---
    content_sanitizer.ensure_sufficient_content(clean_content)

    # --- Stage 3: Prompt ---
    prompt = prompt_builder.build_analysis_prompt(clean_content)

    # --- Stage 4: Inference ---
    if client is None:
        client = get_client()
    if client is None:
        raise EndpointError("Gemini API key is not configured")
    generated_text = await client.generate_text(prompt)

    # --- Stage 5: JSON extraction ---
    data = response_parser.parse_analysis_json(generated_text)

    # --- Stage 6: Repair ---
    return repair_result(data)


async def analyze(file_content: str, client: GeminiClient | None = None) -> AnalysisResult:
    """Analyze resume content. Never raises; failures yield the fallback analysis."""
    logger.info("Analyzing resume with content length: %d", len(file_content))
    try:
        return await _run_pipeline(file_content, client)
    except AnalysisError as exc:
        logger.warning("Resume analysis failed (%s), using fallback: %s", type(exc).__name__, exc)
    except Exception:
        logger.exception("Unexpected error analyzing resume, using fallback")
    return generate_fallback_analysis()


async def analyze_upload(
    upload: content_extractor.UploadedFile, client: GeminiClient | None = None
) -> AnalysisResult:
    """Extract text from an upload and analyze it.

    ReadError from extraction propagates; everything after it falls back.
    """
    file_content = await content_extractor.extract_text(upload)
    return await analyze(file_content, client)

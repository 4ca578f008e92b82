from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_gemini_client, require_authenticated
from config import settings
from models.analysis import AnalysisResult
from models.requests import TextAnalyzeRequest
from services import resume_analyzer
from services.errors import ReadError
from services.gemini_client import GeminiClient

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
    }


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    dependencies=[Depends(require_authenticated)],
)
@limiter.limit("10/minute")
async def analyze(
    request: Request,
    resume_file: UploadFile = File(...),
    client: GeminiClient | None = Depends(get_gemini_client),
):
    if resume_file.size is not None and resume_file.size > settings.max_upload_size_mb * 1024 * 1024:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        return await resume_analyzer.analyze_upload(resume_file, client)
    except ReadError:
        raise HTTPException(status_code=400, detail="Could not read uploaded file")


@router.post(
    "/analyze/text",
    response_model=AnalysisResult,
    dependencies=[Depends(require_authenticated)],
)
@limiter.limit("10/minute")
async def analyze_text(
    request: Request,
    body: TextAnalyzeRequest,
    client: GeminiClient | None = Depends(get_gemini_client),
):
    return await resume_analyzer.analyze(body.text, client)

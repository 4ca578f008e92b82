"""Google Gemini generateContent wrapper with error handling."""

import logging
from typing import Any

import httpx

from config import settings
from services.errors import (
    EmptyResponseError,
    EndpointStatusError,
    EndpointTransportError,
)

logger = logging.getLogger(__name__)

# httpx logs request URLs at INFO, and the API key travels in the query string
logging.getLogger("httpx").setLevel(logging.WARNING)

GENERATION_CONFIG = {
    "temperature": 0.2,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 8192,
}


def build_request_body(prompt: str) -> dict[str, Any]:
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": dict(GENERATION_CONFIG),
    }


def extract_generated_text(envelope: dict[str, Any]) -> str:
    """Return candidates[0].content.parts[0].text from a response envelope."""
    candidates = envelope.get("candidates") if isinstance(envelope, dict) else None
    if not candidates or not isinstance(candidates, list):
        raise EmptyResponseError("Invalid response format from Gemini API: no candidates")

    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = (content or {}).get("parts") if isinstance(content, dict) else None
    if not parts or not isinstance(parts, list):
        raise EmptyResponseError("Invalid response format from Gemini API: no content parts")

    text = parts[0].get("text") if isinstance(parts[0], dict) else None
    if not isinstance(text, str):
        raise EmptyResponseError("Invalid response format from Gemini API: no text part")
    return text


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text[:200] or "Unknown error"
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return "Unknown error"


class GeminiClient:
    """Issues a single generateContent request per call.

    No retries and no streaming: a failed call raises an EndpointError
    subclass and the caller decides what to do with it.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    def _http_client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {"transport": self._transport}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return httpx.AsyncClient(**kwargs)

    async def generate_content(self, prompt: str) -> dict[str, Any]:
        """POST the prompt and return the decoded response envelope."""
        async with self._http_client() as client:
            try:
                response = await client.post(
                    self.api_url,
                    params={"key": self.api_key},
                    json=build_request_body(prompt),
                    headers={"Content-Type": "application/json"},
                )
            except httpx.HTTPError as exc:
                raise EndpointTransportError(f"Gemini request failed: {exc}") from exc

        if not response.is_success:
            message = _error_message(response)
            logger.error("Gemini API error %s: %s", response.status_code, message)
            raise EndpointStatusError(response.status_code, message)

        try:
            envelope = response.json()
        except ValueError as exc:
            raise EmptyResponseError("Gemini API returned a non-JSON body") from exc
        if not isinstance(envelope, dict):
            raise EmptyResponseError("Gemini API returned an unexpected body")

        logger.debug("Gemini API response: %s", envelope)
        return envelope

    async def generate_text(self, prompt: str) -> str:
        return extract_generated_text(await self.generate_content(prompt))


_client: GeminiClient | None = None


def get_client() -> GeminiClient | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = GeminiClient(
            api_key=settings.gemini_api_key,
            api_url=settings.gemini_api_url,
            timeout=settings.gemini_timeout_seconds,
        )
    return _client

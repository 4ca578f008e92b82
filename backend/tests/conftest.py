"""Shared test fixtures: a mocked Gemini endpoint and fake uploads."""

import json

import httpx
import pytest

from services.gemini_client import GeminiClient

TEST_API_URL = "https://gemini.test/v1/models/test-model:generateContent"

COMPLETE_ANALYSIS = {
    "overallScore": 81,
    "sections": {
        "content": {"score": 85},
        "formatting": {"score": 70},
        "keywords": {"score": 78},
        "relevance": {"score": 88},
    },
    "keyInsights": [
        {"type": "positive", "text": "Clear progression from junior to senior roles."},
        {"type": "warning", "text": "Summary is generic."},
        {"type": "negative", "text": "No metrics in the most recent role."},
    ],
    "recommendations": [
        {
            "category": "content",
            "title": "Quantify impact",
            "description": "Add numbers to the achievements in your latest role.",
            "examples": "Cut API latency by 40%.",
        },
        {
            "category": "keywords",
            "title": "Mirror job titles",
            "description": "Use the exact titles recruiters search for.",
        },
        {
            "category": "formatting",
            "title": "Consistent dates",
            "description": "Use one date format throughout.",
            "examples": "Jan 2020 - Mar 2023",
        },
    ],
    "atsScores": {"readability": 90, "keywords": 74, "formatting": 82},
    "detectedKeywords": ["Python", "FastAPI", "PostgreSQL", "Docker", "Kubernetes"],
}

PLAIN_RESUME = (
    "Jane Doe - Senior Backend Engineer. Seven years building Python services "
    "with FastAPI, PostgreSQL and Docker. Led a team of four engineers."
)


def gemini_envelope(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def fenced(payload: dict) -> str:
    return "Here is the analysis:\n```json\n" + json.dumps(payload, indent=2) + "\n```\n"


class FakeUpload:
    """Minimal stand-in for fastapi.UploadFile."""

    def __init__(self, data: bytes, content_type: str | None, filename: str | None = "resume"):
        self._data = data
        self.content_type = content_type
        self.filename = filename

    async def read(self) -> bytes:
        return self._data


class BrokenUpload(FakeUpload):
    def __init__(self):
        super().__init__(b"", "text/plain", "broken.txt")

    async def read(self) -> bytes:
        raise OSError("disk on fire")


class RecordingHandler:
    """MockTransport handler that records requests and replies with a fixed response."""

    def __init__(self, status_code: int = 200, json_body=None, text: str | None = None, exc=None):
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)


@pytest.fixture
def make_client():
    """Build a GeminiClient whose transport is served by a RecordingHandler."""

    def _make(handler: RecordingHandler) -> GeminiClient:
        return GeminiClient(
            api_key="test-key",
            api_url=TEST_API_URL,
            transport=httpx.MockTransport(handler),
        )

    return _make

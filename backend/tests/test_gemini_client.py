"""Tests for the Gemini generateContent client."""

import json

import httpx
import pytest

import services.gemini_client as gemini_client
from conftest import TEST_API_URL, RecordingHandler, gemini_envelope
from services.errors import (
    EmptyResponseError,
    EndpointError,
    EndpointStatusError,
    EndpointTransportError,
)
from services.gemini_client import build_request_body, extract_generated_text


class TestRequest:
    @pytest.mark.asyncio
    async def test_posts_prompt_with_fixed_generation_config(self, make_client):
        handler = RecordingHandler(json_body=gemini_envelope("{}"))
        await make_client(handler).generate_content("Analyze this")

        assert len(handler.requests) == 1
        request = handler.requests[0]
        assert request.method == "POST"
        assert str(request.url).startswith(TEST_API_URL)
        assert request.url.params["key"] == "test-key"
        assert request.headers["content-type"] == "application/json"

        body = json.loads(request.content)
        assert body == {
            "contents": [{"parts": [{"text": "Analyze this"}]}],
            "generationConfig": {
                "temperature": 0.2,
                "topK": 40,
                "topP": 0.95,
                "maxOutputTokens": 8192,
            },
        }

    def test_request_body_is_fresh(self):
        body = build_request_body("a")
        body["generationConfig"]["temperature"] = 1.0
        assert build_request_body("a")["generationConfig"]["temperature"] == 0.2

    @pytest.mark.asyncio
    async def test_generate_text(self, make_client):
        handler = RecordingHandler(json_body=gemini_envelope("hello"))
        assert await make_client(handler).generate_text("prompt") == "hello"


class TestFailures:
    @pytest.mark.asyncio
    async def test_non_success_status(self, make_client):
        handler = RecordingHandler(
            status_code=500, json_body={"error": {"code": 500, "message": "Internal error"}}
        )
        with pytest.raises(EndpointStatusError) as info:
            await make_client(handler).generate_content("prompt")
        assert info.value.status_code == 500
        assert info.value.message == "Internal error"
        # No retry
        assert len(handler.requests) == 1

    @pytest.mark.asyncio
    async def test_non_success_status_without_json(self, make_client):
        handler = RecordingHandler(status_code=503, text="Service Unavailable")
        with pytest.raises(EndpointStatusError) as info:
            await make_client(handler).generate_content("prompt")
        assert info.value.message == "Service Unavailable"

    @pytest.mark.asyncio
    async def test_transport_failure(self, make_client):
        handler = RecordingHandler(exc=httpx.ConnectError("connection refused"))
        with pytest.raises(EndpointTransportError):
            await make_client(handler).generate_content("prompt")

    @pytest.mark.asyncio
    async def test_non_json_body(self, make_client):
        handler = RecordingHandler(text="<html>oops</html>")
        with pytest.raises(EmptyResponseError):
            await make_client(handler).generate_content("prompt")

    @pytest.mark.asyncio
    async def test_no_candidates(self, make_client):
        handler = RecordingHandler(json_body={"candidates": []})
        with pytest.raises(EmptyResponseError):
            await make_client(handler).generate_text("prompt")

    def test_all_failures_are_endpoint_errors(self):
        for cls in (EndpointStatusError, EmptyResponseError, EndpointTransportError):
            assert issubclass(cls, EndpointError)


class TestExtractGeneratedText:
    def test_happy_path(self):
        assert extract_generated_text(gemini_envelope("reply")) == "reply"

    @pytest.mark.parametrize(
        "envelope",
        [
            {},
            {"candidates": None},
            {"candidates": [{}]},
            {"candidates": [{"content": {"parts": []}}]},
            {"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]},
            {"promptFeedback": {"blockReason": "SAFETY"}},
        ],
    )
    def test_missing_path(self, envelope):
        with pytest.raises(EmptyResponseError):
            extract_generated_text(envelope)


class TestGetClient:
    def test_disabled_without_key(self, monkeypatch):
        monkeypatch.setattr(gemini_client.settings, "gemini_api_key", "")
        monkeypatch.setattr(gemini_client, "_client", None)
        assert gemini_client.get_client() is None

    def test_built_from_settings(self, monkeypatch):
        monkeypatch.setattr(gemini_client.settings, "gemini_api_key", "configured-key")
        monkeypatch.setattr(gemini_client.settings, "gemini_api_url", TEST_API_URL)
        monkeypatch.setattr(gemini_client, "_client", None)
        client = gemini_client.get_client()
        assert client is not None
        assert client.api_key == "configured-key"
        assert client.api_url == TEST_API_URL
        assert gemini_client.get_client() is client

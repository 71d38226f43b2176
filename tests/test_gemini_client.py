# tests/test_gemini_client.py
import json

import httpx
import pytest

from eventflow.errors import PlanMalformedResponseError, PlanNetworkError
from eventflow.lib.gemini_client import GeminiClient

def _client(handler) -> GeminiClient:
    return GeminiClient(
        api_key="test-key",
        model="gemini-test",
        base_url="https://gl.example/v1beta/",
        transport=httpx.MockTransport(handler),
    )

def _ok(text: str) -> httpx.Response:
    return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": text}]}}]})

@pytest.mark.asyncio
async def test_generate_posts_prompt_and_returns_text():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["key"] = request.url.params.get("key")
        seen["body"] = json.loads(request.content)
        return _ok('{"gift_ideas": ["Doll"]}')

    text = await _client(handler).generate("plan a party")

    assert text == '{"gift_ideas": ["Doll"]}'
    assert seen["method"] == "POST"
    assert seen["path"] == "/v1beta/models/gemini-test:generateContent"
    assert seen["key"] == "test-key"
    assert seen["body"] == {"contents": [{"parts": [{"text": "plan a party"}]}]}

@pytest.mark.asyncio
@pytest.mark.parametrize("status", [400, 403, 429, 500, 503])
async def test_non_2xx_is_network_error(status):
    client = _client(lambda request: httpx.Response(status, json={"error": {"message": "nope"}}))
    with pytest.raises(PlanNetworkError) as exc:
        await client.generate("x")
    assert exc.value.status_code == status

@pytest.mark.asyncio
async def test_transport_failure_is_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(PlanNetworkError):
        await _client(handler).generate("x")

@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{}, {"candidates": []}, {"candidates": [{"content": {"parts": []}}]}])
async def test_unexpected_success_shape_is_malformed(body):
    with pytest.raises(PlanMalformedResponseError):
        await _client(lambda request: httpx.Response(200, json=body)).generate("x")

@pytest.mark.asyncio
async def test_success_body_not_json_is_malformed():
    with pytest.raises(PlanMalformedResponseError):
        await _client(lambda request: httpx.Response(200, text="<html>oops</html>")).generate("x")

# eventflow/lib/gemini_client.py
from typing import Optional

import httpx

from eventflow.errors import PlanMalformedResponseError, PlanNetworkError
from eventflow.logger import get_logger

log = get_logger(__name__)


def build_request_body(prompt: str) -> dict:
    return {"contents": [{"parts": [{"text": prompt}]}]}


def extract_text(data: dict) -> str:
    """Pull candidates[0].content.parts[0].text out of a generateContent response."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise PlanMalformedResponseError(f"unexpected generateContent shape: {e!r}") from e
    if not isinstance(text, str):
        raise PlanMalformedResponseError("generateContent text part is not a string")
    return text


class GeminiClient:
    """
    Minimal async client for the Gemini `generateContent` REST call.
    One POST per prompt; no timeout override and no retries.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=None) as http:
                resp = await http.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    headers={"Content-Type": "application/json"},
                    json=build_request_body(prompt),
                )
        except httpx.HTTPError as e:
            raise PlanNetworkError(f"generateContent request failed: {e.__class__.__name__}") from e

        if not resp.is_success:
            raise PlanNetworkError(
                f"generateContent returned HTTP {resp.status_code}", status_code=resp.status_code
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise PlanMalformedResponseError("generateContent body is not JSON") from e
        text = extract_text(data)
        log.debug(f"gemini {self.model} returned {len(text)} chars")
        return text

# eventflow/lib/openai_client.py
from typing import Optional

import openai
from openai import AsyncOpenAI

from eventflow.errors import PlanMalformedResponseError, PlanNetworkError

SYSTEM = (
    "You are an expert event planner. "
    "Return STRICT JSON only — exactly one JSON object with the arrays "
    "'theme_suggestions', 'activities', 'todo_list', and 'gift_ideas'. "
    "No extra text, no comments, no markdown."
)


class OpenAIChatClient:
    """Chat-completions backend; the SDK client is built on first use."""

    def __init__(self, *, api_key: str, model: str, temperature: float = 0.9, client: Optional[AsyncOpenAI] = None):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str) -> str:
        try:
            resp = await self.client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                messages=[
                    {"role": "system", "content": SYSTEM},
                    {"role": "user", "content": prompt},
                ],
            )
        except openai.APIStatusError as e:
            raise PlanNetworkError(f"chat completion returned HTTP {e.status_code}", status_code=e.status_code) from e
        except openai.OpenAIError as e:
            raise PlanNetworkError(f"chat completion failed: {e.__class__.__name__}") from e

        try:
            return (resp.choices[0].message.content or "").strip()
        except (AttributeError, IndexError) as e:
            raise PlanMalformedResponseError("chat completion had no choices") from e

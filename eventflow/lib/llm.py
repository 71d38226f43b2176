# eventflow/lib/llm.py
from typing import Protocol

from eventflow.config import Config


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


def build_text_generator(cfg: Config) -> TextGenerator:
    if cfg.llm_provider == "gemini":
        from eventflow.lib.gemini_client import GeminiClient
        return GeminiClient(api_key=cfg.gemini_api_key, model=cfg.gemini_model, base_url=cfg.gemini_base_url)
    if cfg.llm_provider == "openai":
        from eventflow.lib.openai_client import OpenAIChatClient
        return OpenAIChatClient(
            api_key=cfg.openai_api_key, model=cfg.openai_text_model, temperature=cfg.openai_temperature
        )
    raise ValueError(f"LLM_PROVIDER must be one of: gemini, openai (got {cfg.llm_provider!r})")

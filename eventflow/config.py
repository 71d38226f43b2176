# eventflow/config.py
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}

def _env_csv(name: str, default: str = "*") -> List[str]:
    raw = os.getenv(name, default)
    return [x.strip() for x in raw.split(",") if x.strip()]

@dataclass(frozen=True)
class Config:
    # Text generation backend: "gemini" or "openai"
    llm_provider: str
    # Gemini (REST generateContent)
    gemini_api_key: str
    gemini_model: str
    gemini_base_url: str
    # OpenAI
    openai_api_key: str
    openai_text_model: str
    openai_temperature: float
    # Persistence
    store_dir: Path
    store_key: str
    # API / CORS
    allowed_origins: List[str]
    # Logging
    log_level: str
    debug: bool

def load_config() -> Config:
    return Config(
        llm_provider = os.getenv("LLM_PROVIDER", "gemini").strip().lower(),
        gemini_api_key = os.getenv("GEMINI_API_KEY", ""),
        gemini_model = os.getenv("GEMINI_MODEL", "gemini-2.5-flash-preview-09-2025"),
        gemini_base_url = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"),
        openai_api_key = os.getenv("OPENAI_API_KEY", ""),
        openai_text_model = os.getenv("OPENAI_TEXT_MODEL", "gpt-4o-mini"),
        openai_temperature = float(os.getenv("OPENAI_TEMPERATURE", "0.9")),
        store_dir = Path(os.getenv("STORE_DIR", str(Path(__file__).resolve().parent / "output" / "store"))),
        store_key = os.getenv("STORE_KEY", "ai_events_v1"),
        allowed_origins = _env_csv("ALLOWED_ORIGINS", "*"),
        log_level = os.getenv("LOG_LEVEL", "INFO"),
        debug = _env_bool("DEBUG", False),
    )

# Load once
config = load_config()

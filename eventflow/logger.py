# eventflow/logger.py
import logging
import sys
from typing import Optional
from eventflow.config import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Loggers owned by the servers we run under; they follow LOG_LEVEL
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "gunicorn.error", "gunicorn.access")

# Never below WARNING: httpx logs request URLs at INFO and the Gemini key is a query param
QUIET_LOGGERS = ("httpx", "httpcore", "openai")

_configured = False

def _resolve_level(level: Optional[str]) -> int:
    name = (level or ("DEBUG" if config.debug else config.log_level)).upper()
    value = getattr(logging, name, None)
    return value if isinstance(value, int) else logging.INFO

def configure_logging(level: Optional[str] = None) -> None:
    """
    One stdout handler on the root logger, set up on first use.
    DEBUG=true forces debug level; otherwise LOG_LEVEL decides.
    """
    global _configured
    if _configured:
        return

    level_value = _resolve_level(level)
    root = logging.getLogger()
    root.setLevel(level_value)

    if not any(getattr(h, "_eventflow", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._eventflow = True
        root.addHandler(handler)

    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(level_value)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level_value, logging.WARNING))

    _configured = True

def get_logger(name: Optional[str] = None) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name or "eventflow")

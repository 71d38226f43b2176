# tests/test_logger.py
import logging

from eventflow.logger import QUIET_LOGGERS, _resolve_level, get_logger

def test_resolve_level():
    assert _resolve_level("debug") == logging.DEBUG
    assert _resolve_level("WARNING") == logging.WARNING
    assert _resolve_level("not-a-level") == logging.INFO

def test_http_client_loggers_stay_quiet():
    get_logger(__name__)
    for name in QUIET_LOGGERS:
        assert logging.getLogger(name).level >= logging.WARNING

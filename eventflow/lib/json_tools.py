# eventflow/lib/json_tools.py
import json
import re
from typing import Any, Dict

_FENCE = re.compile(r"```(?:json)?", flags=re.IGNORECASE)

def strip_code_fences(text: str) -> str:
    """Drop every ```json / ``` marker and trim the rest."""
    return _FENCE.sub("", text or "").strip()

def parse_json_object(text: str) -> Dict[str, Any]:
    """
    Parse model output that should be a single JSON object.
    Raises ValueError when the text is not JSON or the top level is not an object.
    """
    s = strip_code_fences(text)
    try:
        data = json.loads(s)
    except json.JSONDecodeError as e:
        raise ValueError(f"Model did not return valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data

# eventflow/features/events/store.py
import json
from typing import Iterable, List

from pydantic import ValidationError

from eventflow.lib.kv_store import KeyValueStore
from eventflow.logger import get_logger
from .schemas import EventPlan

DEFAULT_KEY = "ai_events_v1"
log = get_logger(__name__)

class EventStore:
    """The whole collection lives in one slot of a key-value store, as a JSON array."""

    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_KEY):
        self.kv = kv
        self.key = key

    def load(self) -> List[EventPlan]:
        """
        Read the stored collection. Anything unreadable degrades to an empty list:
        a missing slot, bad JSON, a non-list payload, or an entry that does not validate.
        """
        try:
            raw = self.kv.get(self.key)
        except (OSError, UnicodeDecodeError) as e:
            log.warning(f"event store '{self.key}' unreadable, starting empty: {e}")
            return []
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            log.warning(f"event store '{self.key}' is not valid JSON, starting empty: {e}")
            return []
        if not isinstance(data, list):
            log.warning(f"event store '{self.key}' holds {type(data).__name__}, expected list; starting empty")
            return []

        try:
            return [EventPlan.model_validate(item) for item in data]
        except ValidationError as e:
            log.warning(f"event store '{self.key}' has invalid entries, starting empty: {e.error_count()} error(s)")
            return []

    def save(self, plans: Iterable[EventPlan]) -> None:
        payload = json.dumps([p.model_dump() for p in plans], ensure_ascii=False)
        self.kv.set(self.key, payload)

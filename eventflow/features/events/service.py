# eventflow/features/events/service.py
from typing import List, Optional, Tuple

from eventflow.logger import get_logger
from .schemas import EventPlan
from .store import EventStore

log = get_logger(__name__)

class EventList:
    """
    In-memory, newest-first list of planned events.
    Loaded once from the store; every successful mutation writes the full list back.
    """

    def __init__(self, store: EventStore):
        self._store = store
        self._events: List[EventPlan] = store.load()
        log.info(f"loaded {len(self._events)} event(s) from '{store.key}'")

    def __len__(self) -> int:
        return len(self._events)

    def all(self) -> Tuple[EventPlan, ...]:
        return tuple(self._events)

    def ids(self) -> List[int]:
        return [e.id for e in self._events]

    def get(self, event_id: int) -> Optional[EventPlan]:
        return next((e for e in self._events if e.id == event_id), None)

    def insert_front(self, plan: EventPlan) -> None:
        updated = [plan, *self._events]
        self._store.save(updated)
        self._events = updated

    def remove_by_id(self, event_id: int) -> bool:
        """Returns False (and writes nothing) when the id is not present."""
        kept = [e for e in self._events if e.id != event_id]
        if len(kept) == len(self._events):
            return False
        self._store.save(kept)
        self._events = kept
        return True

# eventflow/features/events/router.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from eventflow.deps import get_event_list
from eventflow.logger import get_logger
from .schemas import EventPlan
from .service import EventList

router = APIRouter(prefix="/api/v1", tags=["events"])
log = get_logger(__name__)

@router.get("/events", response_model=List[EventPlan])
async def list_events(events: EventList = Depends(get_event_list)) -> List[EventPlan]:
    return list(events.all())

@router.get("/events/{event_id}", response_model=EventPlan)
async def get_event(event_id: int, events: EventList = Depends(get_event_list)) -> EventPlan:
    plan = events.get(event_id)
    if plan is None:
        raise HTTPException(status_code=404, detail=f"event {event_id} not found")
    return plan

@router.delete("/events/{event_id}", status_code=204)
async def delete_event(event_id: int, events: EventList = Depends(get_event_list)) -> Response:
    """Idempotent: deleting an unknown id is still a 204."""
    if events.remove_by_id(event_id):
        log.info(f"deleted event {event_id}")
    return Response(status_code=204)

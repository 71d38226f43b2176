# eventflow/features/plan/router.py
from fastapi import APIRouter, Depends, HTTPException

from eventflow.deps import get_event_list, get_pipeline
from eventflow.errors import PlanError, PlanValidationError
from eventflow.features.events.schemas import EventPlan
from eventflow.features.events.service import EventList
from eventflow.logger import get_logger
from .schemas import FormInput
from .service import PlanPipeline

router = APIRouter(prefix="/api/v1", tags=["event-plan"])
log = get_logger(__name__)

@router.post("/generate/event-plan", status_code=201, response_model=EventPlan)
async def generate_event_plan_endpoint(
    req: FormInput,
    pipeline: PlanPipeline = Depends(get_pipeline),
    events: EventList = Depends(get_event_list),
) -> EventPlan:
    """
    Generate a plan from the form fields and prepend it to the stored list.
    422 for missing fields, 502 when the model call fails or returns junk.
    """
    try:
        plan = await pipeline.generate_plan(req)
    except PlanValidationError as e:
        raise HTTPException(status_code=422, detail={"kind": e.kind, "message": str(e), "missing": e.missing})
    except PlanError as e:
        log.exception(f"event plan generation failed: {e}")
        raise HTTPException(status_code=502, detail={"kind": e.kind, "message": e.user_message})

    events.insert_front(plan)
    return plan

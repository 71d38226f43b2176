# eventflow/features/board/router.py
from typing import Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse, RedirectResponse

from eventflow.deps import get_controller
from eventflow.features.plan.schemas import Gender
from eventflow.logger import get_logger
from .controller import PlanFormController
from .page import render_board

router = APIRouter(tags=["board"])
log = get_logger(__name__)

def _back_home() -> RedirectResponse:
    return RedirectResponse("/", status_code=303)

@router.get("/", response_class=HTMLResponse)
async def board(expanded: Optional[int] = None, ctl: PlanFormController = Depends(get_controller)) -> HTMLResponse:
    return HTMLResponse(render_board(ctl.events.all(), ctl, expanded_id=expanded))

@router.post("/modal/open")
async def open_modal(ctl: PlanFormController = Depends(get_controller)) -> RedirectResponse:
    ctl.open_modal()
    return _back_home()

@router.post("/modal/close")
async def close_modal(ctl: PlanFormController = Depends(get_controller)) -> RedirectResponse:
    ctl.close_modal()
    return _back_home()

@router.post("/plan")
async def submit_plan(
    name: str = Form(""),
    age: str = Form(""),
    gender: Gender = Form("Any"),
    eventType: str = Form(""),
    ctl: PlanFormController = Depends(get_controller),
) -> RedirectResponse:
    if ctl.loading:
        log.debug("board: submit dropped while a plan request is in flight")
        return _back_home()
    ctl.update_form(name=name, age=age, gender=gender, eventType=eventType)
    plan = await ctl.submit()
    if plan is not None:
        log.info(f"board: added event {plan.id}")
    return _back_home()

@router.post("/events/{event_id}/delete")
async def delete_event(event_id: int, ctl: PlanFormController = Depends(get_controller)) -> RedirectResponse:
    ctl.delete(event_id)
    return _back_home()

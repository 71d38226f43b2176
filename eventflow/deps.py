# eventflow/deps.py
# FastAPI dependencies; the objects themselves are wired onto app.state in eventflow.main
from fastapi import Request

from eventflow.features.board.controller import PlanFormController
from eventflow.features.events.service import EventList
from eventflow.features.plan.service import PlanPipeline

def get_event_list(request: Request) -> EventList:
    return request.app.state.events

def get_pipeline(request: Request) -> PlanPipeline:
    return request.app.state.pipeline

def get_controller(request: Request) -> PlanFormController:
    return request.app.state.controller

# eventflow/__init__.py
from .config import config, load_config
from .logger import get_logger
from .errors import PlanError, PlanValidationError, PlanNetworkError, PlanMalformedResponseError
from .features.events.schemas import EventPlan
from .features.events.store import EventStore
from .features.events.service import EventList
from .features.plan.schemas import FormInput
from .features.plan.service import PlanPipeline
from .features.board.controller import PlanFormController
from .features.board.cards import render_event_card


__all__ = ["config",
           "load_config",
           "get_logger",
           "PlanError",
           "PlanValidationError",
           "PlanNetworkError",
           "PlanMalformedResponseError",
           "EventPlan",
           "EventStore",
           "EventList",
           "FormInput",
           "PlanPipeline",
           "PlanFormController",
           "render_event_card",
           ]

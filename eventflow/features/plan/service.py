# eventflow/features/plan/service.py
from datetime import datetime
from typing import Callable

from eventflow.errors import PlanMalformedResponseError, PlanValidationError
from eventflow.features.events.schemas import SUGGESTION_FIELDS, EventPlan
from eventflow.lib.json_tools import parse_json_object
from eventflow.lib.llm import TextGenerator
from eventflow.logger import get_logger
from .prompt import build_event_plan_prompt
from .schemas import FormInput

log = get_logger(__name__)

def format_created_at(dt: datetime) -> str:
    """en-US short date without zero padding, e.g. 3/7/2025."""
    return f"{dt.month}/{dt.day}/{dt.year}"

class PlanPipeline:
    """
    validate -> prompt -> call -> parse -> construct.
    The id source and clock are injected so tests (and rapid submits) stay deterministic.
    """

    def __init__(
        self,
        generator: TextGenerator,
        *,
        id_factory: Callable[[], int],
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.generator = generator
        self.id_factory = id_factory
        self.clock = clock

    def build_prompt(self, form: FormInput) -> str:
        return build_event_plan_prompt(
            name=form.name,
            age=form.age,
            gender=form.gender,
            event_type=form.eventType,
        )

    async def generate_plan(self, form: FormInput) -> EventPlan:
        missing = form.missing_fields()
        if missing:
            raise PlanValidationError(missing)

        prompt = self.build_prompt(form)
        raw = await self.generator.generate(prompt)

        try:
            ai_data = parse_json_object(raw)
        except ValueError as e:
            log.warning(f"unparseable plan response ({len(raw)} chars): {raw[:200]!r}")
            raise PlanMalformedResponseError(str(e)) from e

        missing_lists = [k for k in SUGGESTION_FIELDS if k not in ai_data]
        if missing_lists:
            log.info(f"plan response is missing {missing_lists}; rendering them empty")

        # Form fields and id always win over anything the model echoed back
        plan = EventPlan(
            **{k: ai_data.get(k) for k in SUGGESTION_FIELDS},
            id=self.id_factory(),
            name=form.name,
            age=form.age,
            gender=form.gender,
            eventType=form.eventType,
            createdAt=format_created_at(self.clock()),
        )
        log.info(f"generated plan {plan.id} for {plan.eventType!r}")
        return plan

# eventflow/features/board/controller.py
from typing import Any, Optional

from eventflow.errors import PlanError, PlanValidationError
from eventflow.features.events.schemas import EventPlan
from eventflow.features.events.service import EventList
from eventflow.features.plan.schemas import FormInput
from eventflow.features.plan.service import PlanPipeline
from eventflow.logger import get_logger

log = get_logger(__name__)

SAVE_FAILED_MESSAGE = "Your plan was generated but could not be saved. Please try again."

class PlanFormController:
    """
    Transient state behind the "Plan an Event" modal: the form fields, whether the
    modal is open, whether a request is in flight, and the one error message slot.
    """

    def __init__(self, pipeline: PlanPipeline, events: EventList):
        self.pipeline = pipeline
        self.events = events
        self.form = FormInput()
        self.modal_open = False
        self.loading = False
        self.error: Optional[str] = None

    def open_modal(self) -> None:
        # keeps whatever was typed last time
        self.modal_open = True
        self.error = None

    def close_modal(self) -> None:
        self.modal_open = False

    def update_field(self, name: str, value: Any) -> None:
        if name not in FormInput.model_fields:
            raise KeyError(name)
        self.form = FormInput.model_validate({**self.form.model_dump(), name: value})

    def update_form(self, **fields: Any) -> None:
        for name, value in fields.items():
            self.update_field(name, value)

    async def submit(self) -> Optional[EventPlan]:
        """
        Run the pipeline for the current form. Returns the new plan, or None when the
        submit was ignored (already loading) or failed (see self.error).
        """
        if self.loading:
            log.debug("submit ignored: a plan request is already in flight")
            return None

        self.loading = True
        self.error = None
        try:
            plan = await self.pipeline.generate_plan(self.form)
        except PlanValidationError as e:
            self.error = e.user_message
            return None
        except PlanError as e:
            log.exception(f"plan request failed ({e.kind}): {e}")
            self.error = e.user_message
            return None
        finally:
            self.loading = False

        # applied even if the modal was closed while the request was in flight
        try:
            self.events.insert_front(plan)
        except OSError as e:
            log.exception(f"could not save plan {plan.id}: {e}")
            self.error = SAVE_FAILED_MESSAGE
            return None
        self.modal_open = False
        self.form = FormInput()
        return plan

    def delete(self, event_id: int) -> bool:
        return self.events.remove_by_id(event_id)

# eventflow/errors.py
from typing import Optional


class PlanError(Exception):
    """Base for everything that can stop a plan from being generated."""

    kind = "plan_error"
    user_message = "Oops! The AI had a hiccup. Please try again."

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class PlanValidationError(PlanError):
    kind = "validation"
    user_message = "Please fill in all required fields."

    def __init__(self, missing: list[str]):
        super().__init__(f"missing required fields: {', '.join(missing)}")
        self.missing = missing


class PlanNetworkError(PlanError):
    """Endpoint unreachable or answered with a non-2xx status."""

    kind = "network"


class PlanMalformedResponseError(PlanError):
    """The endpoint answered, but not with the JSON object we asked for."""

    kind = "malformed_response"

# eventflow/features/events/schemas.py
from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field, field_validator

SUGGESTION_FIELDS = ("theme_suggestions", "activities", "todo_list", "gift_ideas")

def as_str_list(value: Any) -> List[str]:
    """Best-effort coercion of model/stored output to a list of strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [x if isinstance(x, str) else str(x) for x in value if x is not None]
    return []

class EventPlan(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int = Field(..., description="Unique id, minted once at creation")
    name: str
    age: str
    gender: str = "Any"
    eventType: str
    createdAt: str = Field(..., description="Human-readable creation date (M/D/YYYY)")
    theme_suggestions: List[str] = Field(default_factory=list)
    activities: List[str] = Field(default_factory=list)
    todo_list: List[str] = Field(default_factory=list)
    gift_ideas: List[str] = Field(default_factory=list)

    @field_validator("age", mode="before")
    @classmethod
    def _age_as_str(cls, v):
        return v if isinstance(v, str) else str(v)

    @field_validator(*SUGGESTION_FIELDS, mode="before")
    @classmethod
    def _coerce_suggestions(cls, v):
        return as_str_list(v)

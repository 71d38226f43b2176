# eventflow/features/plan/schemas.py
from typing import List, Literal
from pydantic import BaseModel, Field

Gender = Literal["Any", "Male", "Female", "Non-binary"]
GENDERS: List[str] = ["Any", "Male", "Female", "Non-binary"]

class FormInput(BaseModel):
    name: str = Field("", description="Who the event is for")
    age: str = Field("", description="Age, as typed into the form")
    gender: Gender = "Any"
    eventType: str = Field("", description="Occasion, e.g. Birthday, Anniversary, Graduation")

    def missing_fields(self) -> List[str]:
        return [f for f in ("name", "age", "eventType") if not (getattr(self, f) or "").strip()]

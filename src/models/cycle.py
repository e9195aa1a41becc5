"""
Cycle model definition for logged menstrual cycles.
"""
from enum import Enum
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Flow(str, Enum):
    """
    Menstrual flow intensity. Informational only.
    """
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


class CycleRecord(BaseModel):
    """
    Represents one observed or logged menstrual cycle.

    A missing end_date means the cycle is ongoing or its end is unknown;
    custom_cycle_length is the user-declared fallback length in days.
    """
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: str
    start_date: date = Field(..., alias="startDate")
    end_date: Optional[date] = Field(None, alias="endDate")
    flow: Flow = Flow.MEDIUM
    symptoms: List[str] = Field(default_factory=list)
    custom_cycle_length: Optional[int] = Field(None, alias="customCycleLength")

    @model_validator(mode="after")
    def check_end_date(self) -> "CycleRecord":
        """Reject cycles that end before they start."""
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self

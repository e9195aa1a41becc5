"""
Activity model definition for events classified by conception risk.
"""
from enum import Enum
from datetime import date
from pydantic import BaseModel, ConfigDict, Field


class RiskLevel(str, Enum):
    """
    Conception risk of an activity relative to the predicted fertile window.
    """
    UNKNOWN = "unknown"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ActivityRecord(BaseModel):
    """
    Represents one logged activity.

    pregnancy_risk is a snapshot taken when the record is created and is
    never recomputed when the cycle history changes.
    """
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: str
    date: date
    protection: bool = False
    pregnancy_risk: RiskLevel = Field(RiskLevel.UNKNOWN, alias="pregnancyRisk")

"""
Profile model definition for the CycleFem tracker.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from src.services.constants import DEFAULT_CYCLE_LENGTH


class Profile(BaseModel):
    """
    Represents the settings of a user whose cycles are tracked.

    cycle_length is copied onto every new cycle as its fallback length.
    """
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str
    name: Optional[str] = None
    cycle_length: int = Field(DEFAULT_CYCLE_LENGTH, alias="cycleLength")

"""
Derived models for cycle predictions and historical statistics.

Neither model is persisted; both are recomputed from the cycle history
on every read.
"""
from datetime import date
from pydantic import BaseModel, ConfigDict, Field


class FertileWindow(BaseModel):
    """
    Inclusive date range around the predicted ovulation day.
    """
    start: date
    end: date

    def contains(self, day: date) -> bool:
        """Check whether a date falls inside the window, bounds included."""
        return self.start <= day <= self.end


class Predictions(BaseModel):
    """
    Forecast for the next cycle.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    next_period: date = Field(..., alias="nextPeriod")
    ovulation: date
    fertile_window: FertileWindow = Field(..., alias="fertileWindow")
    avg_cycle_length: int = Field(..., alias="avgCycleLength")


class Statistics(BaseModel):
    """
    Aggregate statistics over the full cycle history.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    total_cycles: int = Field(0, alias="totalCycles")
    average_cycle_length: float = Field(0, alias="averageCycleLength")
    average_period_length: float = Field(0, alias="averagePeriodLength")
    regularity: int = Field(0, ge=0, le=100)

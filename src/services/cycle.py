"""
Service module for menstrual cycle predictions.

This module forecasts the next cycle from a user's cycle history: the next
period start, the ovulation day and the fertile window around it. The
average cycle length it produces is also the input to pregnancy risk
classification.

Typical usage:
    cycles = store.load_cycles(user_id)
    predictions = calculate_predictions(cycles)
    if predictions:
        print(f"Next period expected on {predictions.next_period}")
"""
from typing import Iterable, Optional

from aws_lambda_powertools import Logger

from src.models.cycle import CycleRecord
from src.models.prediction import FertileWindow, Predictions
from src.services.constants import (
    LUTEAL_PHASE_DAYS,
    FERTILE_DAYS_BEFORE_OVULATION,
    FERTILE_DAYS_AFTER_OVULATION
)
from src.services.utils import (
    add_days,
    sort_cycles,
    effective_cycle_length,
    exact_mean,
    round_half_up
)

logger = Logger()

def calculate_average_cycle_length(cycles: Iterable[CycleRecord]) -> Optional[int]:
    """
    Average effective cycle length over the whole history.

    Args:
        cycles: Cycle records in any order

    Returns:
        Mean effective length rounded half-up to whole days, or None
        when there are no cycles
    """
    average = exact_mean([effective_cycle_length(cycle) for cycle in cycles])
    if average is None:
        return None
    return round_half_up(average)

def calculate_predictions(cycles: Iterable[CycleRecord]) -> Optional[Predictions]:
    """
    Predict the next period, ovulation day and fertile window.

    Args:
        cycles: Cycle records; they are sorted by start date before use

    Returns:
        Predictions anchored on the chronologically last cycle, or None
        when the history is empty

    Example:
        >>> cycles = [CycleRecord(id="1", start_date=date(2024, 1, 1), end_date=date(2024, 1, 5))]
        >>> predictions = calculate_predictions(cycles)
        >>> predictions.next_period
        datetime.date(2024, 1, 6)
    """
    history = sort_cycles(cycles)
    if not history:
        return None

    avg_cycle_length = calculate_average_cycle_length(history)
    current_cycle = history[-1]

    next_period = add_days(current_cycle.start_date, avg_cycle_length)
    ovulation = add_days(next_period, -LUTEAL_PHASE_DAYS)
    fertile_window = FertileWindow(
        start=add_days(ovulation, -FERTILE_DAYS_BEFORE_OVULATION),
        end=add_days(ovulation, FERTILE_DAYS_AFTER_OVULATION)
    )

    logger.debug("Calculated cycle predictions", extra={
        "cycles": len(history),
        "avg_cycle_length": avg_cycle_length,
        "next_period": str(next_period)
    })

    return Predictions(
        next_period=next_period,
        ovulation=ovulation,
        fertile_window=fertile_window,
        avg_cycle_length=avg_cycle_length
    )

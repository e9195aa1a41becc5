"""
Statistics calculation service for cycle tracking data.

This module provides functionality for calculating historical cycle
statistics: average cycle length between period starts, average period
duration and how regular the cycles are.
"""
from fractions import Fraction
from typing import Iterable, List
from aws_lambda_powertools import Logger
from src.models.cycle import CycleRecord
from src.models.prediction import Statistics
from src.services.constants import REGULARITY_TOLERANCE_DAYS
from src.services.utils import (
    days_between,
    inclusive_span,
    sort_cycles,
    exact_mean,
    round_half_up
)

logger = Logger()

def find_cycle_lengths(cycles: List[CycleRecord]) -> List[int]:
    """
    Days between the start dates of consecutive cycles.

    Args:
        cycles: Cycle records sorted by start date

    Returns:
        One sample per adjacent pair, empty with fewer than two cycles

    Note:
        This measures gaps between period starts and differs from the
        effective cycle length used for predictions.
    """
    return [
        days_between(cycles[i - 1].start_date, cycles[i].start_date)
        for i in range(1, len(cycles))
    ]

def find_period_lengths(cycles: List[CycleRecord]) -> List[int]:
    """Inclusive duration of every cycle that has an end date."""
    return [
        inclusive_span(cycle.start_date, cycle.end_date)
        for cycle in cycles
        if cycle.end_date is not None
    ]

def calculate_regularity(cycle_lengths: List[int]) -> int:
    """
    Percentage of cycle lengths close to the average.

    A sample is regular when it lies within REGULARITY_TOLERANCE_DAYS of
    the unrounded mean, bounds included.

    Args:
        cycle_lengths: Days between consecutive period starts

    Returns:
        Whole percentage between 0 and 100, 0 when there are no samples
    """
    average = exact_mean(cycle_lengths)
    if average is None:
        return 0

    regular = [
        length for length in cycle_lengths
        if abs(length - average) <= REGULARITY_TOLERANCE_DAYS
    ]
    return round_half_up(Fraction(100 * len(regular), len(cycle_lengths)))

def calculate_cycle_statistics(cycles: Iterable[CycleRecord]) -> Statistics:
    """
    Calculate overall cycle statistics for a cycle history.

    Args:
        cycles: Cycle records; they are sorted by start date before use

    Returns:
        Statistics containing:
        - total_cycles: Number of cycles in the history
        - average_cycle_length: Mean days between period starts (one decimal)
        - average_period_length: Mean period duration (one decimal)
        - regularity: Percentage of regular cycle lengths

    Example:
        >>> stats = calculate_cycle_statistics(store.load_cycles(user_id))
        >>> print(f"{stats.regularity}% regular")
    """
    history = sort_cycles(cycles)
    if not history:
        return Statistics()

    cycle_lengths = find_cycle_lengths(history)
    period_lengths = find_period_lengths(history)

    average_cycle_length = exact_mean(cycle_lengths)
    average_period_length = exact_mean(period_lengths)

    logger.info("Calculated cycle statistics", extra={
        "total_cycles": len(history),
        "cycle_length_samples": len(cycle_lengths),
        "period_length_samples": len(period_lengths)
    })

    return Statistics(
        total_cycles=len(history),
        average_cycle_length=round_half_up(average_cycle_length, 1) if average_cycle_length is not None else 0,
        average_period_length=round_half_up(average_period_length, 1) if average_period_length is not None else 0,
        regularity=calculate_regularity(cycle_lengths)
    )

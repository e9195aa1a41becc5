"""
Shared date utilities for cycle-related services.

All arithmetic works on calendar dates through their ordinal day numbers,
so results never depend on time of day, timezone or daylight-saving rules.
"""
from fractions import Fraction
from math import floor
from numbers import Rational
from typing import Iterable, List, Optional, Union
from datetime import date

from src.models.cycle import CycleRecord
from src.services.constants import DEFAULT_CYCLE_LENGTH

def days_between(start: date, end: date) -> int:
    """
    Count whole days from start to end (negative when end is earlier).

    Example:
        >>> days_between(date(2024, 1, 1), date(2024, 1, 29))
        28
    """
    return end.toordinal() - start.toordinal()

def add_days(day: date, days: int) -> date:
    """Shift a calendar date by a whole number of days."""
    return date.fromordinal(day.toordinal() + days)

def inclusive_span(start: date, end: date) -> int:
    """Number of calendar days from start to end, both ends counted."""
    return days_between(start, end) + 1

def sort_cycles(cycles: Iterable[CycleRecord]) -> List[CycleRecord]:
    """
    Sort cycles chronologically by start date.

    The sort is stable, so cycles sharing a start date keep their input order.
    """
    return sorted(cycles, key=lambda cycle: cycle.start_date)

def effective_cycle_length(cycle: CycleRecord) -> int:
    """
    Length in days attributed to a cycle for averaging.

    Closed cycles use their measured inclusive span; open cycles use the
    declared length when it is positive, otherwise the default length.
    """
    if cycle.end_date is not None:
        return inclusive_span(cycle.start_date, cycle.end_date)
    if cycle.custom_cycle_length is not None and cycle.custom_cycle_length > 0:
        return cycle.custom_cycle_length
    return DEFAULT_CYCLE_LENGTH

def exact_mean(values: List[int]) -> Optional[Fraction]:
    """Exact arithmetic mean of whole-day samples, None when empty."""
    if not values:
        return None
    return Fraction(sum(values), len(values))

def round_half_up(value: Union[Rational, int], places: int = 0) -> Union[int, float]:
    """
    Round a rational value half-up to a number of decimal places.

    Works on exact fractions so that e.g. 28.55 rounds to 28.6 instead of
    falling victim to binary float representation.

    Example:
        >>> round_half_up(Fraction(571, 20), 1)
        28.6
        >>> round_half_up(Fraction(5, 2))
        3
    """
    scale = 10 ** places
    rounded = floor(Fraction(value) * scale + Fraction(1, 2))
    if places == 0:
        return rounded
    return rounded / scale

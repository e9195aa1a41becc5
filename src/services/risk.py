"""
Service module for pregnancy risk classification.
"""
from datetime import date
from typing import Optional

from src.models.activity import RiskLevel
from src.models.prediction import Predictions
from src.services.constants import HIGH_RISK_MAX_DAYS_FROM_OVULATION
from src.services.utils import days_between

def calculate_pregnancy_risk(activity_date: date, predictions: Optional[Predictions]) -> RiskLevel:
    """
    Classify the conception risk of a date against the current predictions.

    Args:
        activity_date: Date of the activity
        predictions: Current predictions, None when there is no cycle history

    Returns:
        UNKNOWN without predictions, LOW outside the fertile window,
        HIGH within a day of ovulation and MEDIUM elsewhere in the window

    Example:
        >>> calculate_pregnancy_risk(predictions.ovulation, predictions)
        <RiskLevel.HIGH: 'high'>
    """
    if predictions is None:
        return RiskLevel.UNKNOWN

    if not predictions.fertile_window.contains(activity_date):
        return RiskLevel.LOW

    days_from_ovulation = abs(days_between(predictions.ovulation, activity_date))
    if days_from_ovulation <= HIGH_RISK_MAX_DAYS_FROM_OVULATION:
        return RiskLevel.HIGH
    # The rest of the window is medium regardless of distance
    return RiskLevel.MEDIUM

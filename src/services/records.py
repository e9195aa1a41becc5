"""
Service module for managing a user's cycle and activity records.

This module is the layer between request handlers and the pure cycle
services: it loads a user's history from a record store, applies changes
and returns fresh predictions computed from the updated history.

Typical usage:
    service = RecordService(get_store())
    cycle, predictions = service.add_cycle(user_id, date(2024, 1, 1))
    activity = service.add_activity(user_id, date(2024, 1, 14))
    stats = service.get_statistics(user_id)
"""
import uuid
from datetime import date
from typing import List, Optional, Tuple

from aws_lambda_powertools import Logger

from src.models.activity import ActivityRecord
from src.models.cycle import CycleRecord, Flow
from src.models.prediction import Predictions, Statistics
from src.models.user import Profile
from src.services.constants import MIN_PROFILE_CYCLE_LENGTH, MAX_PROFILE_CYCLE_LENGTH
from src.services.cycle import calculate_predictions
from src.services.exceptions import ActivityNotFoundError, CycleNotFoundError
from src.services.risk import calculate_pregnancy_risk
from src.services.statistics import calculate_cycle_statistics
from src.services.storage import RecordStore

logger = Logger()

# Marks an optional argument that was not supplied, as opposed to None
UNSET = object()

def generate_id() -> str:
    """Generate an opaque record identifier."""
    return uuid.uuid4().hex

class RecordService:
    """Record management for cycles, activities and profiles."""

    def __init__(self, store: RecordStore):
        self.store = store

    def get_profile(self, user_id: str) -> Profile:
        """
        Get a user's profile, creating a default one on first access.

        Args:
            user_id: User identifier

        Returns:
            The stored or newly created profile
        """
        profile = self.store.get_profile(user_id)
        if profile is None:
            profile = Profile(id=user_id)
            self.store.save_profile(profile)
            logger.info("Created default profile", extra={"user_id": user_id})
        return profile

    def update_profile(
        self,
        user_id: str,
        name: Optional[str] = None,
        cycle_length: Optional[int] = None
    ) -> Profile:
        """
        Update a user's profile.

        Args:
            user_id: User identifier
            name: New display name, kept unchanged if empty
            cycle_length: New declared cycle length; ignored unless it lies
                between MIN_PROFILE_CYCLE_LENGTH and MAX_PROFILE_CYCLE_LENGTH

        Returns:
            The updated profile
        """
        profile = self.get_profile(user_id)
        if name:
            profile.name = name
        if cycle_length is not None:
            if MIN_PROFILE_CYCLE_LENGTH <= cycle_length <= MAX_PROFILE_CYCLE_LENGTH:
                profile.cycle_length = cycle_length
            else:
                logger.info("Ignoring out of range cycle length", extra={
                    "user_id": user_id,
                    "cycle_length": cycle_length
                })
        self.store.save_profile(profile)
        return profile

    def list_cycles(self, user_id: str) -> Tuple[List[CycleRecord], Optional[Predictions]]:
        """Get a user's cycles in chronological order with current predictions."""
        cycles = self.store.load_cycles(user_id)
        return cycles, calculate_predictions(cycles)

    def add_cycle(
        self,
        user_id: str,
        start_date: date,
        end_date: Optional[date] = None,
        flow: Optional[Flow] = None,
        symptoms: Optional[List[str]] = None
    ) -> Tuple[CycleRecord, Optional[Predictions]]:
        """
        Log a new cycle.

        The cycle's fallback length is copied from the user's profile.

        Args:
            user_id: User identifier
            start_date: First day of the period
            end_date: Optional last day of the period
            flow: Optional flow intensity, defaults to medium
            symptoms: Optional symptom tags

        Returns:
            Tuple of (created cycle, predictions for the updated history)

        Raises:
            pydantic.ValidationError: If end_date is before start_date
        """
        profile = self.get_profile(user_id)
        cycle = CycleRecord(
            id=generate_id(),
            start_date=start_date,
            end_date=end_date,
            flow=flow or Flow.MEDIUM,
            symptoms=symptoms or [],
            custom_cycle_length=profile.cycle_length
        )
        self.store.save_cycle(user_id, cycle)
        logger.info("Cycle added", extra={
            "user_id": user_id,
            "cycle_id": cycle.id,
            "start_date": str(start_date)
        })
        _, predictions = self.list_cycles(user_id)
        return cycle, predictions

    def update_cycle(
        self,
        user_id: str,
        cycle_id: str,
        start_date: Optional[date] = None,
        end_date=UNSET,
        flow: Optional[Flow] = None,
        symptoms: Optional[List[str]] = None
    ) -> Tuple[CycleRecord, Optional[Predictions]]:
        """
        Change the supplied fields of an existing cycle.

        Args:
            user_id: User identifier
            cycle_id: Identifier of the cycle to change
            start_date: New start date
            end_date: New end date; pass None to clear it, leave unset to keep it
            flow: New flow intensity
            symptoms: New symptom tags

        Returns:
            Tuple of (updated cycle, predictions for the updated history)

        Raises:
            CycleNotFoundError: If the user has no cycle with this id
            pydantic.ValidationError: If the change puts end_date before start_date
        """
        cycles = self.store.load_cycles(user_id)
        current = next((cycle for cycle in cycles if cycle.id == cycle_id), None)
        if current is None:
            raise CycleNotFoundError(f"Cycle {cycle_id} not found")

        changes = {}
        if start_date:
            changes["start_date"] = start_date
        if end_date is not UNSET:
            changes["end_date"] = end_date
        if flow:
            changes["flow"] = flow
        if symptoms:
            changes["symptoms"] = symptoms

        # Re-validate so the end date invariant is checked on the merged record
        updated = CycleRecord.model_validate({**current.model_dump(), **changes})
        self.store.save_cycle(user_id, updated)
        logger.info("Cycle updated", extra={
            "user_id": user_id,
            "cycle_id": cycle_id,
            "fields": sorted(changes)
        })
        _, predictions = self.list_cycles(user_id)
        return updated, predictions

    def remove_cycle(self, user_id: str, cycle_id: str) -> Optional[Predictions]:
        """
        Delete a cycle.

        Returns:
            Predictions for the remaining history

        Raises:
            CycleNotFoundError: If the user has no cycle with this id
        """
        if not self.store.delete_cycle(user_id, cycle_id):
            raise CycleNotFoundError(f"Cycle {cycle_id} not found")
        logger.info("Cycle removed", extra={"user_id": user_id, "cycle_id": cycle_id})
        _, predictions = self.list_cycles(user_id)
        return predictions

    def list_activities(self, user_id: str) -> List[ActivityRecord]:
        """Get a user's activities, newest first."""
        return self.store.load_activities(user_id)

    def add_activity(
        self,
        user_id: str,
        activity_date: date,
        protection: bool = False
    ) -> ActivityRecord:
        """
        Log an activity and classify its pregnancy risk.

        The risk is computed from the predictions at this moment and stored
        with the activity; later cycle changes do not update it.

        Args:
            user_id: User identifier
            activity_date: Date of the activity
            protection: Whether protection was used

        Returns:
            The created activity
        """
        _, predictions = self.list_cycles(user_id)
        activity = ActivityRecord(
            id=generate_id(),
            date=activity_date,
            protection=protection,
            pregnancy_risk=calculate_pregnancy_risk(activity_date, predictions)
        )
        self.store.save_activity(user_id, activity)
        logger.info("Activity added", extra={
            "user_id": user_id,
            "activity_id": activity.id,
            "pregnancy_risk": activity.pregnancy_risk
        })
        return activity

    def remove_activity(self, user_id: str, activity_id: str) -> None:
        """
        Delete an activity.

        Raises:
            ActivityNotFoundError: If the user has no activity with this id
        """
        if not self.store.delete_activity(user_id, activity_id):
            raise ActivityNotFoundError(f"Activity {activity_id} not found")
        logger.info("Activity removed", extra={"user_id": user_id, "activity_id": activity_id})

    def get_statistics(self, user_id: str) -> Statistics:
        """Calculate statistics over a user's full cycle history."""
        return calculate_cycle_statistics(self.store.load_cycles(user_id))

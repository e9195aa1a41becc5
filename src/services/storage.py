"""
Storage backends for per-user cycle, activity and profile records.

Stores hand out copies of their records, so callers can never mutate
stored state by accident. Cycles come back sorted by start date and
activities newest first.

Typical usage:
    store = get_store()
    cycles = store.load_cycles(user_id)
    store.save_cycle(user_id, cycle)
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Any

from aws_lambda_powertools import Logger

from src.models.activity import ActivityRecord
from src.models.cycle import CycleRecord
from src.models.user import Profile
from src.services.utils import sort_cycles
from src.utils.dynamo import (
    DynamoDBClient,
    get_dynamo,
    create_pk,
    create_cycle_sk,
    create_activity_sk,
    PROFILE_SK
)

logger = Logger()

def sort_activities(activities: List[ActivityRecord]) -> List[ActivityRecord]:
    """Sort activities newest first."""
    return sorted(activities, key=lambda activity: activity.date, reverse=True)

class RecordStore(ABC):
    """Interface shared by all record storage backends."""

    @abstractmethod
    def get_profile(self, user_id: str) -> Optional[Profile]:
        """Get a user's profile, None if the user is unknown."""

    @abstractmethod
    def save_profile(self, profile: Profile) -> None:
        """Create or replace a user's profile."""

    @abstractmethod
    def load_cycles(self, user_id: str) -> List[CycleRecord]:
        """Get a user's cycles sorted by start date."""

    @abstractmethod
    def save_cycle(self, user_id: str, cycle: CycleRecord) -> None:
        """Create or replace a cycle."""

    @abstractmethod
    def delete_cycle(self, user_id: str, cycle_id: str) -> bool:
        """Delete a cycle, returning False if it did not exist."""

    @abstractmethod
    def load_activities(self, user_id: str) -> List[ActivityRecord]:
        """Get a user's activities, newest first."""

    @abstractmethod
    def save_activity(self, user_id: str, activity: ActivityRecord) -> None:
        """Create or replace an activity."""

    @abstractmethod
    def delete_activity(self, user_id: str, activity_id: str) -> bool:
        """Delete an activity, returning False if it did not exist."""

class InMemoryRecordStore(RecordStore):
    """Process-local store keeping every user's records in dictionaries."""

    def __init__(self):
        self._profiles: Dict[str, Profile] = {}
        self._cycles: Dict[str, Dict[str, CycleRecord]] = {}
        self._activities: Dict[str, Dict[str, ActivityRecord]] = {}

    def get_profile(self, user_id: str) -> Optional[Profile]:
        profile = self._profiles.get(user_id)
        return profile.model_copy(deep=True) if profile else None

    def save_profile(self, profile: Profile) -> None:
        self._profiles[profile.id] = profile.model_copy(deep=True)

    def load_cycles(self, user_id: str) -> List[CycleRecord]:
        cycles = self._cycles.get(user_id, {}).values()
        return sort_cycles(cycle.model_copy(deep=True) for cycle in cycles)

    def save_cycle(self, user_id: str, cycle: CycleRecord) -> None:
        self._cycles.setdefault(user_id, {})[cycle.id] = cycle.model_copy(deep=True)

    def delete_cycle(self, user_id: str, cycle_id: str) -> bool:
        return self._cycles.get(user_id, {}).pop(cycle_id, None) is not None

    def load_activities(self, user_id: str) -> List[ActivityRecord]:
        activities = self._activities.get(user_id, {}).values()
        return sort_activities([activity.model_copy(deep=True) for activity in activities])

    def save_activity(self, user_id: str, activity: ActivityRecord) -> None:
        self._activities.setdefault(user_id, {})[activity.id] = activity.model_copy(deep=True)

    def delete_activity(self, user_id: str, activity_id: str) -> bool:
        return self._activities.get(user_id, {}).pop(activity_id, None) is not None

class DynamoRecordStore(RecordStore):
    """
    Store backed by a single DynamoDB table.

    Every record of a user shares the partition key USER#<id>; the sort key
    tells profiles, cycles and activities apart.
    """

    def __init__(self, dynamo: Optional[DynamoDBClient] = None):
        """
        Initialize DynamoDB record store.

        Args:
            dynamo: Optional DynamoDB client. Uses the shared client if not provided.
        """
        self.dynamo = dynamo or get_dynamo()

    @staticmethod
    def _strip_keys(item: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in item.items() if k not in ("PK", "SK")}

    def _put(self, user_id: str, sort_key: str, data: Dict[str, Any]) -> None:
        self.dynamo.put_item({"PK": create_pk(user_id), "SK": sort_key, **data})

    def _delete(self, user_id: str, sort_key: str) -> bool:
        key = {"PK": create_pk(user_id), "SK": sort_key}
        if not self.dynamo.get_item(key):
            return False
        self.dynamo.delete_item(key)
        return True

    def _query(self, user_id: str, prefix: str) -> List[Dict[str, Any]]:
        items = self.dynamo.query_items(
            partition_key="PK",
            partition_value=create_pk(user_id),
            sort_key_prefix=prefix
        )
        return [self._strip_keys(item) for item in items]

    def get_profile(self, user_id: str) -> Optional[Profile]:
        item = self.dynamo.get_item({"PK": create_pk(user_id), "SK": PROFILE_SK})
        return Profile.model_validate(self._strip_keys(item)) if item else None

    def save_profile(self, profile: Profile) -> None:
        self._put(profile.id, PROFILE_SK, profile.model_dump(mode="json", by_alias=True))

    def load_cycles(self, user_id: str) -> List[CycleRecord]:
        items = self._query(user_id, create_cycle_sk(""))
        logger.debug("Loaded cycles", extra={"user_id": user_id, "count": len(items)})
        return sort_cycles(CycleRecord.model_validate(item) for item in items)

    def save_cycle(self, user_id: str, cycle: CycleRecord) -> None:
        self._put(user_id, create_cycle_sk(cycle.id), cycle.model_dump(mode="json", by_alias=True))

    def delete_cycle(self, user_id: str, cycle_id: str) -> bool:
        return self._delete(user_id, create_cycle_sk(cycle_id))

    def load_activities(self, user_id: str) -> List[ActivityRecord]:
        items = self._query(user_id, create_activity_sk(""))
        logger.debug("Loaded activities", extra={"user_id": user_id, "count": len(items)})
        return sort_activities([ActivityRecord.model_validate(item) for item in items])

    def save_activity(self, user_id: str, activity: ActivityRecord) -> None:
        self._put(user_id, create_activity_sk(activity.id), activity.model_dump(mode="json", by_alias=True))

    def delete_activity(self, user_id: str, activity_id: str) -> bool:
        return self._delete(user_id, create_activity_sk(activity_id))

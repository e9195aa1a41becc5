"""
Tests for record storage backends.
"""
from datetime import date
from decimal import Decimal
from unittest.mock import Mock, patch

import pytest

from src.models.activity import ActivityRecord, RiskLevel
from src.models.cycle import CycleRecord
from src.models.user import Profile
from src.services.storage import DynamoRecordStore, InMemoryRecordStore

def test_in_memory_cycles_sorted_by_start_date():
    """Test cycles are returned in chronological order."""
    store = InMemoryRecordStore()
    store.save_cycle("u1", CycleRecord(id="b", start_date=date(2024, 2, 1)))
    store.save_cycle("u1", CycleRecord(id="a", start_date=date(2024, 1, 1)))

    assert [cycle.id for cycle in store.load_cycles("u1")] == ["a", "b"]
    assert store.load_cycles("u2") == []

def test_in_memory_returns_copies():
    """Test mutating a loaded record does not change the store."""
    store = InMemoryRecordStore()
    store.save_cycle("u1", CycleRecord(id="a", start_date=date(2024, 1, 1), symptoms=["cramps"]))

    loaded = store.load_cycles("u1")[0]
    loaded.symptoms.append("headache")

    assert store.load_cycles("u1")[0].symptoms == ["cramps"]

def test_in_memory_activities_newest_first():
    """Test activities are returned newest first."""
    store = InMemoryRecordStore()
    store.save_activity("u1", ActivityRecord(id="old", date=date(2024, 1, 1)))
    store.save_activity("u1", ActivityRecord(id="new", date=date(2024, 3, 1)))

    assert [activity.id for activity in store.load_activities("u1")] == ["new", "old"]

def test_in_memory_delete():
    """Test deleting reports whether the record existed."""
    store = InMemoryRecordStore()
    store.save_cycle("u1", CycleRecord(id="a", start_date=date(2024, 1, 1)))
    store.save_activity("u1", ActivityRecord(id="x", date=date(2024, 1, 1)))

    assert store.delete_cycle("u1", "a") is True
    assert store.delete_cycle("u1", "a") is False
    assert store.delete_activity("u1", "x") is True
    assert store.delete_activity("u2", "x") is False

def test_in_memory_profile():
    """Test profiles are kept per user."""
    store = InMemoryRecordStore()
    assert store.get_profile("u1") is None

    store.save_profile(Profile(id="u1", name="Ana", cycle_length=30))

    assert store.get_profile("u1").cycle_length == 30

@pytest.fixture
def dynamo_store():
    """Create DynamoRecordStore with a mocked DynamoDB client."""
    mock_dynamo = Mock()
    return DynamoRecordStore(mock_dynamo), mock_dynamo

def test_dynamo_save_cycle_item_layout(dynamo_store):
    """Test cycles are stored under the user's partition."""
    store, mock_dynamo = dynamo_store

    store.save_cycle("u1", CycleRecord(
        id="c1",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 5),
        custom_cycle_length=28
    ))

    mock_dynamo.put_item.assert_called_once_with({
        "PK": "USER#u1",
        "SK": "CYCLE#c1",
        "id": "c1",
        "startDate": "2024-01-01",
        "endDate": "2024-01-05",
        "flow": "medium",
        "symptoms": [],
        "customCycleLength": 28
    })

def test_dynamo_load_cycles(dynamo_store):
    """Test cycle items are parsed, including DynamoDB numbers."""
    store, mock_dynamo = dynamo_store
    mock_dynamo.query_items.return_value = [
        {"PK": "USER#u1", "SK": "CYCLE#b", "id": "b", "startDate": "2024-02-01",
         "endDate": None, "flow": "heavy", "symptoms": [], "customCycleLength": Decimal("30")},
        {"PK": "USER#u1", "SK": "CYCLE#a", "id": "a", "startDate": "2024-01-01",
         "endDate": "2024-01-04", "flow": "light", "symptoms": ["cramps"], "customCycleLength": None},
    ]

    cycles = store.load_cycles("u1")

    mock_dynamo.query_items.assert_called_once_with(
        partition_key="PK",
        partition_value="USER#u1",
        sort_key_prefix="CYCLE#"
    )
    assert [cycle.id for cycle in cycles] == ["a", "b"]
    assert cycles[0].end_date == date(2024, 1, 4)
    assert cycles[1].custom_cycle_length == 30

def test_dynamo_load_activities(dynamo_store):
    """Test activity items are parsed and sorted newest first."""
    store, mock_dynamo = dynamo_store
    mock_dynamo.query_items.return_value = [
        {"PK": "USER#u1", "SK": "ACTIVITY#x", "id": "x", "date": "2024-01-01",
         "protection": False, "pregnancyRisk": "low"},
        {"PK": "USER#u1", "SK": "ACTIVITY#y", "id": "y", "date": "2024-01-20",
         "protection": True, "pregnancyRisk": "high"},
    ]

    activities = store.load_activities("u1")

    assert [activity.id for activity in activities] == ["y", "x"]
    assert activities[0].pregnancy_risk == RiskLevel.HIGH

def test_dynamo_delete_missing_record(dynamo_store):
    """Test deleting an unknown record does not call delete_item."""
    store, mock_dynamo = dynamo_store
    mock_dynamo.get_item.return_value = None

    assert store.delete_cycle("u1", "missing") is False
    mock_dynamo.delete_item.assert_not_called()

def test_dynamo_delete_existing_record(dynamo_store):
    """Test deleting an existing activity."""
    store, mock_dynamo = dynamo_store
    mock_dynamo.get_item.return_value = {"PK": "USER#u1", "SK": "ACTIVITY#x"}

    assert store.delete_activity("u1", "x") is True
    mock_dynamo.delete_item.assert_called_once_with({"PK": "USER#u1", "SK": "ACTIVITY#x"})

def test_dynamo_profile_round_trip(dynamo_store):
    """Test profiles are stored under the PROFILE sort key."""
    store, mock_dynamo = dynamo_store
    mock_dynamo.get_item.return_value = {
        "PK": "USER#u1", "SK": "PROFILE", "id": "u1", "name": "Ana", "cycleLength": Decimal("31")
    }

    profile = store.get_profile("u1")

    mock_dynamo.get_item.assert_called_once_with({"PK": "USER#u1", "SK": "PROFILE"})
    assert profile.cycle_length == 31

def test_dynamo_store_uses_shared_client():
    """Test the shared client is used when none is given."""
    with patch('src.services.storage.get_dynamo') as mock_get_dynamo:
        mock_dynamo = Mock()
        mock_get_dynamo.return_value = mock_dynamo

        assert DynamoRecordStore().dynamo is mock_dynamo

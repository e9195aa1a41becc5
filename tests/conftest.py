"""
Pytest configuration and shared fixtures.
"""
import json
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

import pytest

from src.models.cycle import CycleRecord
from src.services.records import RecordService
from src.services.storage import InMemoryRecordStore
from src.utils import clients

@dataclass
class LambdaContext:
    """Minimal stand-in for the Lambda context object."""
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:eu-west-1:123456789012:function:test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    tenant_id: Optional[str] = None

@pytest.fixture
def lambda_context() -> LambdaContext:
    """Create a Lambda context for handler tests."""
    return LambdaContext()

@pytest.fixture(autouse=True)
def record_store(monkeypatch) -> InMemoryRecordStore:
    """Give every test a fresh in-memory store behind the shared clients."""
    monkeypatch.delenv("TRACKER_TABLE_NAME", raising=False)
    clients.reset_clients()
    store = InMemoryRecordStore()
    monkeypatch.setattr(clients, "_store", store)
    yield store
    clients.reset_clients()

@pytest.fixture
def records(record_store) -> RecordService:
    """Create a record service over the test store."""
    return RecordService(record_store)

@pytest.fixture
def regular_cycles() -> List[CycleRecord]:
    """Create five open cycles starting 28 days apart."""
    return [
        CycleRecord(
            id=f"c{i}",
            start_date=date(2024, 1, 1) + timedelta(days=i * 28)
        )
        for i in range(5)
    ]

@pytest.fixture
def irregular_cycles() -> List[CycleRecord]:
    """Create closed cycles with irregular gaps between starts."""
    return [
        CycleRecord(id="c1", start_date=date(2024, 1, 1), end_date=date(2024, 1, 5)),
        CycleRecord(id="c2", start_date=date(2024, 1, 25), end_date=date(2024, 1, 28)),  # 24 days
        CycleRecord(id="c3", start_date=date(2024, 2, 25), end_date=date(2024, 3, 1)),  # 31 days
        CycleRecord(id="c4", start_date=date(2024, 3, 22), end_date=date(2024, 3, 27)),  # 26 days
    ]

def make_event(
    method: str,
    body: Optional[Dict[str, Any]] = None,
    path_id: Optional[str] = None,
    user_id: Optional[str] = "user-1"
) -> Dict[str, Any]:
    """Build an API Gateway proxy event."""
    return {
        "httpMethod": method,
        "path": "/test" + (f"/{path_id}" if path_id else ""),
        "pathParameters": {"id": path_id} if path_id else None,
        "requestContext": {"authorizer": {"user_id": user_id} if user_id else {}},
        "body": json.dumps(body) if body is not None else None
    }

@pytest.fixture
def api_event():
    """Factory fixture building API Gateway proxy events."""
    return make_event

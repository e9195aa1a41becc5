"""
Centralized client initialization module.

This module provides lazy-loaded shared clients for the application.
"""
import os
from aws_lambda_powertools import Logger
from src.services.records import RecordService
from src.services.storage import DynamoRecordStore, InMemoryRecordStore, RecordStore

logger = Logger()

# Initialize shared clients (lazy loading)
_store = None
_records = None

def get_store() -> RecordStore:
    """
    Get or create the record store.

    Uses DynamoDB when TRACKER_TABLE_NAME is set, otherwise keeps records
    in process memory.
    """
    global _store
    if _store is None:
        if os.environ.get('TRACKER_TABLE_NAME'):
            _store = DynamoRecordStore()
        else:
            logger.info("TRACKER_TABLE_NAME not set, using in-memory record store")
            _store = InMemoryRecordStore()
    return _store

def get_records() -> RecordService:
    """Get or create the record service."""
    global _records
    if _records is None:
        _records = RecordService(get_store())
    return _records

def reset_clients() -> None:
    """Drop cached clients so the next call re-reads the environment."""
    global _store, _records
    _store = None
    _records = None

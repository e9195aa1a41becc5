"""
Service-level exceptions.

This module contains exceptions that can be raised by the record
management services. The prediction, risk and statistics services
raise nothing for well-formed input.
"""

class RecordNotFoundError(Exception):
    """Base exception for records missing from a user's history."""
    pass

class CycleNotFoundError(RecordNotFoundError):
    """Raised when a cycle id does not belong to the user."""
    pass

class ActivityNotFoundError(RecordNotFoundError):
    """Raised when an activity id does not belong to the user."""
    pass

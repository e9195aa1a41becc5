"""
Lambda handlers package for AWS Lambda functions.
"""
from .cycles import handler as cycles_handler
from .activities import handler as activities_handler
from .statistics import handler as statistics_handler
from .profile import handler as profile_handler
from .health import handler as health_handler

__all__ = [
    "cycles_handler",
    "activities_handler",
    "statistics_handler",
    "profile_handler",
    "health_handler"
]

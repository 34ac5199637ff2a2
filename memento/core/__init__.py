# memento/core/__init__.py

from .config import get_settings, Settings
from .exceptions import (
    MementoError,
    ValidationError,
    NotFoundError,
    RemoteServiceError,
    DatabaseError,
    ProcessLaunchError,
    QueryExecutionError,
    ResultParseError,
    InvariantViolation,
)

__all__ = [
    "get_settings",
    "Settings",
    "MementoError",
    "ValidationError",
    "NotFoundError",
    "RemoteServiceError",
    "DatabaseError",
    "ProcessLaunchError",
    "QueryExecutionError",
    "ResultParseError",
    "InvariantViolation",
]

# exceptions.py
"""
Custom exceptions for the doubles scheduler.

This module defines domain-specific exceptions for better error handling
and debugging throughout the library.
"""


class SchedulerError(Exception):
    """Base exception for all scheduler errors."""

    pass


class ValidationError(SchedulerError):
    """Raised when input validation fails."""

    pass


class StateError(SchedulerError):
    """Raised when a result operation does not fit the current schedule state."""

    pass

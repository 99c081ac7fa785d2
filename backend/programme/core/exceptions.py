"""
Custom exceptions for the application.
"""

from typing import Any, Optional


class ProgrammeError(Exception):
    """Base exception for the programme engine."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(ProgrammeError):
    """Resource not found."""

    pass


class ValidationError(ProgrammeError):
    """Validation error."""

    pass


class InvalidSnapshotError(ValidationError):
    """A milestone collection or milestone argument is malformed.

    Raised at the API boundary for programmer errors (``None`` instead of a
    collection, items that are not milestones). Data-quality problems inside a
    well-formed snapshot are reported in results instead.
    """

    pass

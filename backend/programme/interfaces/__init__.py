"""Abstract interfaces for infrastructure abstraction."""

from programme.interfaces.milestone_repository import IMilestoneRepository

__all__ = [
    "IMilestoneRepository",
]

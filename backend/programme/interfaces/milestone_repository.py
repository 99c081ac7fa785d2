"""
Milestone repository interface.

Defines the contract the programme engine needs from the milestone store.
The store itself (create/update/delete) lives outside this service.
"""

from abc import ABC, abstractmethod

from programme.models.milestone import Milestone


class IMilestoneRepository(ABC):
    """Interface for milestone store read operations."""

    @abstractmethod
    async def list_by_project(self, project_id: str) -> list[Milestone]:
        """List all milestones of a project as one snapshot."""
        pass

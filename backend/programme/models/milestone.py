"""
Milestone model definitions.

A milestone is a schedulable unit of construction work. The engine only reads
milestones; every derived value is returned in separate result models.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from programme.models.enums import MilestoneStatus, Priority


class Milestone(BaseModel):
    """Programme milestone snapshot."""

    id: str = Field(..., min_length=1, description="Opaque milestone ID")
    name: str = Field(..., min_length=1, max_length=200, description="Milestone name")
    project_id: Optional[str] = Field(None, description="Owning project ID")
    description: Optional[str] = Field(None, max_length=2000)
    notes: Optional[str] = None

    planned_start: Optional[date] = Field(None, description="Planned start date")
    planned_end: Optional[date] = Field(None, description="Planned end date")
    planned_date: Optional[date] = Field(
        None, description="Single planned date, used when no planned end is set"
    )
    actual_start: Optional[date] = None
    actual_end: Optional[date] = None

    status: MilestoneStatus = Field(MilestoneStatus.UPCOMING)
    priority: Priority = Field(Priority.MEDIUM)
    category: Optional[str] = None
    trade: Optional[str] = Field(None, description="Trade used for resource grouping")
    assigned_to: Optional[str] = None
    completion_percentage: int = Field(default=0, ge=0, le=100)

    critical_path: bool = False
    delay_risk_flag: bool = False
    dependencies: list[str] = Field(
        default_factory=list, description="IDs of milestones that must finish first"
    )

    class Config:
        from_attributes = True

    @property
    def effective_start(self) -> Optional[date]:
        """Planned start, falling back to the single planned date."""
        if self.planned_start is not None:
            return self.planned_start
        if self.planned_end is None:
            return self.planned_date
        return None

    @property
    def effective_end(self) -> Optional[date]:
        """Planned end, falling back to the single planned date."""
        if self.planned_end is not None:
            return self.planned_end
        return self.planned_date

    @property
    def due_date(self) -> Optional[date]:
        return self.effective_end

    @property
    def has_full_range(self) -> bool:
        return self.planned_start is not None and self.planned_end is not None

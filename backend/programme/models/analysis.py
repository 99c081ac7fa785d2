"""
Analysis result models.

These are the outputs of the programme engine: conflicts, the critical path,
and the combined programme report.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from programme.models.enums import ConflictSeverity, ConflictType


class ResourceConflict(BaseModel):
    """Two milestones of the same trade booked over the same days."""

    trade: str
    milestone_ids: tuple[str, str] = Field(..., description="The conflicting pair")
    milestone_names: tuple[str, str]
    overlap_days: int = Field(..., gt=0)


class ScheduleConflict(BaseModel):
    """A scheduling issue affecting one or more milestones."""

    type: ConflictType
    severity: ConflictSeverity
    milestone_ids: list[str]
    description: str
    suggestion: Optional[str] = None


class CriticalPathResult(BaseModel):
    """Longest dependency chain and the risks found along it."""

    path: list[str] = Field(default_factory=list, description="Milestone IDs in execution order")
    duration: int = Field(default=0, description="Duration in days")
    risk_factors: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class ProgrammeReport(BaseModel):
    """Combined analysis of one milestone snapshot."""

    milestone_count: int = 0
    overall_health_percent: int = Field(default=0, ge=0, le=100)
    health_scores: dict[str, int] = Field(default_factory=dict)
    conflicts: list[ResourceConflict] = Field(default_factory=list)
    schedule_conflicts: list[ScheduleConflict] = Field(default_factory=list)
    critical_path: CriticalPathResult = Field(default_factory=CriticalPathResult)
    per_milestone_issues: dict[str, list[str]] = Field(default_factory=dict)
    dependency_suggestions: dict[str, list[str]] = Field(default_factory=dict)

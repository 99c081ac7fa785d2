"""Pydantic models (schemas) for the application."""

from programme.models.analysis import (
    CriticalPathResult,
    ProgrammeReport,
    ResourceConflict,
    ScheduleConflict,
)
from programme.models.enums import (
    ConflictSeverity,
    ConflictType,
    HealthBand,
    MilestoneStatus,
    Priority,
    ProjectType,
)
from programme.models.milestone import Milestone
from programme.models.template import MilestoneTemplate, TemplateCatalog

__all__ = [
    # Enums
    "MilestoneStatus",
    "Priority",
    "ProjectType",
    "ConflictType",
    "ConflictSeverity",
    "HealthBand",
    # Milestone
    "Milestone",
    # Templates
    "MilestoneTemplate",
    "TemplateCatalog",
    # Results
    "ResourceConflict",
    "ScheduleConflict",
    "CriticalPathResult",
    "ProgrammeReport",
]

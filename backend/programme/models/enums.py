"""
Enum definitions for the application.

These enums are used across models and provide type-safe status/priority values.
"""

from enum import Enum


class MilestoneStatus(str, Enum):
    """Milestone status."""

    UPCOMING = "upcoming"
    IN_PROGRESS = "in-progress"
    COMPLETE = "complete"
    DELAYED = "delayed"


class Priority(str, Enum):
    """Milestone priority."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ProjectType(str, Enum):
    """Project type used to select milestone templates."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"


class ConflictType(str, Enum):
    """Kind of scheduling conflict."""

    OVERLAP = "overlap"  # same trade booked twice
    IMPOSSIBLE_TIMELINE = "impossible_timeline"  # starts before a prerequisite ends
    DEPENDENCY_LOOP = "dependency_loop"


class ConflictSeverity(str, Enum):
    """Severity of a scheduling conflict."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class HealthBand(str, Enum):
    """Coarse grouping of health scores for display."""

    HEALTHY = "healthy"
    AT_RISK = "at_risk"
    CRITICAL = "critical"

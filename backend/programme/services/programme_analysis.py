"""
Public programme analysis API.

Module-level entry points over the analysis services, configured from
application settings. Every function is a pure computation over the
snapshot it is given.
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Optional, Sequence

from programme.core.config import get_settings
from programme.models.analysis import CriticalPathResult, ProgrammeReport, ResourceConflict
from programme.models.milestone import Milestone
from programme.models.template import TemplateCatalog
from programme.services.programme_report_service import ProgrammeReportService
from programme.utils.date_utils import format_date


def create_report_service(template_catalog: Optional[TemplateCatalog] = None) -> ProgrammeReportService:
    """Create a report service configured from settings."""
    settings = get_settings()
    return ProgrammeReportService(
        default_trade=settings.DEFAULT_TRADE_BUCKET,
        start_buffer_days=settings.START_BUFFER_DAYS,
        low_progress_threshold=settings.LOW_PROGRESS_THRESHOLD,
        template_catalog=template_catalog,
    )


@lru_cache()
def get_report_service() -> ProgrammeReportService:
    """Get cached report service instance (no template catalog)."""
    return create_report_service()


def validate_milestone_schedule(milestone: Milestone, all_milestones: Sequence[Milestone]) -> list[str]:
    """Return schedule issues for one milestone."""
    return get_report_service().validator.validate(milestone, all_milestones)


def calculate_optimal_start_date(
    milestone: Milestone,
    all_milestones: Sequence[Milestone],
    today: Optional[date] = None,
) -> str:
    """Return the earliest dependency-respecting start date as ``YYYY-MM-DD``."""
    suggested = get_report_service().validator.suggest_optimal_start(milestone, all_milestones, today)
    return format_date(suggested)


def identify_resource_conflicts(all_milestones: Sequence[Milestone]) -> list[ResourceConflict]:
    """Return trade double-bookings."""
    return get_report_service().conflict_detector.detect_resource_conflicts(all_milestones)


def calculate_critical_path(all_milestones: Sequence[Milestone]) -> CriticalPathResult:
    """Return the critical path of the programme."""
    return get_report_service().critical_path_service.analyze(all_milestones)


def get_milestone_health_score(milestone: Milestone, today: Optional[date] = None) -> int:
    """Return a milestone's 0-100 health score."""
    return get_report_service().health_scorer.score(milestone, today)


def build_report(
    all_milestones: Sequence[Milestone],
    template_catalog: Optional[TemplateCatalog] = None,
    today: Optional[date] = None,
) -> ProgrammeReport:
    """Build the combined programme report."""
    service = get_report_service() if template_catalog is None else create_report_service(template_catalog)
    return service.build_report(all_milestones, today)

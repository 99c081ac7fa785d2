"""
Programme report service.

Combines validation, conflict detection, critical path analysis and health
scoring into a single report for one milestone snapshot.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Optional, Sequence

from programme.core.logger import logger
from programme.models.analysis import ProgrammeReport
from programme.models.milestone import Milestone
from programme.models.template import TemplateCatalog
from programme.services.conflict_detector import ConflictDetector
from programme.services.critical_path_service import CriticalPathService
from programme.services.health_scorer import HealthScorer
from programme.services.template_service import TemplateService
from programme.utils.dependency_validator import DependencyValidator
from programme.utils.snapshot import ensure_snapshot, index_by_id


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ProgrammeReportService:
    """Service for building programme reports."""

    def __init__(
        self,
        default_trade: str = "General",
        start_buffer_days: int = 1,
        low_progress_threshold: int = 50,
        template_catalog: Optional[TemplateCatalog] = None,
    ):
        """
        Initialize report service.

        Args:
            default_trade: Trade bucket for milestones without a trade
            start_buffer_days: Buffer used when suggesting start dates
            low_progress_threshold: Completion percentage below which
                in-progress work counts as at risk
            template_catalog: Optional read-only catalog used for dependency
                suggestions
        """
        self.validator = DependencyValidator(start_buffer_days=start_buffer_days)
        self.conflict_detector = ConflictDetector(default_trade=default_trade)
        self.critical_path_service = CriticalPathService(low_progress_threshold=low_progress_threshold)
        self.health_scorer = HealthScorer(low_progress_threshold=low_progress_threshold)
        self.template_service = (
            TemplateService(template_catalog, start_buffer_days=start_buffer_days)
            if template_catalog is not None
            else None
        )

    def _suggest_dependencies(self, snapshot: Sequence[Milestone]) -> dict[str, list[str]]:
        if self.template_service is None:
            return {}

        suggestions: dict[str, list[str]] = {}
        for milestone in snapshot:
            if milestone.dependencies:
                continue
            template = self.template_service.match_template(milestone)
            # Templates without prerequisites mark a programme start
            if template is not None and not template.dependencies:
                continue
            suggested = self.template_service.suggest_dependencies(milestone, snapshot)
            if suggested:
                suggestions[milestone.id] = suggested
        return suggestions

    def build_report(
        self,
        milestones: Sequence[Milestone],
        today: Optional[date] = None,
    ) -> ProgrammeReport:
        """
        Build a programme report.

        Args:
            milestones: Milestone snapshot
            today: Reference date for overdue checks (defaults to today, UTC)

        Returns:
            ProgrammeReport combining all analyses
        """
        lookup = index_by_id(ensure_snapshot(milestones))
        snapshot = tuple(lookup.values())

        health_scores = {m.id: self.health_scorer.score(m, today) for m in snapshot}
        overall = round_half_up(sum(health_scores.values()) / len(snapshot)) if snapshot else 0

        per_milestone_issues: dict[str, list[str]] = {}
        for milestone in snapshot:
            issues = self.validator.validate_indexed(milestone, lookup)
            if issues:
                per_milestone_issues[milestone.id] = issues

        report = ProgrammeReport(
            milestone_count=len(snapshot),
            overall_health_percent=overall,
            health_scores=health_scores,
            conflicts=self.conflict_detector.detect_resource_conflicts(snapshot),
            schedule_conflicts=self.conflict_detector.detect_schedule_conflicts(snapshot),
            critical_path=self.critical_path_service.analyze(snapshot),
            per_milestone_issues=per_milestone_issues,
            dependency_suggestions=self._suggest_dependencies(snapshot),
        )

        logger.info(
            f"Programme report: {report.milestone_count} milestones, "
            f"health {report.overall_health_percent}%, {len(report.conflicts)} resource conflict(s), "
            f"critical path {report.critical_path.duration} days"
        )
        return report

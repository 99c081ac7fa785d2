"""
Project-level programme analysis.

Fetches a project's milestones from the milestone store and analyses that
snapshot. The store fetch is the only await; analysis is synchronous.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from programme.interfaces.milestone_repository import IMilestoneRepository
from programme.models.analysis import ProgrammeReport
from programme.services.programme_report_service import ProgrammeReportService


class ProgrammeAnalysisService:
    """Service for analysing a stored project programme."""

    def __init__(self, milestone_repo: IMilestoneRepository, report_service: ProgrammeReportService):
        self.milestone_repo = milestone_repo
        self.report_service = report_service

    async def analyze_project(self, project_id: str, today: Optional[date] = None) -> ProgrammeReport:
        """Build a report over the project's current milestones."""
        milestones = await self.milestone_repo.list_by_project(project_id)
        return self.report_service.build_report(milestones, today)

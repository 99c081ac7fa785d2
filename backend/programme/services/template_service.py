"""
Template-based programme generation.

Seeds milestones from an injected template catalog and suggests likely
dependencies for milestones that have none.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence
from uuid import uuid4

from programme.core.exceptions import NotFoundError, ValidationError
from programme.core.logger import logger
from programme.models.enums import MilestoneStatus, ProjectType
from programme.models.milestone import Milestone
from programme.models.template import MilestoneTemplate, TemplateCatalog
from programme.utils.date_utils import add_days, today_utc
from programme.utils.snapshot import ensure_milestone, ensure_snapshot

# Trade -> keywords of trades/milestones that usually precede it
TRADE_DEPENDENCY_KEYWORDS: dict[str, list[str]] = {
    "electrical": ["frame", "wall framing"],
    "plumbing": ["frame", "wall framing"],
    "drywall": ["electrical", "plumbing", "insulation"],
    "painting": ["drywall"],
    "flooring": ["painting", "drywall"],
    "carpentry": ["frame"],
}


def _names_match(a: str, b: str) -> bool:
    a, b = a.lower().strip(), b.lower().strip()
    if not a or not b:
        return False
    return a in b or b in a


class TemplateService:
    """Service for template-based milestone generation."""

    def __init__(self, catalog: TemplateCatalog, start_buffer_days: int = 1):
        """
        Initialize template service.

        Args:
            catalog: Read-only template catalog
            start_buffer_days: Days between a prerequisite's end and the next start
        """
        self.catalog = catalog
        self.start_buffer_days = start_buffer_days

    def _build_milestone(
        self,
        template: MilestoneTemplate,
        project_id: str,
        start: date,
        dependencies: Optional[list[str]] = None,
    ) -> Milestone:
        return Milestone(
            id=str(uuid4()),
            project_id=project_id,
            name=template.name,
            description=template.description,
            trade=template.trade,
            category=template.category,
            priority=template.default_priority,
            critical_path=template.is_critical_path,
            planned_start=start,
            planned_end=add_days(start, template.estimated_duration),
            planned_date=start,
            status=MilestoneStatus.UPCOMING,
            completion_percentage=0,
            delay_risk_flag=False,
            dependencies=dependencies or [],
        )

    def create_from_template(
        self,
        template_id: str,
        project_id: str,
        start_date: Optional[date] = None,
    ) -> Milestone:
        """
        Create a single milestone from a template.

        Raises:
            NotFoundError: If the template does not exist
        """
        template = self.catalog.get(template_id)
        if template is None:
            raise NotFoundError(f"Template {template_id} not found")
        return self._build_milestone(template, project_id, start_date or today_utc())

    def create_programme(
        self,
        project_id: str,
        project_type: ProjectType = ProjectType.RESIDENTIAL,
        start_date: Optional[date] = None,
    ) -> list[Milestone]:
        """
        Create a full programme for a project type.

        Milestones are created in dependency order. Each one starts the
        buffer day after its latest prerequisite ends; templates without
        prerequisites start on the project start date.

        Raises:
            ValidationError: If the catalog contains a dependency cycle
        """
        start = start_date or today_utc()
        selected = {t.id: t for t in self.catalog.for_project_type(project_type)}
        created: dict[str, Milestone] = {}
        in_progress: set[str] = set()
        ordered: list[Milestone] = []

        def create(template: MilestoneTemplate) -> Milestone:
            if template.id in created:
                return created[template.id]
            if template.id in in_progress:
                raise ValidationError(
                    f"Template catalog has a dependency cycle at {template.id}",
                    details={"template_id": template.id},
                )
            in_progress.add(template.id)

            prerequisites = [
                create(selected[dep_id]) for dep_id in template.dependencies if dep_id in selected
            ]
            milestone_start = start
            if prerequisites:
                latest_end = max(p.planned_end for p in prerequisites)
                milestone_start = add_days(latest_end, self.start_buffer_days)

            milestone = self._build_milestone(
                template,
                project_id,
                milestone_start,
                dependencies=[p.id for p in prerequisites],
            )
            in_progress.discard(template.id)
            created[template.id] = milestone
            ordered.append(milestone)
            return milestone

        for template in selected.values():
            create(template)

        logger.info(
            f"Created {len(ordered)} template milestones for project {project_id} ({project_type.value})"
        )
        return ordered

    def match_template(self, milestone: Milestone) -> Optional[MilestoneTemplate]:
        """Find the first template matching a milestone by trade or name."""
        trade = (milestone.trade or "").lower().strip()
        for template in self.catalog:
            if trade and template.trade == trade:
                return template
            if _names_match(template.name, milestone.name):
                return template
        return None

    def suggest_dependencies(
        self,
        milestone: Milestone,
        existing_milestones: Sequence[Milestone],
    ) -> list[str]:
        """
        Suggest dependency IDs for a milestone from the existing programme.

        Uses the matching template's prerequisites first, then common trade
        sequencing patterns.
        """
        ensure_milestone(milestone)
        candidates = [m for m in ensure_snapshot(existing_milestones) if m.id != milestone.id]
        suggestions: list[str] = []

        def add(milestone_id: str) -> None:
            if milestone_id not in suggestions:
                suggestions.append(milestone_id)

        template = self.match_template(milestone)
        if template:
            for dep_template_id in template.dependencies:
                dep_template = self.catalog.get(dep_template_id)
                if dep_template is None:
                    continue
                for candidate in candidates:
                    if (candidate.trade or "").lower() == dep_template.trade or _names_match(
                        candidate.name, dep_template.name
                    ):
                        add(candidate.id)
                        break

        keywords = TRADE_DEPENDENCY_KEYWORDS.get((milestone.trade or "").lower().strip(), [])
        for keyword in keywords:
            for candidate in candidates:
                if keyword in (candidate.trade or "").lower() or keyword in candidate.name.lower():
                    add(candidate.id)
                    break

        return suggestions

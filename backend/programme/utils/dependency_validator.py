"""
Milestone dependency validation utilities.

Checks a milestone's dates against its own bounds and against the milestones
it depends on. Issues are advisory text; nothing here blocks persistence.
"""

from datetime import date
from typing import Mapping, Optional, Sequence

from programme.models.milestone import Milestone
from programme.utils.date_utils import add_days, today_utc
from programme.utils.snapshot import ensure_milestone, ensure_snapshot, index_by_id


class DependencyValidator:
    """Validator for milestone dates and dependencies."""

    def __init__(self, start_buffer_days: int = 1):
        """
        Initialize validator.

        Args:
            start_buffer_days: Days left between the latest prerequisite end
                and a suggested start date
        """
        self.start_buffer_days = start_buffer_days

    def validate(self, milestone: Milestone, all_milestones: Sequence[Milestone]) -> list[str]:
        """
        Validate a milestone's schedule against the rest of the programme.

        Args:
            milestone: Milestone being checked
            all_milestones: Snapshot used to resolve dependencies

        Returns:
            List of human-readable issues (empty when the schedule is consistent)

        Raises:
            InvalidSnapshotError: If the arguments are not milestones
        """
        ensure_milestone(milestone)
        return self.validate_indexed(milestone, index_by_id(ensure_snapshot(all_milestones)))

    def validate_indexed(self, milestone: Milestone, lookup: Mapping[str, Milestone]) -> list[str]:
        """Validate against a snapshot already indexed by ID."""
        issues: list[str] = []

        # 1. Own bounds
        if milestone.planned_start and milestone.planned_end:
            if milestone.planned_start >= milestone.planned_end:
                issues.append("Start date must precede end date.")

        start = milestone.effective_start
        seen: set[str] = set()
        for dep_id in milestone.dependencies:
            if dep_id in seen:
                continue
            seen.add(dep_id)

            # 2. Self-dependency
            if dep_id == milestone.id:
                issues.append(f'"{milestone.name}" cannot depend on itself.')
                continue

            # 3. Dangling reference
            dependency = lookup.get(dep_id)
            if dependency is None:
                issues.append(
                    f'"{milestone.name}" depends on "{dep_id}", which is not in this programme.'
                )
                continue

            # 4. Starts before the prerequisite finishes
            dep_end = dependency.effective_end
            if start is not None and dep_end is not None and dep_end >= start:
                issues.append(
                    f'Starts on {start.isoformat()} but dependency "{dependency.name}" '
                    f"finishes on {dep_end.isoformat()}."
                )

        return issues

    def suggest_optimal_start(
        self,
        milestone: Milestone,
        all_milestones: Sequence[Milestone],
        today: Optional[date] = None,
    ) -> date:
        """
        Suggest the earliest start date that respects all dependencies.

        Without dependencies the milestone's own planned start (or today) is
        returned. Otherwise the latest prerequisite end plus the buffer is
        used; prerequisites without an end date do not constrain the result.
        """
        ensure_milestone(milestone)
        lookup = index_by_id(ensure_snapshot(all_milestones))

        latest_end: Optional[date] = None
        for dep_id in milestone.dependencies:
            dependency = lookup.get(dep_id)
            if dependency is None or dep_id == milestone.id:
                continue
            dep_end = dependency.effective_end
            if dep_end is not None and (latest_end is None or dep_end > latest_end):
                latest_end = dep_end

        if latest_end is not None:
            return add_days(latest_end, self.start_buffer_days)
        return milestone.effective_start or today or today_utc()

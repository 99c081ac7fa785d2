"""
Resource and schedule conflict detection.

This module provides functionality to:
- Find trade double-bookings (pairwise overlap within each trade group)
- Collect scheduling conflicts (overlaps, impossible timelines, dependency loops)
"""

from __future__ import annotations

from typing import Sequence

from programme.core.logger import logger
from programme.models.analysis import ResourceConflict, ScheduleConflict
from programme.models.enums import ConflictSeverity, ConflictType
from programme.models.milestone import Milestone
from programme.utils.date_utils import days_overlap
from programme.utils.dependency_graph import DependencyGraph
from programme.utils.snapshot import ensure_snapshot, index_by_id


class ConflictDetector:
    """Service for detecting resource and scheduling conflicts."""

    def __init__(self, default_trade: str = "General"):
        """
        Initialize conflict detector.

        Args:
            default_trade: Trade bucket for milestones without a trade
        """
        self.default_trade = default_trade

    def _trade_of(self, milestone: Milestone) -> str:
        trade = (milestone.trade or "").strip()
        return trade or self.default_trade

    def _group_by_trade(self, milestones: Sequence[Milestone]) -> dict[str, list[Milestone]]:
        """Group fully scheduled milestones by trade, in order of first appearance."""
        groups: dict[str, list[Milestone]] = {}
        for milestone in index_by_id(milestones).values():
            if not milestone.has_full_range:
                continue
            groups.setdefault(self._trade_of(milestone), []).append(milestone)
        return groups

    def detect_resource_conflicts(self, milestones: Sequence[Milestone]) -> list[ResourceConflict]:
        """
        Find milestones of the same trade whose planned ranges overlap.

        Every unordered pair within a trade group is compared; inputs are
        expected to stay in the tens to low hundreds per project.

        Args:
            milestones: Milestone snapshot

        Returns:
            One ResourceConflict per overlapping pair, grouped by trade
        """
        snapshot = ensure_snapshot(milestones)
        conflicts: list[ResourceConflict] = []

        for trade, group in self._group_by_trade(snapshot).items():
            for i in range(len(group)):
                for j in range(i + 1, len(group)):
                    first, second = group[i], group[j]
                    overlap = days_overlap(
                        first.planned_start,
                        first.planned_end,
                        second.planned_start,
                        second.planned_end,
                    )
                    if overlap > 0:
                        conflicts.append(
                            ResourceConflict(
                                trade=trade,
                                milestone_ids=(first.id, second.id),
                                milestone_names=(first.name, second.name),
                                overlap_days=overlap,
                            )
                        )

        logger.debug(f"Resource conflicts: {len(conflicts)} across {len(snapshot)} milestones")
        return conflicts

    def detect_schedule_conflicts(self, milestones: Sequence[Milestone]) -> list[ScheduleConflict]:
        """
        Collect every scheduling conflict in the snapshot.

        Includes trade overlaps, milestones starting before a prerequisite
        ends, and dependency loops.
        """
        snapshot = ensure_snapshot(milestones)
        graph = DependencyGraph(snapshot)
        conflicts: list[ScheduleConflict] = []

        for resource_conflict in self.detect_resource_conflicts(snapshot):
            first_name, second_name = resource_conflict.milestone_names
            conflicts.append(
                ScheduleConflict(
                    type=ConflictType.OVERLAP,
                    severity=ConflictSeverity.MEDIUM,
                    milestone_ids=list(resource_conflict.milestone_ids),
                    description=(
                        f'{resource_conflict.trade} milestones "{first_name}" and "{second_name}" '
                        f"overlap by {resource_conflict.overlap_days} day(s)"
                    ),
                    suggestion="Adjust dates or assign to different teams",
                )
            )

        for milestone_id in graph.order:
            milestone = graph.milestones[milestone_id]
            start = milestone.effective_start
            if start is None:
                continue
            # Declared links, including the ones dropped to break cycles
            for prereq_id in dict.fromkeys(milestone.dependencies):
                prereq = graph.milestones.get(prereq_id)
                if prereq is None or prereq_id == milestone_id:
                    continue
                prereq_end = prereq.effective_end
                if prereq_end is not None and start < prereq_end:
                    conflicts.append(
                        ScheduleConflict(
                            type=ConflictType.IMPOSSIBLE_TIMELINE,
                            severity=ConflictSeverity.HIGH,
                            milestone_ids=[milestone_id, prereq_id],
                            description=(
                                f'"{milestone.name}" starts before dependency "{prereq.name}" ends'
                            ),
                            suggestion="Adjust start date or remove dependency",
                        )
                    )

        for prereq_id, dependent_id in graph.cycle_edges:
            conflicts.append(
                ScheduleConflict(
                    type=ConflictType.DEPENDENCY_LOOP,
                    severity=ConflictSeverity.CRITICAL,
                    milestone_ids=[dependent_id] if prereq_id == dependent_id else [dependent_id, prereq_id],
                    description=graph.describe_cycle(prereq_id, dependent_id),
                    suggestion="Review and remove circular dependencies",
                )
            )

        return conflicts


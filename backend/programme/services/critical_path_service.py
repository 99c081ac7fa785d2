"""
Critical path analysis for milestone programmes.

This module provides functionality to:
- Find the critical path (longest dependency chain) in the milestone DAG
- Report the programme duration implied by that chain
- Surface risk factors along the path with one suggestion per risk
"""

from __future__ import annotations

from typing import Optional, Sequence

from programme.core.logger import logger
from programme.models.analysis import CriticalPathResult
from programme.models.enums import MilestoneStatus
from programme.models.milestone import Milestone
from programme.utils.date_utils import days_between
from programme.utils.dependency_graph import DependencyGraph
from programme.utils.snapshot import ensure_snapshot


def milestone_duration(milestone: Milestone) -> int:
    """Duration in days, at least 1 (milestones without a range count as one day)."""
    if milestone.has_full_range:
        return max(1, days_between(milestone.planned_start, milestone.planned_end))
    return 1


class CriticalPathService:
    """Service for critical path analysis."""

    def __init__(self, low_progress_threshold: int = 50):
        """
        Initialize critical path service.

        Args:
            low_progress_threshold: In-progress milestones below this completion
                percentage are reported as a risk
        """
        self.low_progress_threshold = low_progress_threshold

    def _find_longest_path(self, graph: DependencyGraph) -> tuple[int, list[str]]:
        """
        Find the longest path in the dependency DAG.

        Uses dynamic programming over the topological order.

        Returns:
            Tuple of (total_duration_days, milestone IDs in execution order)
        """
        if not len(graph):
            return 0, []

        # earliest_finish[v] = longest chain ending at v, including v
        earliest_finish: dict[str, int] = {}
        parent: dict[str, Optional[str]] = {}
        terminus: Optional[str] = None

        for milestone_id in graph.topological_order():
            best_prereq: Optional[str] = None
            best_finish = 0
            for prereq_id in graph.prerequisites[milestone_id]:
                if earliest_finish[prereq_id] > best_finish:
                    best_finish = earliest_finish[prereq_id]
                    best_prereq = prereq_id

            earliest_finish[milestone_id] = best_finish + milestone_duration(graph.milestones[milestone_id])
            parent[milestone_id] = best_prereq

            if terminus is None or earliest_finish[milestone_id] > earliest_finish[terminus]:
                terminus = milestone_id

        # Reconstruct path
        path: list[str] = []
        current = terminus
        while current is not None:
            path.append(current)
            current = parent[current]
        path.reverse()

        return earliest_finish[terminus], path

    def _collect_risks(
        self,
        graph: DependencyGraph,
        path: list[str],
    ) -> tuple[list[str], list[str]]:
        """Build risk factors and their matching suggestions, in path order."""
        risk_factors: list[str] = []
        suggestions: list[str] = []

        def add(risk: str, suggestion: str) -> None:
            risk_factors.append(risk)
            suggestions.append(suggestion)

        for prereq_id, dependent_id in graph.cycle_edges:
            add(
                f"{graph.describe_cycle(prereq_id, dependent_id)}; the link was ignored",
                f'Remove the circular dependency on "{graph.name_of(prereq_id)}" '
                f'from "{graph.name_of(dependent_id)}"',
            )

        for milestone_id in path:
            milestone = graph.milestones[milestone_id]
            name = milestone.name

            if milestone.status == MilestoneStatus.DELAYED:
                add(
                    f'Critical milestone "{name}" is delayed',
                    f'Expedite "{name}" to protect the programme end date',
                )
            if milestone.delay_risk_flag:
                add(
                    f'Critical milestone "{name}" is flagged as a delay risk',
                    f'Add buffer after "{name}" and review its risk mitigation plan',
                )
            if (
                milestone.status == MilestoneStatus.IN_PROGRESS
                and milestone.completion_percentage < self.low_progress_threshold
            ):
                add(
                    f'Critical milestone "{name}" is only {milestone.completion_percentage}% complete',
                    f'Allocate additional resources to "{name}"',
                )
            missing = graph.missing.get(milestone_id)
            if missing:
                add(
                    f'Critical milestone "{name}" depends on missing milestone(s): {", ".join(missing)}',
                    f'Review and update the dependencies of "{name}"',
                )

        return risk_factors, suggestions

    def analyze(self, milestones: Sequence[Milestone]) -> CriticalPathResult:
        """
        Analyze the critical path of a milestone snapshot.

        Dependency cycles never raise: the offending links are excluded from
        the graph and reported as risk factors.

        Args:
            milestones: Milestone snapshot

        Returns:
            CriticalPathResult with path, duration, risks and suggestions
        """
        snapshot = ensure_snapshot(milestones)
        if not snapshot:
            return CriticalPathResult()

        graph = DependencyGraph(snapshot)
        duration, path = self._find_longest_path(graph)
        risk_factors, suggestions = self._collect_risks(graph, path)

        logger.debug(
            f"Critical path: {len(path)} of {len(graph)} milestones, {duration} days, "
            f"{len(risk_factors)} risk(s)"
        )
        return CriticalPathResult(
            path=path,
            duration=duration,
            risk_factors=risk_factors,
            suggestions=suggestions,
        )

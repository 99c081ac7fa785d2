"""
Explicit dependency graph for a milestone snapshot.

The graph is built once per analysis call. Edges run from prerequisite to
dependent. Dangling dependency IDs are collected rather than raised, and any
edge that would close a cycle is excluded so the remaining graph is a DAG.
"""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Iterable

from programme.core.logger import logger
from programme.models.milestone import Milestone
from programme.utils.snapshot import index_by_id

WHITE, GREY, BLACK = 0, 1, 2


class DependencyGraph:
    """Adjacency map over a milestone snapshot."""

    def __init__(self, milestones: Iterable[Milestone]):
        self.milestones: dict[str, Milestone] = index_by_id(milestones)
        self.order: list[str] = list(self.milestones)
        # dependent -> prerequisites (acyclic, existing milestones only)
        self.prerequisites: dict[str, list[str]] = {}
        # prerequisite -> dependents
        self.successors: dict[str, list[str]] = defaultdict(list)
        # dependent -> dependency IDs with no matching milestone
        self.missing: dict[str, list[str]] = {}
        # (prerequisite, dependent) edges dropped to break cycles
        self.cycle_edges: list[tuple[str, str]] = []
        self._build()

    def _build(self) -> None:
        candidates: dict[str, list[str]] = {}
        for milestone_id in self.order:
            resolved: list[str] = []
            for dep_id in self.milestones[milestone_id].dependencies:
                if dep_id in resolved:
                    continue
                if dep_id not in self.milestones:
                    self.missing.setdefault(milestone_id, []).append(dep_id)
                    continue
                resolved.append(dep_id)
            candidates[milestone_id] = resolved

        self.cycle_edges = self._find_cycle_edges(candidates)
        excluded = set(self.cycle_edges)
        for prereq_id, dependent_id in self.cycle_edges:
            logger.warning(
                f"Circular dependency: ignoring link {prereq_id!r} -> {dependent_id!r}"
            )

        for milestone_id in self.order:
            kept = [p for p in candidates[milestone_id] if (p, milestone_id) not in excluded]
            self.prerequisites[milestone_id] = kept
            for prereq_id in kept:
                self.successors[prereq_id].append(milestone_id)

    def _find_cycle_edges(self, candidates: dict[str, list[str]]) -> list[tuple[str, str]]:
        """Find back edges with an iterative DFS (no recursion limit on long chains)."""
        color = {milestone_id: WHITE for milestone_id in self.order}
        back_edges: list[tuple[str, str]] = []

        for root in self.order:
            if color[root] != WHITE:
                continue
            color[root] = GREY
            stack = [(root, iter(candidates[root]))]
            while stack:
                node, prereqs = stack[-1]
                descended = False
                for prereq_id in prereqs:
                    if color[prereq_id] == GREY:
                        back_edges.append((prereq_id, node))
                    elif color[prereq_id] == WHITE:
                        color[prereq_id] = GREY
                        stack.append((prereq_id, iter(candidates[prereq_id])))
                        descended = True
                        break
                if not descended:
                    color[node] = BLACK
                    stack.pop()

        return back_edges

    def __len__(self) -> int:
        return len(self.order)

    def name_of(self, milestone_id: str) -> str:
        milestone = self.milestones.get(milestone_id)
        return milestone.name if milestone else milestone_id

    def describe_cycle(self, prereq_id: str, dependent_id: str) -> str:
        """Human-readable description of an excluded cycle edge."""
        if prereq_id == dependent_id:
            return f'Circular dependency: "{self.name_of(dependent_id)}" depends on itself'
        return (
            f'Circular dependency detected between "{self.name_of(dependent_id)}" '
            f'and "{self.name_of(prereq_id)}"'
        )

    def topological_order(self) -> list[str]:
        """Milestone IDs with every prerequisite before its dependents (Kahn)."""
        in_degree = {milestone_id: len(self.prerequisites[milestone_id]) for milestone_id in self.order}
        queue = deque(milestone_id for milestone_id in self.order if in_degree[milestone_id] == 0)
        order: list[str] = []

        while queue:
            node = queue.popleft()
            order.append(node)
            for succ in self.successors.get(node, []):
                in_degree[succ] -= 1
                if in_degree[succ] == 0:
                    queue.append(succ)

        return order

"""
Unit tests for the milestone dependency graph.
"""

from programme.models.milestone import Milestone
from programme.utils.dependency_graph import DependencyGraph


def make_milestone(milestone_id: str, dependencies: list = None) -> Milestone:
    return Milestone(id=milestone_id, name=f"Milestone {milestone_id}", dependencies=dependencies or [])


def test_topological_order_puts_prerequisites_first():
    graph = DependencyGraph([
        make_milestone("C", ["B"]),
        make_milestone("B", ["A"]),
        make_milestone("A"),
    ])

    assert graph.topological_order() == ["A", "B", "C"]
    assert graph.successors["A"] == ["B"]
    assert graph.cycle_edges == []


def test_missing_dependencies_are_collected():
    graph = DependencyGraph([make_milestone("A", ["ghost", "phantom"])])

    assert graph.missing == {"A": ["ghost", "phantom"]}
    assert graph.prerequisites["A"] == []


def test_two_node_cycle_drops_one_edge():
    graph = DependencyGraph([
        make_milestone("A", ["B"]),
        make_milestone("B", ["A"]),
    ])

    assert len(graph.cycle_edges) == 1
    assert len(graph.topological_order()) == 2


def test_self_dependency_is_a_cycle_edge():
    graph = DependencyGraph([make_milestone("A", ["A"])])

    assert graph.cycle_edges == [("A", "A")]
    assert graph.topological_order() == ["A"]
    assert "depends on itself" in graph.describe_cycle("A", "A")


def test_long_chain_does_not_hit_recursion_limit():
    count = 5000
    milestones = [make_milestone("M0")] + [
        make_milestone(f"M{i}", [f"M{i - 1}"]) for i in range(1, count)
    ]
    milestones[0] = make_milestone("M0", [f"M{count - 1}"])

    graph = DependencyGraph(milestones)

    assert len(graph.cycle_edges) == 1
    assert len(graph.topological_order()) == count


def test_duplicate_ids_keep_first_occurrence():
    first = Milestone(id="A", name="First")
    second = Milestone(id="A", name="Second")

    graph = DependencyGraph([first, second])

    assert len(graph) == 1
    assert graph.name_of("A") == "First"

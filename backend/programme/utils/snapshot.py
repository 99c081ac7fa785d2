"""
Milestone snapshot helpers.

Every analysis call works on an immutable snapshot of milestones. These
helpers check the snapshot at the API boundary and index it by ID.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from programme.core.exceptions import InvalidSnapshotError
from programme.core.logger import logger
from programme.models.milestone import Milestone


def ensure_milestone(milestone: Any, argument: str = "milestone") -> Milestone:
    """Fail fast if ``milestone`` is not a Milestone."""
    if not isinstance(milestone, Milestone):
        raise InvalidSnapshotError(
            f"{argument} must be a Milestone, got {type(milestone).__name__}",
            details={"argument": argument},
        )
    return milestone


def ensure_snapshot(milestones: Any) -> tuple[Milestone, ...]:
    """
    Validate a milestone collection and freeze it as a tuple.

    Raises:
        InvalidSnapshotError: If the collection is None, not iterable, a
            string/mapping, or contains anything other than milestones
    """
    if milestones is None:
        raise InvalidSnapshotError("Milestone collection is required, got None")
    if isinstance(milestones, (str, bytes, Mapping)) or not isinstance(milestones, Iterable):
        raise InvalidSnapshotError(
            f"Milestone collection must be a sequence of milestones, got {type(milestones).__name__}"
        )

    snapshot = tuple(milestones)
    for position, item in enumerate(snapshot):
        if not isinstance(item, Milestone):
            raise InvalidSnapshotError(
                f"Item {position} of the milestone collection is {type(item).__name__}, not a Milestone",
                details={"position": position},
            )
    return snapshot


def index_by_id(milestones: Iterable[Milestone]) -> dict[str, Milestone]:
    """
    Index milestones by ID, preserving input order.

    When an ID appears more than once the first occurrence wins.
    """
    indexed: dict[str, Milestone] = {}
    for milestone in milestones:
        if milestone.id in indexed:
            logger.warning(f"Duplicate milestone id {milestone.id!r} ignored ({milestone.name})")
            continue
        indexed[milestone.id] = milestone
    return indexed

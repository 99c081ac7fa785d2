"""
Milestone health scoring.

Scores run from 0 (at serious risk) to 100 (healthy). Completed milestones
always score 100.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from programme.models.enums import HealthBand, MilestoneStatus
from programme.models.milestone import Milestone
from programme.utils.date_utils import is_overdue
from programme.utils.snapshot import ensure_milestone

MAX_SCORE = 100
DELAYED_PENALTY = 30
DELAY_RISK_PENALTY = 20
OVERDUE_PENALTY = 25
LOW_PROGRESS_PENALTY = 15


class HealthScorer:
    """Service for per-milestone health scores."""

    def __init__(self, low_progress_threshold: int = 50):
        self.low_progress_threshold = low_progress_threshold

    def score(self, milestone: Milestone, today: Optional[date] = None) -> int:
        """
        Calculate a milestone's health score.

        Deductions are cumulative: delayed -30, delay risk -20, overdue -25,
        in progress below the progress threshold -15. The result is floored
        at 0.
        """
        ensure_milestone(milestone)
        status = milestone.status

        if status == MilestoneStatus.COMPLETE:
            return MAX_SCORE

        score = MAX_SCORE
        if status == MilestoneStatus.DELAYED:
            score -= DELAYED_PENALTY
        elif status == MilestoneStatus.IN_PROGRESS:
            if milestone.completion_percentage < self.low_progress_threshold:
                score -= LOW_PROGRESS_PENALTY
        elif status == MilestoneStatus.UPCOMING:
            pass
        else:
            raise ValueError(f"Unhandled milestone status: {status!r}")

        if milestone.delay_risk_flag:
            score -= DELAY_RISK_PENALTY

        due = milestone.due_date
        if due is not None and is_overdue(due, today):
            score -= OVERDUE_PENALTY

        return max(0, score)

    @staticmethod
    def classify(score: int) -> HealthBand:
        """Map a score to a display band."""
        if score >= 75:
            return HealthBand.HEALTHY
        if score >= 50:
            return HealthBand.AT_RISK
        return HealthBand.CRITICAL

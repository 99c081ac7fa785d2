"""
Unit tests for milestone health scoring.
"""

from datetime import date
from itertools import product
from typing import Optional

import pytest

from programme.models.enums import HealthBand, MilestoneStatus
from programme.models.milestone import Milestone
from programme.services.health_scorer import HealthScorer

TODAY = date(2024, 6, 15)
YESTERDAY = date(2024, 6, 14)
NEXT_WEEK = date(2024, 6, 22)


def make_milestone(
    status: MilestoneStatus = MilestoneStatus.UPCOMING,
    delay_risk_flag: bool = False,
    completion_percentage: int = 0,
    planned_end: Optional[date] = NEXT_WEEK,
    planned_date: Optional[date] = None,
) -> Milestone:
    return Milestone(
        id="m-1",
        name="Roof Structure",
        status=status,
        delay_risk_flag=delay_risk_flag,
        completion_percentage=completion_percentage,
        planned_start=date(2024, 6, 1) if planned_end else None,
        planned_end=planned_end,
        planned_date=planned_date,
    )


@pytest.fixture
def scorer():
    return HealthScorer()


def test_healthy_upcoming_milestone_scores_100(scorer):
    assert scorer.score(make_milestone(), TODAY) == 100


def test_delayed_flagged_and_overdue_scores_25(scorer):
    milestone = make_milestone(
        status=MilestoneStatus.DELAYED,
        delay_risk_flag=True,
        planned_end=None,
        planned_date=YESTERDAY,
    )

    assert scorer.score(milestone, TODAY) == 25


def test_in_progress_below_half_loses_15(scorer):
    assert scorer.score(make_milestone(MilestoneStatus.IN_PROGRESS, completion_percentage=49), TODAY) == 85
    assert scorer.score(make_milestone(MilestoneStatus.IN_PROGRESS, completion_percentage=50), TODAY) == 100


def test_due_today_is_not_overdue(scorer):
    assert scorer.score(make_milestone(planned_end=TODAY), TODAY) == 100


def test_missing_due_date_is_not_overdue(scorer):
    assert scorer.score(make_milestone(planned_end=None), TODAY) == 100


def test_complete_overrides_every_deduction(scorer):
    milestone = make_milestone(
        status=MilestoneStatus.COMPLETE,
        delay_risk_flag=True,
        completion_percentage=10,
        planned_end=YESTERDAY,
    )

    assert scorer.score(milestone, TODAY) == 100


def test_worst_case_in_progress(scorer):
    milestone = make_milestone(
        status=MilestoneStatus.IN_PROGRESS,
        delay_risk_flag=True,
        completion_percentage=0,
        planned_end=YESTERDAY,
    )

    assert scorer.score(milestone, TODAY) == 40


@pytest.mark.parametrize(
    "status, flagged, completion, due",
    list(product(MilestoneStatus, [True, False], [0, 49, 50, 100], [YESTERDAY, TODAY, None])),
)
def test_score_is_always_within_bounds(scorer, status, flagged, completion, due):
    milestone = make_milestone(status, flagged, completion, planned_end=due)

    score = scorer.score(milestone, TODAY)

    assert 0 <= score <= 100
    if status == MilestoneStatus.COMPLETE:
        assert score == 100


def test_classify_bands():
    assert HealthScorer.classify(100) == HealthBand.HEALTHY
    assert HealthScorer.classify(75) == HealthBand.HEALTHY
    assert HealthScorer.classify(74) == HealthBand.AT_RISK
    assert HealthScorer.classify(50) == HealthBand.AT_RISK
    assert HealthScorer.classify(25) == HealthBand.CRITICAL

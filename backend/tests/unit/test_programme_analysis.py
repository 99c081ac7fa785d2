"""
Unit tests for the public programme analysis functions.
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from programme.core.exceptions import InvalidSnapshotError
from programme.models.enums import MilestoneStatus
from programme.models.milestone import Milestone
from programme.services import programme_analysis
from programme.services.milestone_templates import get_default_template_catalog
from programme.services.programme_analysis import (
    build_report,
    calculate_critical_path,
    calculate_optimal_start_date,
    get_milestone_health_score,
    identify_resource_conflicts,
    validate_milestone_schedule,
)
from programme.services.programme_report_service import ProgrammeReportService
from programme.services.project_analysis_service import ProgrammeAnalysisService


def chain() -> list[Milestone]:
    return [
        Milestone(id="A", name="Excavation", planned_start=date(2024, 1, 1), planned_end=date(2024, 1, 3)),
        Milestone(
            id="B",
            name="Footings",
            planned_start=date(2024, 1, 4),
            planned_end=date(2024, 1, 7),
            dependencies=["A"],
        ),
        Milestone(
            id="C",
            name="Slab Pour",
            planned_start=date(2024, 1, 8),
            planned_end=date(2024, 1, 12),
            dependencies=["B"],
        ),
    ]


def test_calculate_critical_path():
    result = calculate_critical_path(chain())

    assert result.path == ["A", "B", "C"]
    assert result.duration == 9


def test_calculate_optimal_start_date_returns_iso_string():
    milestones = chain()

    assert calculate_optimal_start_date(milestones[2], milestones) == "2024-01-08"
    assert calculate_optimal_start_date(milestones[0], milestones) == "2024-01-01"


def test_validate_milestone_schedule():
    milestones = chain()

    assert validate_milestone_schedule(milestones[1], milestones) == []


def test_identify_resource_conflicts():
    milestones = [
        Milestone(id="A", name="A", trade="Carpentry", planned_start=date(2024, 1, 1), planned_end=date(2024, 1, 5)),
        Milestone(id="B", name="B", trade="Carpentry", planned_start=date(2024, 1, 3), planned_end=date(2024, 1, 7)),
    ]

    conflicts = identify_resource_conflicts(milestones)

    assert len(conflicts) == 1
    assert conflicts[0].overlap_days == 2


def test_get_milestone_health_score():
    milestone = Milestone(
        id="A",
        name="A",
        status=MilestoneStatus.DELAYED,
        delay_risk_flag=True,
        planned_date=date(2024, 1, 1),
    )

    assert get_milestone_health_score(milestone, today=date(2024, 1, 2)) == 25


def test_build_report_with_injected_catalog():
    milestones = chain() + [Milestone(id="D", name="Drywall Hanging", trade="drywall")]

    without_catalog = build_report(milestones, today=date(2024, 1, 1))
    with_catalog = build_report(milestones, template_catalog=get_default_template_catalog(), today=date(2024, 1, 1))

    assert without_catalog.dependency_suggestions == {}
    assert without_catalog.critical_path == with_catalog.critical_path


@pytest.mark.parametrize("bad_input", [None, 42, "milestones", {"A": "B"}, [{"id": "A"}]])
def test_programmer_errors_fail_fast(bad_input):
    with pytest.raises(InvalidSnapshotError):
        calculate_critical_path(bad_input)
    with pytest.raises(InvalidSnapshotError):
        identify_resource_conflicts(bad_input)
    with pytest.raises(InvalidSnapshotError):
        build_report(bad_input)


def test_health_score_requires_milestone():
    with pytest.raises(InvalidSnapshotError):
        get_milestone_health_score(None)


@pytest.mark.asyncio
async def test_analyze_project_reads_one_snapshot():
    repo = AsyncMock()
    repo.list_by_project.return_value = chain()
    service = ProgrammeAnalysisService(repo, ProgrammeReportService())

    report = await service.analyze_project("project-1", today=date(2024, 1, 1))

    repo.list_by_project.assert_awaited_once_with("project-1")
    assert report.milestone_count == 3
    assert report.critical_path.path == ["A", "B", "C"]
    assert report.overall_health_percent == 100


@pytest.mark.parametrize(
    "name",
    [
        "validate_milestone_schedule",
        "calculate_optimal_start_date",
        "identify_resource_conflicts",
        "calculate_critical_path",
        "get_milestone_health_score",
        "build_report",
    ],
)
def test_public_api_is_importable(name):
    assert callable(getattr(programme_analysis, name))

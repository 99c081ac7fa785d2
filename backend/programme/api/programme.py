"""
Programme analysis API endpoints.

Every endpoint analyses the milestone snapshot sent in the request body;
nothing is persisted.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from programme.api.deps import ReportService, Templates
from programme.core.exceptions import NotFoundError, ValidationError
from programme.models.analysis import (
    CriticalPathResult,
    ProgrammeReport,
    ResourceConflict,
    ScheduleConflict,
)
from programme.models.enums import HealthBand, ProjectType
from programme.models.milestone import Milestone
from programme.models.template import MilestoneTemplate
from programme.utils.date_utils import format_date

router = APIRouter(prefix="/programme", tags=["programme"])


class SnapshotRequest(BaseModel):
    """A milestone snapshot to analyse."""

    milestones: list[Milestone] = Field(default_factory=list)
    today: Optional[date] = Field(None, description="Reference date for overdue checks")


class MilestoneCheckRequest(BaseModel):
    """One milestone checked against its programme."""

    milestone: Milestone
    milestones: list[Milestone] = Field(default_factory=list)
    today: Optional[date] = None


class HealthScoreRequest(BaseModel):
    milestone: Milestone
    today: Optional[date] = None


class HealthScoreResponse(BaseModel):
    milestone_id: str
    score: int
    band: HealthBand


class OptimalStartResponse(BaseModel):
    milestone_id: str
    start_date: str = Field(..., description="YYYY-MM-DD")


class TemplateProgrammeRequest(BaseModel):
    project_id: str
    project_type: ProjectType = ProjectType.RESIDENTIAL
    start_date: Optional[date] = None


class TemplateMilestoneRequest(BaseModel):
    project_id: str
    start_date: Optional[date] = None


def _unprocessable(exc: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=exc.message,
    )


@router.post("/report", response_model=ProgrammeReport)
async def build_programme_report(request: SnapshotRequest, service: ReportService) -> ProgrammeReport:
    """Build the combined programme report."""
    try:
        return service.build_report(request.milestones, request.today)
    except ValidationError as exc:
        raise _unprocessable(exc)


@router.post("/critical-path", response_model=CriticalPathResult)
async def calculate_critical_path(request: SnapshotRequest, service: ReportService) -> CriticalPathResult:
    """Calculate the critical path."""
    return service.critical_path_service.analyze(request.milestones)


@router.post("/conflicts", response_model=list[ResourceConflict])
async def identify_resource_conflicts(
    request: SnapshotRequest, service: ReportService
) -> list[ResourceConflict]:
    """List trade double-bookings."""
    return service.conflict_detector.detect_resource_conflicts(request.milestones)


@router.post("/schedule-conflicts", response_model=list[ScheduleConflict])
async def detect_schedule_conflicts(
    request: SnapshotRequest, service: ReportService
) -> list[ScheduleConflict]:
    """List overlaps, impossible timelines and dependency loops."""
    return service.conflict_detector.detect_schedule_conflicts(request.milestones)


@router.post("/validate", response_model=list[str])
async def validate_milestone_schedule(request: MilestoneCheckRequest, service: ReportService) -> list[str]:
    """Validate one milestone against the programme."""
    return service.validator.validate(request.milestone, request.milestones)


@router.post("/optimal-start", response_model=OptimalStartResponse)
async def calculate_optimal_start_date(
    request: MilestoneCheckRequest, service: ReportService
) -> OptimalStartResponse:
    """Suggest the earliest start date that respects dependencies."""
    start = service.validator.suggest_optimal_start(request.milestone, request.milestones, request.today)
    return OptimalStartResponse(milestone_id=request.milestone.id, start_date=format_date(start))


@router.post("/health-score", response_model=HealthScoreResponse)
async def get_milestone_health_score(request: HealthScoreRequest, service: ReportService) -> HealthScoreResponse:
    """Score one milestone."""
    score = service.health_scorer.score(request.milestone, request.today)
    return HealthScoreResponse(
        milestone_id=request.milestone.id,
        score=score,
        band=service.health_scorer.classify(score),
    )


@router.get("/templates", response_model=list[MilestoneTemplate])
async def list_templates(templates: Templates) -> list[MilestoneTemplate]:
    """List milestone templates."""
    return list(templates.catalog)


@router.post("/templates/programme", response_model=list[Milestone], status_code=status.HTTP_201_CREATED)
async def create_template_programme(request: TemplateProgrammeRequest, templates: Templates) -> list[Milestone]:
    """Generate a full template-based programme (not persisted)."""
    try:
        return templates.create_programme(request.project_id, request.project_type, request.start_date)
    except ValidationError as exc:
        raise _unprocessable(exc)


@router.post("/templates/{template_id}", response_model=Milestone, status_code=status.HTTP_201_CREATED)
async def create_from_template(
    template_id: str, request: TemplateMilestoneRequest, templates: Templates
) -> Milestone:
    """Generate one milestone from a template (not persisted)."""
    try:
        return templates.create_from_template(template_id, request.project_id, request.start_date)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exc.message,
        )

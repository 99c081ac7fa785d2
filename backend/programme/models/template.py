"""
Milestone template models.

Templates describe an industry-standard milestone used to seed a new
programme. A catalog is read-only configuration injected into services.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from pydantic import BaseModel, Field

from programme.models.enums import Priority, ProjectType


class MilestoneTemplate(BaseModel):
    """Template for a standard construction milestone."""

    id: str
    name: str
    trade: str
    category: str
    description: str = ""
    estimated_duration: int = Field(..., ge=1, description="Duration in days")
    dependencies: list[str] = Field(default_factory=list, description="Template IDs")
    default_priority: Priority = Priority.MEDIUM
    is_critical_path: bool = False
    project_types: list[ProjectType] = Field(
        default_factory=lambda: list(ProjectType),
        description="Project types this template applies to",
    )

    class Config:
        frozen = True


class TemplateCatalog:
    """Read-only, ordered collection of milestone templates."""

    def __init__(self, templates: Iterable[MilestoneTemplate]):
        self._templates: tuple[MilestoneTemplate, ...] = tuple(templates)
        self._by_id: dict[str, MilestoneTemplate] = {t.id: t for t in self._templates}

    def __iter__(self) -> Iterator[MilestoneTemplate]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def get(self, template_id: str) -> Optional[MilestoneTemplate]:
        return self._by_id.get(template_id)

    def for_project_type(self, project_type: ProjectType) -> list[MilestoneTemplate]:
        return [t for t in self._templates if project_type in t.project_types]

"""
Dependency injection for API endpoints.

This module provides FastAPI dependencies that build the analysis services
from application settings.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from programme.core.config import get_settings
from programme.models.template import TemplateCatalog
from programme.services.milestone_templates import get_default_template_catalog
from programme.services.programme_analysis import create_report_service
from programme.services.programme_report_service import ProgrammeReportService
from programme.services.template_service import TemplateService


# ===========================================
# Service Dependencies
# ===========================================


@lru_cache()
def get_template_catalog() -> TemplateCatalog:
    """Get the milestone template catalog."""
    return get_default_template_catalog()


@lru_cache()
def get_programme_report_service() -> ProgrammeReportService:
    """Get report service instance with the template catalog injected."""
    return create_report_service(template_catalog=get_template_catalog())


@lru_cache()
def get_template_service() -> TemplateService:
    """Get template service instance."""
    settings = get_settings()
    return TemplateService(get_template_catalog(), start_buffer_days=settings.START_BUFFER_DAYS)


# ===========================================
# Type Aliases for Dependency Injection
# ===========================================

ReportService = Annotated[ProgrammeReportService, Depends(get_programme_report_service)]
Templates = Annotated[TemplateService, Depends(get_template_service)]

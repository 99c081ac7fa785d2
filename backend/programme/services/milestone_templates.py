"""
Industry-standard milestone template catalog.
"""

from programme.models.enums import Priority, ProjectType
from programme.models.template import MilestoneTemplate, TemplateCatalog


_TEMPLATES: list[MilestoneTemplate] = [
    # Foundation & Structural
    MilestoneTemplate(
        id="site-establishment",
        name="Site Establishment",
        trade="general",
        category="Setup",
        description="Site access, fencing, facilities setup",
        estimated_duration=5,
        default_priority=Priority.HIGH,
        is_critical_path=True,
    ),
    MilestoneTemplate(
        id="excavation",
        name="Excavation Complete",
        trade="earthworks",
        category="Foundation",
        description="Site excavation and earthworks",
        estimated_duration=7,
        dependencies=["site-establishment"],
        default_priority=Priority.HIGH,
        is_critical_path=True,
    ),
    MilestoneTemplate(
        id="foundation-concrete",
        name="Foundation Concrete Pour",
        trade="concrete",
        category="Foundation",
        description="Foundation and slab concrete pour",
        estimated_duration=3,
        dependencies=["excavation"],
        default_priority=Priority.HIGH,
        is_critical_path=True,
    ),
    MilestoneTemplate(
        id="frame-erection",
        name="Frame Erection Complete",
        trade="steel",
        category="Structure",
        description="Structural frame assembly",
        estimated_duration=10,
        dependencies=["foundation-concrete"],
        default_priority=Priority.HIGH,
        is_critical_path=True,
    ),
    MilestoneTemplate(
        id="roof-structure",
        name="Roof Structure Complete",
        trade="carpentry",
        category="Structure",
        description="Roof trusses and structure",
        estimated_duration=6,
        dependencies=["frame-erection"],
        default_priority=Priority.HIGH,
        is_critical_path=True,
    ),
    # Services
    MilestoneTemplate(
        id="electrical-rough-in",
        name="Electrical Rough-In",
        trade="electrical",
        category="Services",
        description="First fix electrical installation",
        estimated_duration=5,
        dependencies=["frame-erection"],
    ),
    MilestoneTemplate(
        id="plumbing-rough-in",
        name="Plumbing Rough-In",
        trade="plumbing",
        category="Services",
        description="First fix plumbing installation",
        estimated_duration=4,
        dependencies=["frame-erection"],
    ),
    MilestoneTemplate(
        id="process-services",
        name="Process Services Installed",
        trade="mechanical",
        category="Services",
        description="Process piping, compressed air and plant connections",
        estimated_duration=12,
        dependencies=["frame-erection"],
        default_priority=Priority.HIGH,
        project_types=[ProjectType.INDUSTRIAL],
    ),
    MilestoneTemplate(
        id="wall-frames",
        name="Wall Framing Complete",
        trade="carpentry",
        category="Structure",
        description="Internal wall framing",
        estimated_duration=8,
        dependencies=["electrical-rough-in", "plumbing-rough-in"],
        default_priority=Priority.HIGH,
        is_critical_path=True,
    ),
    # Finishing
    MilestoneTemplate(
        id="drywall",
        name="Drywall Installation",
        trade="drywall",
        category="Finishing",
        description="Drywall hanging and finishing",
        estimated_duration=7,
        dependencies=["wall-frames"],
        is_critical_path=True,
    ),
    MilestoneTemplate(
        id="fire-services",
        name="Fire Services Certified",
        trade="fire protection",
        category="Services",
        description="Sprinklers, hydrants and fire detection commissioning",
        estimated_duration=5,
        dependencies=["drywall"],
        default_priority=Priority.HIGH,
        project_types=[ProjectType.COMMERCIAL, ProjectType.INDUSTRIAL],
    ),
    MilestoneTemplate(
        id="electrical-final",
        name="Electrical Fit-Off",
        trade="electrical",
        category="Services",
        description="Second fix electrical and testing",
        estimated_duration=3,
        dependencies=["drywall"],
    ),
    MilestoneTemplate(
        id="plumbing-final",
        name="Plumbing Fit-Off",
        trade="plumbing",
        category="Services",
        description="Second fix plumbing and fixtures",
        estimated_duration=3,
        dependencies=["drywall"],
    ),
    MilestoneTemplate(
        id="flooring",
        name="Flooring Installation",
        trade="flooring",
        category="Finishing",
        description="Final floor coverings",
        estimated_duration=5,
        dependencies=["drywall"],
    ),
    MilestoneTemplate(
        id="final-cleanup",
        name="Final Cleanup & Handover",
        trade="general",
        category="Completion",
        description="Site cleanup and project handover",
        estimated_duration=3,
        dependencies=["flooring", "electrical-final", "plumbing-final"],
        is_critical_path=True,
    ),
]


def get_default_template_catalog() -> TemplateCatalog:
    """Return the default milestone template catalog."""
    return TemplateCatalog(_TEMPLATES)

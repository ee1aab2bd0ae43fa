# =============================================================================
# core/models/project.py - Project Schemas
# =============================================================================
# - ProjectCreateRequest: "New project" form (name + semester start date)
# - ProjectCreateResponse: New project id and where to go next
#
# Projects are always created from a template; the template key is stored
# on the row so the schedule's origin stays visible.
# =============================================================================

from pydantic import BaseModel, Field


class ProjectCreateRequest(BaseModel):
    """
    New-project form.

    Both fields are required; blanks are rejected by the route before
    any backend call.

    Example:
        {"name": "Solar Car", "start": "2025-01-13"}
    """
    name: str = Field(default="", description="Project name")
    start: str = Field(
        default="",
        description="Semester start date (YYYY-MM-DD)",
        examples=["2025-01-13"],
    )


class ProjectCreateResponse(BaseModel):
    """Response when creating a project from a template."""
    project_id: str
    redirect: str
    message: str = Field(default="Project created from template")


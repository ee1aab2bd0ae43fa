# =============================================================================
# app/routers/projects.py - Project Endpoints
# =============================================================================
# "New project" form for a team: creates the project from the semester
# template and seeds its milestones.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import OptionalUserDep, SupabaseDep
from app.exceptions import TeamNotFoundError, ValidationFailedError
from core.models.project import ProjectCreateRequest, ProjectCreateResponse
from core.services.project_service import ProjectService
from lib.utils import is_uuid

router = APIRouter()


@router.post(
    "/teams/{team_id}/projects",
    response_model=ProjectCreateResponse,
    status_code=201,
)
async def create_project(
    team_id: Annotated[str, Path(description="Team UUID")],
    request: ProjectCreateRequest,
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """
    Create a project from the semester template.

    Milestone due dates are laid out weekly from the semester start date.
    """
    name = request.name.strip()
    start = request.start.strip()
    if not name or not start:
        raise ValidationFailedError("name" if not name else "start", "Missing fields")
    if not is_uuid(team_id):
        raise TeamNotFoundError(team_id)

    project_id = ProjectService.create_project_from_template(
        client,
        user,
        team_id=team_id,
        name=name,
        semester_start_date=start,
    )

    return ProjectCreateResponse(
        project_id=project_id,
        redirect=f"/projects/{project_id}/tasks",
    )

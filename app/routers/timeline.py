# =============================================================================
# app/routers/timeline.py - Timeline Endpoints
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path

from app.dependencies import OptionalUserDep, SupabaseDep
from core.models.task import TimelineData
from core.services.timeline_service import TimelineService

router = APIRouter()


@router.get("/projects/{project_id}/timeline", response_model=TimelineData)
async def project_timeline(
    project_id: Annotated[UUID, Path(description="Project UUID")],
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """All tasks and milestones of a project, with the project's date span."""
    return TimelineData(**TimelineService.get_project_timeline(client, user, project_id))


@router.get("/timeline", response_model=TimelineData)
async def personal_timeline(client: SupabaseDep, user: OptionalUserDep):
    """Everything assigned to you, across projects."""
    return TimelineData(**TimelineService.get_personal_timeline(client, user))

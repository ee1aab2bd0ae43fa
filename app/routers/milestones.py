# =============================================================================
# app/routers/milestones.py - Milestone Endpoints
# =============================================================================
# List milestones of a project; admins can add, edit and remove them.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path
from pydantic import BaseModel, Field

from app.dependencies import OptionalUserDep, SupabaseDep
from core.models.milestone import (
    MilestoneCreate,
    MilestoneList,
    MilestoneResponse,
    MilestoneUpdate,
)
from core.services.milestone_service import MilestoneService

router = APIRouter()


class NewMilestoneRequest(BaseModel):
    """Body for adding a milestone; the project comes from the path."""
    title: str = Field(..., examples=["Demo day"])
    due_at: str | None = Field(default=None, examples=["2025-04-30T00:00:00Z"])


@router.get("/projects/{project_id}/milestones", response_model=MilestoneList)
async def list_milestones(
    project_id: Annotated[UUID, Path(description="Project UUID")],
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """List a project's milestones, earliest due first."""
    rows = MilestoneService.list_milestones(client, user, project_id)

    return MilestoneList(
        project_id=str(project_id),
        milestones=[MilestoneResponse(**row) for row in rows],
    )


@router.post("/projects/{project_id}/milestones", status_code=201)
async def create_milestone(
    project_id: Annotated[UUID, Path(description="Project UUID")],
    request: NewMilestoneRequest,
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """Add a milestone (team admins only)."""
    MilestoneService.create_milestone(
        client,
        user,
        {"project_id": str(project_id), "title": request.title, "due_at": request.due_at},
    )

    return {"project_id": str(project_id), "message": "Milestone created"}


@router.patch("/milestones/{milestone_id}")
async def update_milestone(
    milestone_id: Annotated[UUID, Path(description="Milestone UUID")],
    request: MilestoneUpdate,
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """
    Update a milestone (team admins only).

    Send only the fields to change; `"due_at": null` clears the due date.
    """
    MilestoneService.update_milestone(client, user, milestone_id, request)

    return {"milestone_id": str(milestone_id), "message": "Milestone updated"}


@router.delete("/milestones/{milestone_id}")
async def delete_milestone(
    milestone_id: Annotated[UUID, Path(description="Milestone UUID")],
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """Delete a milestone with no tasks attached (team admins only)."""
    MilestoneService.delete_milestone(client, user, milestone_id)

    return {"milestone_id": str(milestone_id), "message": "Milestone deleted"}

# =============================================================================
# app/routers/tasks.py - Task Endpoints
# =============================================================================
# A project's task list and new-task form, completing tasks, assigning
# yourself, and comments with "@email" mentions.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, Query
from pydantic import BaseModel, Field

from app.dependencies import OptionalUserDep, SupabaseDep
from core.models.task import CommentCreate, TaskFilter, TaskList, TaskResponse
from core.services.task_service import TASK_PAGE_SIZE, TaskService

router = APIRouter()


class NewTaskRequest(BaseModel):
    """Body for creating a task; the project comes from the path."""
    title: str = Field(..., examples=["Draft proposal"])
    description: str | None = None
    due_at: str | None = Field(default=None, examples=["2025-02-03T00:00:00Z"])
    size: int | None = None
    milestone_id: str | None = None


class TaskCreatedResponse(BaseModel):
    task_id: str
    redirect: str
    message: str = "Task created"


class CommentResponse(BaseModel):
    task_id: str
    notified: int = 0
    message: str = "Comment added"


@router.get("/projects/{project_id}/tasks", response_model=TaskList)
async def list_tasks(
    project_id: Annotated[UUID, Path(description="Project UUID")],
    client: SupabaseDep,
    user: OptionalUserDep,
    filter: Annotated[TaskFilter | None, Query(description="me, week or milestone")] = None,
    milestone_id: Annotated[UUID | None, Query(description="Milestone for filter=milestone")] = None,
    page: Annotated[int, Query(ge=1)] = 1,
):
    """
    List a project's tasks, 50 per page.

    Undated tasks come first, then earliest due.
    """
    rows = TaskService.list_tasks(
        client, user, project_id, task_filter=filter, milestone_id=milestone_id, page=page
    )

    return TaskList(
        project_id=str(project_id),
        tasks=[TaskResponse(**row) for row in rows],
        page=page,
        page_size=TASK_PAGE_SIZE,
    )


@router.post("/projects/{project_id}/tasks", response_model=TaskCreatedResponse, status_code=201)
async def create_task(
    project_id: Annotated[UUID, Path(description="Project UUID")],
    request: NewTaskRequest,
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """Create a task in a project."""
    task_id = TaskService.create_task(
        client,
        user,
        {"project_id": str(project_id), **request.model_dump(exclude_none=True)},
    )

    return TaskCreatedResponse(task_id=task_id, redirect=f"/projects/{project_id}/tasks")


@router.post("/tasks/{task_id}/complete")
async def complete_task(
    task_id: Annotated[UUID, Path(description="Task UUID")],
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """Mark a task done."""
    TaskService.complete_task(client, user, task_id)
    return {"task_id": str(task_id), "status": "done"}


@router.put("/tasks/{task_id}/assignees/me")
async def assign_self(
    task_id: Annotated[UUID, Path(description="Task UUID")],
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """Assign yourself to a task. Repeating it changes nothing."""
    TaskService.assign_self(client, user, task_id)
    return {"task_id": str(task_id), "assigned": True}


@router.delete("/tasks/{task_id}/assignees/me")
async def unassign_self(
    task_id: Annotated[UUID, Path(description="Task UUID")],
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """Remove yourself from a task."""
    TaskService.unassign_self(client, user, task_id)
    return {"task_id": str(task_id), "assigned": False}


@router.post("/tasks/{task_id}/comments", response_model=CommentResponse, status_code=201)
async def add_comment(
    task_id: Annotated[UUID, Path(description="Task UUID")],
    request: CommentCreate,
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """
    Comment on a task.

    Teammates mentioned as "@their@email" get a notification.
    """
    notified = TaskService.add_comment(client, user, task_id, request)
    return CommentResponse(task_id=str(task_id), notified=len(notified))

# =============================================================================
# core/models/task.py - Task, Comment & Timeline Schemas
# =============================================================================
# These models define the API contract for task operations:
# - TaskCreate: New task in a project (optionally under a milestone)
# - TaskResponse / TaskList: One page of a project's task list
# - CommentCreate: Comment on a task; "@email" mentions notify teammates
# - Timeline*: Tasks and milestones laid out for the timeline views
# =============================================================================

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

from core.models.milestone import MilestoneStatus


class TaskStatus(str, Enum):
    """
    Possible states for a task.

    - open: Not started
    - in_progress: Someone is working on it
    - done: Completed
    """
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class TaskFilter(str, Enum):
    """
    Task list filters.

    - me: Tasks the caller created
    - week: Tasks due within the next 7 days
    - milestone: Tasks due on a milestone's day
    """
    ME = "me"
    WEEK = "week"
    MILESTONE = "milestone"


class TaskCreate(BaseModel):
    """
    Input for creating a task.

    Example:
        {"project_id": "550e8400-...", "title": "Draft proposal", "size": 3}
    """
    project_id: UUID
    title: str = Field(..., min_length=1)
    description: str | None = None
    due_at: datetime | None = None
    size: int | None = None
    milestone_id: UUID | None = None

    model_config = {"str_strip_whitespace": True}


class TaskResponse(BaseModel):
    """A task as shown in a project's task list."""
    id: str
    title: str
    status: TaskStatus = TaskStatus.OPEN
    due_at: datetime | None = None
    description: str | None = None
    created_by: str | None = None


class TaskList(BaseModel):
    """One page of tasks, earliest due first (undated tasks lead)."""
    project_id: str
    tasks: list[TaskResponse] = Field(default_factory=list)
    page: int = 1
    page_size: int = 50


class CommentCreate(BaseModel):
    """A comment on a task."""
    body: str = Field(..., min_length=1, max_length=5000)

    model_config = {"str_strip_whitespace": True}


# =============================================================================
# Timeline
# =============================================================================

class TimelineAssignee(BaseModel):
    """Someone assigned to a task."""
    user_id: str
    name: str | None = None


class TimelineTask(BaseModel):
    """A task with its project, milestone and assignees resolved."""
    id: str
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.OPEN
    due_at: datetime | None = None
    project_id: str
    project_name: str
    team_id: str
    milestone_id: str | None = None
    milestone_title: str | None = None
    assignees: list[TimelineAssignee] = Field(default_factory=list)


class TimelineMilestone(BaseModel):
    id: str
    title: str
    due_at: datetime | None = None
    status: MilestoneStatus = MilestoneStatus.OPEN


class TimelineData(BaseModel):
    """
    Timeline of one project, or of everything assigned to the caller.

    `project_start` / `project_end` are the first and last milestone due
    dates; they are only set for the project timeline.
    """
    tasks: list[TimelineTask] = Field(default_factory=list)
    milestones: list[TimelineMilestone] = Field(default_factory=list)
    project_name: str | None = None
    project_start: datetime | None = None
    project_end: datetime | None = None

# =============================================================================
# core/models/milestone.py - Milestone Schemas
# =============================================================================
# Milestones are seeded from a template when a project is created and can
# then be added, edited or removed by team admins.
# =============================================================================

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field


class MilestoneStatus(str, Enum):
    """
    Possible states for a milestone.

    - open: Not yet reached
    - done: Completed
    """
    OPEN = "open"
    DONE = "done"


class MilestoneCreate(BaseModel):
    """
    Input for adding a milestone to a project.

    Example:
        {"project_id": "550e8400-...", "title": "Demo day", "due_at": "2025-04-30T00:00:00Z"}
    """
    project_id: UUID
    title: str = Field(..., min_length=1, max_length=200)
    due_at: datetime | None = None

    model_config = {"str_strip_whitespace": True}


class MilestoneUpdate(BaseModel):
    """
    Partial update for a milestone.

    Only fields that are explicitly set are written; `due_at: null`
    clears the due date.
    """
    title: str | None = Field(default=None, min_length=1, max_length=200)
    due_at: datetime | None = None
    status: MilestoneStatus | None = None

    model_config = {"str_strip_whitespace": True}


class MilestoneResponse(BaseModel):
    """
    A milestone as returned to clients.

    `progress` is the share of its tasks that are done, as a whole
    percentage; 0 when it has no tasks.
    """
    id: str
    title: str
    due_at: datetime | None = None
    status: MilestoneStatus = MilestoneStatus.OPEN
    total_tasks: int = 0
    completed_tasks: int = 0
    progress: int = Field(default=0, ge=0, le=100)


class MilestoneList(BaseModel):
    """Milestones of one project, earliest due first."""
    project_id: str
    milestones: list[MilestoneResponse] = Field(default_factory=list)

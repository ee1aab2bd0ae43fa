# =============================================================================
# core/models/wellness.py - Check-in & Streak Schemas
# =============================================================================
# A daily mood check-in. Check-ins and completed tasks are recorded as
# activity events, which drive the caller's day streak and badges.
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field


class ActivityKind(str, Enum):
    """Activity events that count toward a streak."""
    CHECKIN = "checkin"
    TASK_COMPLETED = "task_completed"


class CheckInCreate(BaseModel):
    """
    Daily check-in.

    Example:
        {"mood": 4, "note": "Good sprint"}
    """
    mood: int = Field(..., ge=1, le=5, description="1 (low) to 5 (great)")
    note: str | None = Field(default=None, description="Private note, only visible to you")


class CheckInResponse(BaseModel):
    """Streak after the check-in was recorded."""
    mood: int
    current_streak: int = 0
    longest_streak: int = 0
    message: str = "Checked in"

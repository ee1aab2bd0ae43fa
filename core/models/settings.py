# =============================================================================
# core/models/settings.py - User Settings Schemas
# =============================================================================

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class UserSettings(BaseModel):
    """Profile and notification preferences of the caller."""
    id: UUID
    name: str | None = None
    email: str | None = None
    email_mentions: bool = True
    email_due: bool = True
    email_digest: bool = True


class ProfileUpdate(BaseModel):
    """Rename the caller."""
    name: str = Field(..., min_length=1, max_length=100)

    model_config = {"str_strip_whitespace": True}


class EmailPreferencesUpdate(BaseModel):
    """Email notification switches; all default to off when omitted."""
    email_mentions: bool = False
    email_due: bool = False
    email_digest: bool = False


class Badge(BaseModel):
    """A badge the caller has unlocked (e.g. streak_7)."""
    kind: str
    unlocked_at: datetime | None = None


class UserStats(BaseModel):
    """Activity summary shown on the settings page."""
    team_count: int = 0
    completed_tasks: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    total_check_ins: int = 0
    badges: list[Badge] = Field(default_factory=list)

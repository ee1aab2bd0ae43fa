# =============================================================================
# core/models/notification.py - Notification Schemas
# =============================================================================
# Notifications are written when a teammate mentions the caller in a task
# comment. They stay unread until marked read, and read ones can be purged.
# =============================================================================

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class NotificationResponse(BaseModel):
    """A notification addressed to the caller."""
    id: str
    kind: str
    payload_json: dict[str, Any] | None = None
    read_at: datetime | None = None
    created_at: datetime | None = None


class NotificationList(BaseModel):
    """A page of notifications, newest first."""
    notifications: list[NotificationResponse] = Field(default_factory=list)
    limit: int = 50
    offset: int = 0


class UnreadCount(BaseModel):
    unread: int = 0

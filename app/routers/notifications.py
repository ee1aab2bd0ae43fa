# =============================================================================
# app/routers/notifications.py - Notification Endpoints
# =============================================================================
# The caller's notifications: list, unread badge count, mark read, delete.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, Query

from app.dependencies import OptionalUserDep, SupabaseDep
from core.models.notification import NotificationList, NotificationResponse, UnreadCount
from core.services.notification_service import NotificationService

router = APIRouter()


@router.get("/notifications", response_model=NotificationList)
async def list_notifications(
    client: SupabaseDep,
    user: OptionalUserDep,
    limit: Annotated[int, Query(ge=1, le=100)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
):
    """List your notifications, newest first."""
    rows = NotificationService.list_notifications(client, user, limit=limit, offset=offset)

    return NotificationList(
        notifications=[NotificationResponse(**row) for row in rows],
        limit=limit,
        offset=offset,
    )


@router.get("/notifications/unread-count", response_model=UnreadCount)
async def unread_count(client: SupabaseDep, user: OptionalUserDep):
    """Number of unread notifications."""
    return UnreadCount(unread=NotificationService.get_unread_count(client, user))


@router.post("/notifications/read-all")
async def mark_all_read(client: SupabaseDep, user: OptionalUserDep):
    """Mark every notification read."""
    NotificationService.mark_all_as_read(client, user)
    return {"message": "All notifications marked as read"}


@router.post("/notifications/{notification_id}/read")
async def mark_read(
    notification_id: Annotated[UUID, Path(description="Notification UUID")],
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """Mark one notification read."""
    NotificationService.mark_as_read(client, user, notification_id)
    return {"notification_id": str(notification_id), "message": "Marked as read"}


@router.delete("/notifications/read")
async def delete_all_read(client: SupabaseDep, user: OptionalUserDep):
    """Delete every notification you have already read."""
    NotificationService.delete_all_read(client, user)
    return {"message": "Read notifications deleted"}


@router.delete("/notifications/{notification_id}")
async def delete_notification(
    notification_id: Annotated[UUID, Path(description="Notification UUID")],
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """Delete one notification."""
    NotificationService.delete_notification(client, user, notification_id)
    return {"notification_id": str(notification_id), "message": "Notification deleted"}

# =============================================================================
# core/services/notification_service.py - Notification Logic
# =============================================================================
# Every query is scoped to the caller's own notifications, on top of RLS.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from supabase import Client

from app.auth.models import AuthUser
from core.services.base import require_user
from lib.utils import normalize_uuid, utc_now

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for the caller's notifications."""

    @staticmethod
    def get_unread_count(client: Client, user: AuthUser | None) -> int:
        """Number of the caller's notifications not yet read."""
        user = require_user(user)

        response = (
            client.table("notifications")
            .select("id", count="exact", head=True)
            .eq("user_id", str(user.id))
            .is_("read_at", "null")
            .execute()
        )
        return response.count or 0

    @staticmethod
    def list_notifications(
        client: Client,
        user: AuthUser | None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        """A page of the caller's notifications, newest first."""
        user = require_user(user)

        response = (
            client.table("notifications")
            .select("id, kind, payload_json, read_at, created_at")
            .eq("user_id", str(user.id))
            .order("created_at", desc=True)
            .range(offset, offset + limit - 1)
            .execute()
        )
        return response.data or []

    @staticmethod
    def mark_as_read(
        client: Client,
        user: AuthUser | None,
        notification_id: str | UUID,
    ) -> None:
        user = require_user(user)

        (
            client.table("notifications")
            .update({"read_at": utc_now().isoformat()})
            .eq("id", normalize_uuid(notification_id))
            .eq("user_id", str(user.id))
            .execute()
        )

    @staticmethod
    def mark_all_as_read(client: Client, user: AuthUser | None) -> None:
        """Mark every unread notification of the caller as read."""
        user = require_user(user)

        (
            client.table("notifications")
            .update({"read_at": utc_now().isoformat()})
            .eq("user_id", str(user.id))
            .is_("read_at", "null")
            .execute()
        )
        logger.info(f"Marked all notifications read for user {user.id}")

    @staticmethod
    def delete_notification(
        client: Client,
        user: AuthUser | None,
        notification_id: str | UUID,
    ) -> None:
        user = require_user(user)

        (
            client.table("notifications")
            .delete()
            .eq("id", normalize_uuid(notification_id))
            .eq("user_id", str(user.id))
            .execute()
        )

    @staticmethod
    def delete_all_read(client: Client, user: AuthUser | None) -> None:
        """Delete the caller's notifications that have been read."""
        user = require_user(user)

        (
            client.table("notifications")
            .delete()
            .eq("user_id", str(user.id))
            .not_.is_("read_at", "null")
            .execute()
        )
        logger.info(f"Deleted read notifications for user {user.id}")

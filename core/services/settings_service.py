# =============================================================================
# core/services/settings_service.py - User Settings Logic
# =============================================================================
# Profile name, email notification preferences and activity stats of the
# caller.
# =============================================================================

import logging
from collections.abc import Mapping
from typing import Any

from supabase import Client

from app.auth.models import AuthUser
from core.models.settings import EmailPreferencesUpdate, ProfileUpdate
from core.models.task import TaskStatus
from core.services.base import parse_form, require_user

logger = logging.getLogger(__name__)

DEFAULT_PREFS = {
    "email_mentions": True,
    "email_due": True,
    "email_digest": True,
}


class SettingsService:
    """Service for the caller's profile and preferences."""

    @staticmethod
    def get_user_settings(
        client: Client,
        user: AuthUser | None,
    ) -> dict[str, Any]:
        """
        Get the caller's profile and preferences.

        A default preferences row is inserted when none exists yet.
        """
        user = require_user(user)
        user_id = str(user.id)

        profile = (
            client.table("users")
            .select("id, name, email")
            .eq("id", user_id)
            .maybe_single()
            .execute()
        )
        profile_data = profile.data if profile and profile.data else {}

        prefs = (
            client.table("user_prefs")
            .select("email_mentions, email_due, email_digest")
            .eq("user_id", user_id)
            .maybe_single()
            .execute()
        )
        prefs_data = prefs.data if prefs and prefs.data else None

        if prefs_data is None:
            client.table("user_prefs").insert({"user_id": user_id, **DEFAULT_PREFS}).execute()
            logger.info(f"Created default preferences for user {user_id}")
            prefs_data = {}

        return {
            "id": user.id,
            "name": profile_data.get("name"),
            "email": profile_data.get("email") or user.email,
            **{key: prefs_data.get(key, default) for key, default in DEFAULT_PREFS.items()},
        }

    @staticmethod
    def update_user_profile(
        client: Client,
        user: AuthUser | None,
        form: Mapping[str, Any] | ProfileUpdate,
    ) -> None:
        """
        Rename the caller.

        Raises:
            ValidationFailedError: If the name is empty or longer than 100 chars
        """
        data = parse_form(ProfileUpdate, form)
        user = require_user(user)

        client.table("users").update({"name": data.name}).eq("id", str(user.id)).execute()
        logger.info(f"Updated profile name for user {user.id}")

    @staticmethod
    def update_email_preferences(
        client: Client,
        user: AuthUser | None,
        form: Mapping[str, Any] | EmailPreferencesUpdate,
    ) -> None:
        """Write the caller's email notification switches."""
        data = parse_form(EmailPreferencesUpdate, form)
        user = require_user(user)

        client.table("user_prefs").upsert(
            {"user_id": str(user.id), **data.model_dump()},
            on_conflict="user_id",
        ).execute()
        logger.info(f"Updated email preferences for user {user.id}")

    @staticmethod
    def get_user_stats(
        client: Client,
        user: AuthUser | None,
    ) -> dict[str, Any]:
        """
        Activity summary of the caller.

        Returns:
            team_count, completed_tasks (done tasks assigned to the caller),
            current_streak, longest_streak, total_check_ins and badges
            (newest first)
        """
        user = require_user(user)
        user_id = str(user.id)

        teams = (
            client.table("memberships")
            .select("team_id", count="exact", head=True)
            .eq("user_id", user_id)
            .execute()
        )

        completed = (
            client.table("task_assignees")
            .select("task_id, tasks!inner(status)", count="exact", head=True)
            .eq("user_id", user_id)
            .eq("tasks.status", TaskStatus.DONE.value)
            .execute()
        )

        streak = (
            client.table("streaks")
            .select("current_days, longest_days")
            .eq("user_id", user_id)
            .maybe_single()
            .execute()
        )
        streak_data = streak.data if streak and streak.data else {}

        check_ins = (
            client.table("checkins")
            .select("id", count="exact", head=True)
            .eq("user_id", user_id)
            .execute()
        )

        badges = (
            client.table("rewards")
            .select("kind, unlocked_at")
            .eq("user_id", user_id)
            .order("unlocked_at", desc=True)
            .execute()
        )

        return {
            "team_count": teams.count or 0,
            "completed_tasks": completed.count or 0,
            "current_streak": streak_data.get("current_days") or 0,
            "longest_streak": streak_data.get("longest_days") or 0,
            "total_check_ins": check_ins.count or 0,
            "badges": badges.data or [],
        }

# =============================================================================
# core/services/activity_service.py - Activity, Streak & Badge Logic
# =============================================================================
# Daily check-ins and completed tasks are recorded as activity events.
# Each event may advance the caller's day streak:
#
#   - first event ever:            streak = 1
#   - already counted today (UTC): unchanged
#   - previous event within 48h:   streak + 1
#   - otherwise:                   streak restarts at 1
#
# Streak badges (streak_7, streak_30) are awarded once, idempotently.
# =============================================================================

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

from supabase import Client

from app.auth.models import AuthUser
from core.models.wellness import ActivityKind, CheckInCreate
from core.services.base import parse_form, require_user
from lib.utils import parse_timestamp, utc_now

logger = logging.getLogger(__name__)

STREAK_WINDOW = timedelta(hours=48)

STREAK_BADGES = (
    ("streak_7", 7),
    ("streak_30", 30),
)


def advance_streak(
    streak: Mapping[str, Any] | None,
    last_event_at: datetime | None,
    now: datetime,
) -> dict[str, int] | None:
    """
    Streak values after an event at `now`.

    Args:
        streak: Current streak row (current_days, longest_days, updated_at), or None
        last_event_at: Time of the caller's previous event, or None
        now: Time of the new event

    Returns:
        New current_days/longest_days, or None when today already counted
    """
    if streak is None:
        return {"current_days": 1, "longest_days": 1}

    updated_at = parse_timestamp(streak.get("updated_at"))
    if updated_at is not None and updated_at.date() == now.date():
        return None

    current = int(streak.get("current_days") or 0)
    longest = int(streak.get("longest_days") or 0)

    if last_event_at is None or now - last_event_at <= STREAK_WINDOW:
        current += 1
    else:
        current = 1

    return {"current_days": current, "longest_days": max(longest, current)}


def earned_badges(current_days: int) -> list[str]:
    """Badge kinds a streak of `current_days` qualifies for."""
    return [kind for kind, days in STREAK_BADGES if current_days >= days]


class ActivityService:
    """Service for activity events, streaks and check-ins."""

    @staticmethod
    def record_event(
        client: Client,
        user: AuthUser,
        kind: ActivityKind,
        team_id: str | None = None,
        payload: dict[str, Any] | None = None,
        now: datetime | None = None,
    ) -> dict[str, int]:
        """
        Record an activity event and update the caller's streak and badges.

        Returns:
            The streak after the event (current_days, longest_days)
        """
        now = now or utc_now()
        user_id = str(user.id)

        last_event = (
            client.table("events")
            .select("created_at")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .limit(1)
            .maybe_single()
            .execute()
        )
        last_event_at = (
            parse_timestamp(last_event.data.get("created_at"))
            if last_event and last_event.data
            else None
        )

        client.table("events").insert({
            "user_id": user_id,
            "team_id": team_id,
            "kind": ActivityKind(kind).value,
            "payload_json": payload,
        }).execute()

        existing = (
            client.table("streaks")
            .select("current_days, longest_days, updated_at")
            .eq("user_id", user_id)
            .maybe_single()
            .execute()
        )
        streak = existing.data if existing and existing.data else None

        advanced = advance_streak(streak, last_event_at, now)
        if advanced is None:
            current = {
                "current_days": int(streak.get("current_days") or 0),
                "longest_days": int(streak.get("longest_days") or 0),
            }
        elif streak is None:
            client.table("streaks").insert(
                {"user_id": user_id, **advanced, "updated_at": now.isoformat()}
            ).execute()
            current = advanced
        else:
            client.table("streaks").update(
                {**advanced, "updated_at": now.isoformat()}
            ).eq("user_id", user_id).execute()
            current = advanced

        for badge in earned_badges(current["current_days"]):
            client.table("rewards").upsert(
                {"user_id": user_id, "kind": badge},
                on_conflict="user_id,kind",
                ignore_duplicates=True,
            ).execute()

        logger.debug(f"Recorded {kind} for user {user_id}; streak {current['current_days']}")
        return current

    @staticmethod
    def check_in(
        client: Client,
        user: AuthUser | None,
        form: Mapping[str, Any] | CheckInCreate,
    ) -> dict[str, int]:
        """
        Record the caller's daily mood check-in.

        Once per day is enforced by a unique index in the backend; a
        second check-in surfaces as the backend's error.

        Raises:
            ValidationFailedError: If mood isn't 1..5
            NotAuthenticatedError: If there is no caller
            APIError: If the caller already checked in today
        """
        data = parse_form(CheckInCreate, form)
        user = require_user(user)

        try:
            client.table("checkins").insert({
                "user_id": str(user.id),
                "mood": data.mood,
                "note_private": data.note,
            }).execute()
        except Exception as e:
            logger.warning(f"Check-in failed for user {user.id}: {e}")
            raise

        logger.info(f"User {user.id} checked in")
        return ActivityService.record_event(
            client, user, ActivityKind.CHECKIN, payload={"mood": data.mood}
        )

# =============================================================================
# core/services/timeline_service.py - Timeline Views
# =============================================================================
# Builds the data behind the two timeline views:
# - project timeline: every task and milestone of one project
# - personal timeline: every task assigned to the caller, across projects
#
# Tasks come back with their project, milestone title and all assignees
# (so co-assignees show up too).
# =============================================================================

import logging
from collections.abc import Iterable, Mapping
from typing import Any
from uuid import UUID

from supabase import Client

from app.auth.models import AuthUser
from app.exceptions import ProjectNotFoundError
from core.services.base import require_user
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

TASK_COLUMNS = "id, title, description, status, due_at, project_id, milestone_id"


def group_assignees(rows: Iterable[Mapping[str, Any]]) -> dict[str, list[dict[str, Any]]]:
    """
    Group task_assignees rows (with an embedded `users` profile) by task.

    Example:
        group_assignees([{"task_id": "t1", "user_id": "u1", "users": {"name": "Ada"}}])
        # {"t1": [{"user_id": "u1", "name": "Ada"}]}
    """
    grouped: dict[str, list[dict[str, Any]]] = {}
    for row in rows:
        profile = row.get("users") or {}
        grouped.setdefault(row["task_id"], []).append({
            "user_id": row["user_id"],
            "name": profile.get("name"),
        })
    return grouped


def timeline_task(
    task: Mapping[str, Any],
    project: Mapping[str, Any],
    assignees: Mapping[str, list[dict[str, Any]]],
) -> dict[str, Any]:
    """Flatten one task row into a timeline entry."""
    milestone = task.get("milestones") or {}
    return {
        "id": task["id"],
        "title": task["title"],
        "description": task.get("description"),
        "status": task.get("status"),
        "due_at": task.get("due_at"),
        "project_id": task["project_id"],
        "project_name": project["name"],
        "team_id": project["team_id"],
        "milestone_id": task.get("milestone_id"),
        "milestone_title": milestone.get("title"),
        "assignees": assignees.get(task["id"], []),
    }


class TimelineService:
    """Service for the project and personal timelines."""

    @staticmethod
    def _assignees_of(client: Client, task_ids: list[str]) -> dict[str, list[dict[str, Any]]]:
        if not task_ids:
            return {}
        response = (
            client.table("task_assignees")
            .select("task_id, user_id, users!inner(id, name)")
            .in_("task_id", task_ids)
            .execute()
        )
        return group_assignees(response.data or [])

    @staticmethod
    def get_project_timeline(
        client: Client,
        user: AuthUser | None,
        project_id: str | UUID,
    ) -> dict[str, Any]:
        """
        Tasks and milestones of one project, earliest due first.

        The project's start and end are its first and last milestone due
        dates (None when no milestone has one).

        Raises:
            NotAuthenticatedError: If there is no caller
            ProjectNotFoundError: If the project doesn't exist or isn't visible
        """
        require_user(user)
        project_id_str = normalize_uuid(project_id)

        project = (
            client.table("projects")
            .select("id, name, team_id")
            .eq("id", project_id_str)
            .maybe_single()
            .execute()
        )
        if not project or not project.data:
            raise ProjectNotFoundError(project_id_str)

        tasks = (
            client.table("tasks")
            .select(f"{TASK_COLUMNS}, milestones(id, title)")
            .eq("project_id", project_id_str)
            .order("due_at", desc=False, nullsfirst=False)
            .execute()
        ).data or []

        assignees = TimelineService._assignees_of(client, [task["id"] for task in tasks])

        milestones = (
            client.table("milestones")
            .select("id, title, due_at, status")
            .eq("project_id", project_id_str)
            .order("due_at", desc=False, nullsfirst=False)
            .execute()
        ).data or []

        due_dates = [m["due_at"] for m in milestones if m.get("due_at")]

        return {
            "tasks": [timeline_task(task, project.data, assignees) for task in tasks],
            "milestones": milestones,
            "project_name": project.data["name"],
            "project_start": due_dates[0] if due_dates else None,
            "project_end": due_dates[-1] if due_dates else None,
        }

    @staticmethod
    def get_personal_timeline(
        client: Client,
        user: AuthUser | None,
    ) -> dict[str, Any]:
        """
        Tasks assigned to the caller across all projects, plus the
        milestones of those projects.

        Raises:
            NotAuthenticatedError: If there is no caller
        """
        user = require_user(user)

        assignments = (
            client.table("task_assignees")
            .select("task_id")
            .eq("user_id", str(user.id))
            .execute()
        ).data or []
        if not assignments:
            return {"tasks": [], "milestones": []}

        task_ids = [row["task_id"] for row in assignments]

        tasks = (
            client.table("tasks")
            .select(f"{TASK_COLUMNS}, projects!inner(id, name, team_id), milestones(id, title)")
            .in_("id", task_ids)
            .order("due_at", desc=False, nullsfirst=False)
            .execute()
        ).data or []

        assignees = TimelineService._assignees_of(client, task_ids)

        project_ids = list(dict.fromkeys(task["project_id"] for task in tasks))
        milestones = []
        if project_ids:
            milestones = (
                client.table("milestones")
                .select("id, title, due_at, status")
                .in_("project_id", project_ids)
                .order("due_at", desc=False, nullsfirst=False)
                .execute()
            ).data or []

        logger.debug(f"Personal timeline for {user.id}: {len(tasks)} tasks")
        return {
            "tasks": [timeline_task(task, task["projects"], assignees) for task in tasks],
            "milestones": milestones,
        }

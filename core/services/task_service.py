# =============================================================================
# core/services/task_service.py - Task Business Logic
# =============================================================================
# Handles creating, listing and completing tasks, self-assignment and
# comments. A comment that mentions teammates by "@email" leaves each of
# them a notification.
#
# Completing a task counts as activity for the caller's streak.
# =============================================================================

import logging
import re
from collections.abc import Mapping
from datetime import datetime, time, timedelta
from typing import Any
from uuid import UUID

from supabase import Client

from app.auth.models import AuthUser
from app.exceptions import TaskNotFoundError
from core.models.task import CommentCreate, TaskCreate, TaskFilter, TaskStatus
from core.models.wellness import ActivityKind
from core.services.activity_service import ActivityService
from core.services.base import parse_form, require_user
from lib.utils import normalize_uuid, parse_timestamp, utc_now

logger = logging.getLogger(__name__)

TASK_PAGE_SIZE = 50

MENTION_RE = re.compile(r"@([\w.\-+]+@[\w.\-]+\.\w+)")


def extract_mentions(body: str) -> list[str]:
    """
    Email addresses mentioned as "@email" in a comment, in order, once each.

    Example:
        extract_mentions("ping @ada@example.edu and @ada@example.edu")
        # ["ada@example.edu"]
    """
    return list(dict.fromkeys(MENTION_RE.findall(body)))


def day_window(moment: datetime, days: int) -> tuple[datetime, datetime]:
    """[midnight of `moment`'s day, that midnight + `days`), in moment's timezone."""
    start = datetime.combine(moment.date(), time.min, tzinfo=moment.tzinfo)
    return start, start + timedelta(days=days)


class TaskService:
    """
    Service for task operations.

    Provides a clean interface between API routes and database.
    """

    @staticmethod
    def create_task(
        client: Client,
        user: AuthUser | None,
        form: Mapping[str, Any] | TaskCreate,
    ) -> str:
        """
        Create a task, recorded as created by the caller.

        Returns:
            The new task's id

        Raises:
            ValidationFailedError: If project_id or title is invalid
            NotAuthenticatedError: If there is no caller
            APIError: If the insert fails
        """
        data = parse_form(TaskCreate, form)
        user = require_user(user)

        row = data.model_dump(mode="json", exclude_none=True)
        row["created_by"] = str(user.id)

        try:
            response = client.table("tasks").insert(row).execute()
        except Exception as e:
            logger.error(f"Failed to create task in project {data.project_id}: {e}")
            raise

        if not response.data:
            raise RuntimeError("Task insert returned no data")
        task_id = str(response.data[0]["id"])

        logger.info(f"Created task: {task_id} in project {data.project_id}")
        return task_id

    @staticmethod
    def list_tasks(
        client: Client,
        user: AuthUser | None,
        project_id: str | UUID,
        task_filter: TaskFilter | None = None,
        milestone_id: str | UUID | None = None,
        page: int = 1,
        now: datetime | None = None,
    ) -> list[dict[str, Any]]:
        """
        One page of a project's tasks, earliest due first, undated first.

        Filters:
            me: tasks the caller created
            week: due from today (UTC) through the next 7 days
            milestone: due on the milestone's day; ignored without a
                milestone_id or when the milestone has no due date

        Raises:
            NotAuthenticatedError: If there is no caller
        """
        user = require_user(user)
        page = max(page, 1)
        offset = (page - 1) * TASK_PAGE_SIZE

        query = (
            client.table("tasks")
            .select("id, title, status, due_at, description, created_by")
            .eq("project_id", normalize_uuid(project_id))
            .order("due_at", desc=False, nullsfirst=True)
        )

        window = None
        if task_filter == TaskFilter.ME:
            query = query.eq("created_by", str(user.id))
        elif task_filter == TaskFilter.WEEK:
            window = day_window(now or utc_now(), 7)
        elif task_filter == TaskFilter.MILESTONE and milestone_id:
            milestone = (
                client.table("milestones")
                .select("due_at")
                .eq("id", normalize_uuid(milestone_id))
                .maybe_single()
                .execute()
            )
            due_at = parse_timestamp(milestone.data.get("due_at")) if milestone and milestone.data else None
            if due_at is not None:
                window = day_window(due_at, 1)

        if window is not None:
            start, end = window
            query = query.gte("due_at", start.isoformat()).lt("due_at", end.isoformat())

        response = query.range(offset, offset + TASK_PAGE_SIZE - 1).execute()
        return response.data or []

    @staticmethod
    def complete_task(
        client: Client,
        user: AuthUser | None,
        task_id: str | UUID,
    ) -> None:
        """
        Mark a task done and count it toward the caller's streak.

        Raises:
            NotAuthenticatedError: If there is no caller
            TaskNotFoundError: If no visible task has this id
        """
        user = require_user(user)
        task_id_str = normalize_uuid(task_id)

        try:
            response = (
                client.table("tasks")
                .update({"status": TaskStatus.DONE.value, "updated_at": utc_now().isoformat()})
                .eq("id", task_id_str)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to complete task {task_id_str}: {e}")
            raise

        if not response.data:
            raise TaskNotFoundError(task_id_str)
        project_id = response.data[0].get("project_id")

        team_id = None
        if project_id:
            project = (
                client.table("projects")
                .select("team_id")
                .eq("id", project_id)
                .maybe_single()
                .execute()
            )
            if project and project.data:
                team_id = project.data.get("team_id")

        ActivityService.record_event(
            client,
            user,
            ActivityKind.TASK_COMPLETED,
            team_id=team_id,
            payload={"taskId": task_id_str},
        )
        logger.info(f"User {user.id} completed task {task_id_str}")

    @staticmethod
    def assign_self(
        client: Client,
        user: AuthUser | None,
        task_id: str | UUID,
    ) -> None:
        """Assign the caller to a task; a no-op if already assigned."""
        user = require_user(user)

        client.table("task_assignees").upsert(
            {"task_id": normalize_uuid(task_id), "user_id": str(user.id)},
            on_conflict="task_id,user_id",
            ignore_duplicates=True,
        ).execute()

        logger.info(f"User {user.id} assigned to task {task_id}")

    @staticmethod
    def unassign_self(
        client: Client,
        user: AuthUser | None,
        task_id: str | UUID,
    ) -> None:
        """Remove the caller from a task's assignees."""
        user = require_user(user)

        (
            client.table("task_assignees")
            .delete()
            .eq("task_id", normalize_uuid(task_id))
            .eq("user_id", str(user.id))
            .execute()
        )

        logger.info(f"User {user.id} unassigned from task {task_id}")

    @staticmethod
    def add_comment(
        client: Client,
        user: AuthUser | None,
        task_id: str | UUID,
        form: Mapping[str, Any] | CommentCreate,
    ) -> list[str]:
        """
        Comment on a task and notify the teammates it mentions.

        Mentions are "@" followed by an email address; only addresses that
        belong to known users are notified.

        Returns:
            Ids of the users who were notified

        Raises:
            ValidationFailedError: If the body is empty
            NotAuthenticatedError: If there is no caller
            APIError: If the comment or notification insert fails
        """
        data = parse_form(CommentCreate, form)
        user = require_user(user)
        task_id_str = normalize_uuid(task_id)

        client.table("task_comments").insert({
            "task_id": task_id_str,
            "user_id": str(user.id),
            "body": data.body,
        }).execute()

        mentions = extract_mentions(data.body)
        if not mentions:
            return []

        users = (
            client.table("users")
            .select("id, email")
            .in_("email", mentions)
            .execute()
        )
        recipients = [row["id"] for row in users.data or []]
        if not recipients:
            return []

        client.table("notifications").insert([
            {
                "user_id": recipient,
                "kind": "mention",
                "payload_json": {"taskId": task_id_str, "body": data.body},
            }
            for recipient in recipients
        ]).execute()

        logger.info(f"Comment on task {task_id_str} notified {len(recipients)} users")
        return recipients

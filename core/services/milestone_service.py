# =============================================================================
# core/services/milestone_service.py - Milestone Business Logic
# =============================================================================
# Reading milestones is open to any team member (RLS decides visibility).
# Creating, editing and deleting them is reserved for team admins.
# =============================================================================

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from supabase import Client

from app.auth.models import AuthUser
from app.exceptions import (
    MilestoneHasTasksError,
    MilestoneNotFoundError,
    ProjectNotFoundError,
)
from core.models.milestone import MilestoneCreate, MilestoneUpdate
from core.models.task import TaskStatus
from core.services.base import parse_form, require_user
from core.services.team_service import TeamService
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)


def milestone_progress(total_tasks: int, completed_tasks: int) -> int:
    """Completed share as a whole percentage (halves round up); 0 with no tasks."""
    if total_tasks <= 0:
        return 0
    return (200 * completed_tasks + total_tasks) // (2 * total_tasks)


class MilestoneService:
    """
    Service for milestone operations.

    Provides a clean interface between API routes and database.
    """

    @staticmethod
    def _team_of_milestone(client: Client, milestone_id: str) -> str:
        response = (
            client.table("milestones")
            .select("project_id, projects!inner(team_id)")
            .eq("id", milestone_id)
            .maybe_single()
            .execute()
        )

        if not response or not response.data:
            raise MilestoneNotFoundError(milestone_id)

        return response.data["projects"]["team_id"]

    @staticmethod
    def _count_tasks(client: Client, milestone_id: str, status: str | None = None) -> int:
        query = (
            client.table("tasks")
            .select("id", count="exact", head=True)
            .eq("milestone_id", milestone_id)
        )
        if status is not None:
            query = query.eq("status", status)
        return query.execute().count or 0

    @staticmethod
    def list_milestones(
        client: Client,
        user: AuthUser | None,
        project_id: str | UUID,
    ) -> list[dict[str, Any]]:
        """
        List a project's milestones, earliest due first, with task stats.

        Each row gains `total_tasks`, `completed_tasks` and `progress`
        (see milestone_progress).

        Raises:
            NotAuthenticatedError: If there is no caller
        """
        require_user(user)

        response = (
            client.table("milestones")
            .select("id, title, due_at, status")
            .eq("project_id", normalize_uuid(project_id))
            .order("due_at", desc=False)
            .execute()
        )

        milestones = []
        for row in response.data or []:
            total = MilestoneService._count_tasks(client, row["id"])
            completed = MilestoneService._count_tasks(client, row["id"], TaskStatus.DONE.value)
            milestones.append({
                **row,
                "total_tasks": total,
                "completed_tasks": completed,
                "progress": milestone_progress(total, completed),
            })

        return milestones

    @staticmethod
    def create_milestone(
        client: Client,
        user: AuthUser | None,
        form: Mapping[str, Any] | MilestoneCreate,
    ) -> None:
        """
        Add a milestone to a project (admins only).

        Raises:
            ValidationFailedError: If title or project_id is invalid
            NotAuthenticatedError: If there is no caller
            ProjectNotFoundError: If the project doesn't exist
            NotTeamAdminError: If the caller isn't an admin of the team
        """
        data = parse_form(MilestoneCreate, form)
        user = require_user(user)
        project_id = str(data.project_id)

        project = (
            client.table("projects")
            .select("team_id")
            .eq("id", project_id)
            .maybe_single()
            .execute()
        )
        if not project or not project.data:
            raise ProjectNotFoundError(project_id)

        TeamService.require_admin(
            client, user, project.data["team_id"], "create milestones"
        )

        try:
            client.table("milestones").insert({
                "project_id": project_id,
                "title": data.title,
                "due_at": data.due_at.isoformat() if data.due_at else None,
            }).execute()
        except Exception as e:
            logger.error(f"Failed to create milestone in project {project_id}: {e}")
            raise

        logger.info(f"Created milestone '{data.title}' in project {project_id}")

    @staticmethod
    def update_milestone(
        client: Client,
        user: AuthUser | None,
        milestone_id: str | UUID,
        updates: Mapping[str, Any] | MilestoneUpdate,
    ) -> None:
        """
        Update a milestone (admins only).

        Only the fields present in `updates` are written.

        Raises:
            ValidationFailedError: If a field is invalid
            NotAuthenticatedError: If there is no caller
            MilestoneNotFoundError: If the milestone doesn't exist
            NotTeamAdminError: If the caller isn't an admin of the team
        """
        data = parse_form(MilestoneUpdate, updates)
        user = require_user(user)
        milestone_id_str = normalize_uuid(milestone_id)

        team_id = MilestoneService._team_of_milestone(client, milestone_id_str)
        TeamService.require_admin(client, user, team_id, "update milestones")

        update_data: dict[str, Any] = {}
        if "title" in data.model_fields_set and data.title is not None:
            update_data["title"] = data.title
        if "due_at" in data.model_fields_set:
            update_data["due_at"] = data.due_at.isoformat() if data.due_at else None
        if "status" in data.model_fields_set and data.status is not None:
            update_data["status"] = data.status.value

        if not update_data:
            return  # Nothing to update

        try:
            client.table("milestones").update(update_data).eq("id", milestone_id_str).execute()
        except Exception as e:
            logger.error(f"Failed to update milestone {milestone_id_str}: {e}")
            raise

        logger.info(f"Updated milestone: {milestone_id_str}")

    @staticmethod
    def delete_milestone(
        client: Client,
        user: AuthUser | None,
        milestone_id: str | UUID,
    ) -> None:
        """
        Delete a milestone (admins only).

        Refused while any task still references the milestone.

        Raises:
            NotAuthenticatedError: If there is no caller
            MilestoneNotFoundError: If the milestone doesn't exist
            NotTeamAdminError: If the caller isn't an admin of the team
            MilestoneHasTasksError: If tasks still reference it
        """
        user = require_user(user)
        milestone_id_str = normalize_uuid(milestone_id)

        team_id = MilestoneService._team_of_milestone(client, milestone_id_str)
        TeamService.require_admin(client, user, team_id, "delete milestones")

        task_count = MilestoneService._count_tasks(client, milestone_id_str)
        if task_count > 0:
            raise MilestoneHasTasksError(milestone_id_str, task_count)

        try:
            client.table("milestones").delete().eq("id", milestone_id_str).execute()
        except Exception as e:
            logger.error(f"Failed to delete milestone {milestone_id_str}: {e}")
            raise

        logger.info(f"Deleted milestone: {milestone_id_str}")

# =============================================================================
# core/services/project_service.py - Project Business Logic
# =============================================================================
# Creates projects from a template and seeds their milestone schedule.
#
# The schedule is computed once, at creation time:
#   due_at = semester_start (UTC midnight) + (week - 1) * 7 days
# and is never recomputed afterwards. The project insert and the milestone
# batch insert are separate requests; if the second fails the project row
# stays without milestones.
# =============================================================================

import logging
import re
from collections.abc import Sequence
from datetime import date, datetime, time, timedelta, timezone
from typing import Any
from uuid import UUID

from supabase import Client

from app.auth.models import AuthUser
from app.exceptions import ValidationFailedError
from core.services.base import require_user
from core.templates import SEMESTER_16_KEY, TemplateEntry, get_template
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_start_date(value: str | date) -> date:
    """
    Parse a semester start date in ISO format (YYYY-MM-DD).

    Raises:
        ValidationFailedError: If the value isn't a valid date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    error = ValidationFailedError(
        "semester_start_date",
        f"Invalid semester start date: {value!r} (expected YYYY-MM-DD)",
    )
    # fromisoformat also takes "20250113" and "2025-W03-1"
    if not ISO_DATE_RE.fullmatch(text):
        raise error
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise error from e


def compute_due_at(start: date, week: int) -> datetime:
    """Due timestamp for a template week: UTC midnight of start + (week-1) weeks."""
    start_utc = datetime.combine(start, time.min, tzinfo=timezone.utc)
    return start_utc + timedelta(days=(week - 1) * 7)


def compute_milestone_schedule(
    project_id: str,
    start: date,
    template: Sequence[TemplateEntry],
) -> list[dict[str, Any]]:
    """
    Expand a template into milestone rows, preserving template order.

    Example:
        compute_milestone_schedule("p1", date(2025, 1, 13), [TemplateEntry(3, "Proposal")])
        # [{"project_id": "p1", "title": "Proposal", "due_at": "2025-01-27T00:00:00+00:00"}]
    """
    return [
        {
            "project_id": project_id,
            "title": entry.title,
            "due_at": compute_due_at(start, entry.week).isoformat(),
        }
        for entry in template
    ]


class ProjectService:
    """
    Service for project creation.

    Provides a clean interface between API routes and database.
    """

    @staticmethod
    def create_project_from_template(
        client: Client,
        user: AuthUser | None,
        team_id: str | UUID,
        name: str,
        semester_start_date: str | date,
        template: Sequence[TemplateEntry] | None = None,
        template_key: str = SEMESTER_16_KEY,
    ) -> str:
        """
        Create a project and seed its milestones from a template.

        Args:
            client: Request-scoped Supabase client
            user: The caller (None if anonymous)
            team_id: Team that will own the project
            name: Project name
            semester_start_date: First day of the semester (YYYY-MM-DD)
            template: Entries to expand; defaults to the template for `template_key`
            template_key: Key stored on the project row

        Returns:
            The new project's id

        Raises:
            NotAuthenticatedError: If there is no caller
            ValidationFailedError: If the start date can't be parsed
            APIError: If either insert fails
        """
        user = require_user(user)
        start = parse_start_date(semester_start_date)
        entries = get_template(template_key) if template is None else template

        try:
            response = (
                client.table("projects")
                .insert({
                    "team_id": normalize_uuid(team_id),
                    "name": name,
                    "template_key": template_key,
                })
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to create project for team {team_id}: {e}")
            raise

        if not response.data:
            raise RuntimeError("Project insert returned no data")
        project_id = str(response.data[0]["id"])

        milestones = compute_milestone_schedule(project_id, start, entries)
        if milestones:
            try:
                client.table("milestones").insert(milestones).execute()
            except Exception as e:
                logger.error(f"Failed to seed milestones for project {project_id}: {e}")
                raise

        logger.info(
            f"Created project: {project_id} from {template_key} "
            f"with {len(milestones)} milestones for user: {user.id}"
        )
        return project_id

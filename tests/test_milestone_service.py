# =============================================================================
# tests/test_milestone_service.py - Milestone Service Tests
# =============================================================================
# Tests use mocked Supabase responses to avoid database calls.
# =============================================================================

from unittest.mock import MagicMock

import pytest

from app.exceptions import (
    MilestoneHasTasksError,
    MilestoneNotFoundError,
    NotAuthenticatedError,
    NotTeamAdminError,
    ProjectNotFoundError,
    ValidationFailedError,
)
from core.models.milestone import MilestoneUpdate
from core.services.milestone_service import MilestoneService, milestone_progress

PROJECT_ID = "3f8e2a10-5b6c-4d7e-8f90-a1b2c3d4e5f6"
MILESTONE_ID = "7c1d2e3f-4a5b-6c7d-8e9f-0a1b2c3d4e5f"


@pytest.fixture
def admin(mock_client):
    mock_client.table("memberships").execute.return_value.data = {"role": "admin"}


@pytest.fixture
def member(mock_client):
    mock_client.table("memberships").execute.return_value.data = {"role": "member"}


@pytest.fixture
def existing_milestone(mock_client):
    milestones = mock_client.table("milestones")
    milestones.execute.return_value.data = {
        "project_id": PROJECT_ID,
        "projects": {"team_id": "team-1"},
    }
    return milestones


class TestListMilestones:

    def test_orders_by_due_date(self, mock_client, auth_user):
        milestones = mock_client.table("milestones")
        milestones.execute.return_value.data = [
            {"id": "m1", "title": "Kickoff", "due_at": "2025-01-13T00:00:00+00:00", "status": "open"},
        ]

        rows = MilestoneService.list_milestones(mock_client, auth_user, PROJECT_ID)

        assert rows[0]["title"] == "Kickoff"
        milestones.eq.assert_called_once_with("project_id", PROJECT_ID)
        milestones.order.assert_called_once_with("due_at", desc=False)

    def test_adds_task_stats(self, mock_client, auth_user):
        mock_client.table("milestones").execute.return_value.data = [
            {"id": "m1", "title": "Kickoff", "due_at": None, "status": "open"},
            {"id": "m2", "title": "Demo", "due_at": None, "status": "open"},
        ]
        tasks = mock_client.table("tasks")
        # total, then done, per milestone
        tasks.execute.side_effect = [
            MagicMock(count=3), MagicMock(count=1),
            MagicMock(count=0), MagicMock(count=0),
        ]

        rows = MilestoneService.list_milestones(mock_client, auth_user, PROJECT_ID)

        assert [(r["total_tasks"], r["completed_tasks"], r["progress"]) for r in rows] == [
            (3, 1, 33),
            (0, 0, 0),
        ]
        tasks.eq.assert_any_call("milestone_id", "m1")
        tasks.eq.assert_any_call("status", "done")
        tasks.select.assert_any_call("id", count="exact", head=True)

    def test_missing_count_reads_as_zero(self, mock_client, auth_user):
        mock_client.table("milestones").execute.return_value.data = [
            {"id": "m1", "title": "Kickoff", "due_at": None, "status": "open"},
        ]
        mock_client.table("tasks").execute.return_value.count = None

        rows = MilestoneService.list_milestones(mock_client, auth_user, PROJECT_ID)

        assert rows[0]["progress"] == 0

    def test_requires_authentication(self, mock_client):
        with pytest.raises(NotAuthenticatedError):
            MilestoneService.list_milestones(mock_client, None, PROJECT_ID)


class TestMilestoneProgress:

    @pytest.mark.parametrize("total, completed, expected", [
        (0, 0, 0),
        (4, 0, 0),
        (4, 4, 100),
        (3, 1, 33),
        (3, 2, 67),
        (8, 1, 13),
        (200, 1, 1),
    ])
    def test_rounded_percentage(self, total, completed, expected):
        assert milestone_progress(total, completed) == expected


class TestCreateMilestone:

    def test_admin_can_create(self, mock_client, auth_user, admin):
        mock_client.table("projects").execute.return_value.data = {"team_id": "team-1"}

        MilestoneService.create_milestone(mock_client, auth_user, {
            "project_id": PROJECT_ID,
            "title": "Demo day",
            "due_at": "2025-04-30T00:00:00Z",
        })

        row = mock_client.tables["milestones"].insert.call_args.args[0]
        assert row["project_id"] == PROJECT_ID
        assert row["title"] == "Demo day"
        assert row["due_at"].startswith("2025-04-30T00:00:00")

    def test_due_date_is_optional(self, mock_client, auth_user, admin):
        mock_client.table("projects").execute.return_value.data = {"team_id": "team-1"}

        MilestoneService.create_milestone(mock_client, auth_user, {
            "project_id": PROJECT_ID, "title": "Stretch goal",
        })

        row = mock_client.tables["milestones"].insert.call_args.args[0]
        assert row["due_at"] is None

    def test_member_is_refused(self, mock_client, auth_user, member):
        mock_client.table("projects").execute.return_value.data = {"team_id": "team-1"}

        with pytest.raises(NotTeamAdminError):
            MilestoneService.create_milestone(mock_client, auth_user, {
                "project_id": PROJECT_ID, "title": "Demo day",
            })

        assert "milestones" not in mock_client.tables

    def test_unknown_project(self, mock_client, auth_user):
        mock_client.table("projects").execute.return_value.data = None

        with pytest.raises(ProjectNotFoundError):
            MilestoneService.create_milestone(mock_client, auth_user, {
                "project_id": PROJECT_ID, "title": "Demo day",
            })

    @pytest.mark.parametrize("form", [
        {"project_id": PROJECT_ID, "title": ""},
        {"project_id": PROJECT_ID, "title": "x" * 201},
        {"project_id": "not-a-uuid", "title": "Demo day"},
    ])
    def test_invalid_input(self, mock_client, auth_user, form):
        with pytest.raises(ValidationFailedError):
            MilestoneService.create_milestone(mock_client, auth_user, form)

        mock_client.table.assert_not_called()


class TestUpdateMilestone:

    def test_writes_only_fields_that_were_sent(self, mock_client, auth_user, admin, existing_milestone):
        MilestoneService.update_milestone(mock_client, auth_user, MILESTONE_ID, {"status": "done"})

        existing_milestone.update.assert_called_once_with({"status": "done"})

    def test_null_due_date_clears_it(self, mock_client, auth_user, admin, existing_milestone):
        MilestoneService.update_milestone(
            mock_client, auth_user, MILESTONE_ID, MilestoneUpdate(due_at=None)
        )

        existing_milestone.update.assert_called_once_with({"due_at": None})

    def test_empty_update_is_a_no_op(self, mock_client, auth_user, admin, existing_milestone):
        MilestoneService.update_milestone(mock_client, auth_user, MILESTONE_ID, {})

        existing_milestone.update.assert_not_called()

    def test_bad_status(self, mock_client, auth_user):
        with pytest.raises(ValidationFailedError):
            MilestoneService.update_milestone(mock_client, auth_user, MILESTONE_ID, {"status": "late"})

    def test_unknown_milestone(self, mock_client, auth_user):
        mock_client.table("milestones").execute.return_value.data = None

        with pytest.raises(MilestoneNotFoundError):
            MilestoneService.update_milestone(mock_client, auth_user, MILESTONE_ID, {"title": "X"})

    def test_member_is_refused(self, mock_client, auth_user, member, existing_milestone):
        with pytest.raises(NotTeamAdminError):
            MilestoneService.update_milestone(mock_client, auth_user, MILESTONE_ID, {"title": "X"})

        existing_milestone.update.assert_not_called()


class TestDeleteMilestone:

    def test_admin_deletes_milestone_without_tasks(self, mock_client, auth_user, admin, existing_milestone):
        mock_client.table("tasks").execute.return_value.count = 0

        MilestoneService.delete_milestone(mock_client, auth_user, MILESTONE_ID)

        existing_milestone.delete.assert_called_once_with()

    def test_refuses_when_tasks_reference_it(self, mock_client, auth_user, admin, existing_milestone):
        mock_client.table("tasks").execute.return_value.count = 3

        with pytest.raises(MilestoneHasTasksError) as exc_info:
            MilestoneService.delete_milestone(mock_client, auth_user, MILESTONE_ID)

        assert exc_info.value.details["task_count"] == 3
        existing_milestone.delete.assert_not_called()

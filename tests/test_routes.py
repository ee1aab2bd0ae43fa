# =============================================================================
# tests/test_routes.py - API Endpoint Tests
# =============================================================================
# Exercises the HTTP layer with FastAPI's TestClient. The Supabase client
# and the caller are replaced through dependency overrides.
# =============================================================================

import base64
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from app.auth import get_current_user, get_current_user_optional
from app.config import settings
from app.dependencies import get_supabase_client
from app.main import app
from lib.supabase_client import SupabaseClient

TEAM_ID = "9b2f7c1e-0d4a-4c55-9a7e-3f1f2b8c6d01"
PROJECT_ID = "3f8e2a10-5b6c-4d7e-8f90-a1b2c3d4e5f6"
MILESTONE_ID = "7c1d2e3f-4a5b-6c7d-8e9f-0a1b2c3d4e5f"
TASK_ID = "5a6b7c8d-9e0f-4a1b-8c2d-3e4f5a6b7c8d"
MEMBER_ID = "66666666-7777-8888-9999-000000000000"


def as_admin(mock_client):
    """Make the caller an admin of TEAM_ID for the admin-only routes."""
    mock_client.table("memberships").execute.return_value.data = {"role": "admin"}


@pytest.fixture
def api(mock_client, auth_user):
    app.dependency_overrides[get_supabase_client] = lambda: mock_client
    app.dependency_overrides[get_current_user_optional] = lambda: auth_user
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_api(mock_client):
    app.dependency_overrides[get_supabase_client] = lambda: mock_client
    app.dependency_overrides[get_current_user_optional] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestJoinRoute:

    @pytest.mark.parametrize("query", ["", "?code=", "?code=%20%20%20"])
    def test_blank_code_is_rejected_before_backend(self, api, mock_client, query):
        response = api.get(f"/api/v1/join{query}")

        assert response.status_code == 400
        assert response.json()["code"] == "MISSING_INVITE_CODE"
        mock_client.rpc.assert_not_called()

    def test_code_is_trimmed_and_joined(self, api, mock_client):
        response = api.get("/api/v1/join?code=%20k3x9a0qz%20")

        assert response.status_code == 200
        assert response.json() == {"joined": True, "redirect": "/dashboard"}
        mock_client.rpc.assert_called_once_with("join_team_by_token", {"_token": "k3x9a0qz"})

    def test_backend_error_is_passed_through(self, api, mock_client):
        mock_client.rpc.return_value.execute.side_effect = APIError({
            "message": "Invalid or expired invite code",
            "code": "P0001",
            "hint": None,
            "details": None,
        })

        response = api.get("/api/v1/join?code=nope")

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid or expired invite code", "code": "P0001"}

    def test_anonymous_caller_must_log_in(self, anonymous_api, mock_client):
        response = anonymous_api.get("/api/v1/join?code=k3x9a0qz")

        assert response.status_code == 401
        body = response.json()
        assert body["code"] == "NOT_AUTHENTICATED"
        assert "https://board.example.com/join?code=k3x9a0qz" in body["suggestion"]
        mock_client.rpc.assert_not_called()

    def test_anonymous_caller_with_blank_code_gets_400(self, anonymous_api):
        response = anonymous_api.get("/api/v1/join?code=")

        assert response.status_code == 400


class TestTeamRoutes:

    def test_create_team(self, api, mock_client):
        response = api.post("/api/v1/teams", json={"name": "Robotics"})

        assert response.status_code == 201
        body = response.json()
        assert body["redirect"] == f"/teams/{body['team_id']}"
        mock_client.tables["teams"].insert.assert_called_once()

    def test_create_team_short_name(self, api, mock_client):
        response = api.post("/api/v1/teams", json={"name": "R"})

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["detail"].startswith("name: ")
        assert body["details"]["field"] == "name"
        assert body["details"]["errors"][0]["field"] == "name"
        assert body["suggestion"]
        mock_client.table.assert_not_called()

    def test_missing_body_names_body(self, api):
        response = api.post("/api/v1/teams")

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_list_teams_with_unknown_role(self, api, mock_client, team_row):
        mock_client.table("memberships").execute.return_value.data = [
            {"role": "owner", "teams": team_row},
        ]

        response = api.get("/api/v1/teams")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["teams"][0]["role"] is None

    def test_team_detail_with_malformed_id(self, api, mock_client):
        response = api.get("/api/v1/teams/not-a-uuid")

        assert response.status_code == 404
        assert response.json()["code"] == "TEAM_NOT_FOUND"
        mock_client.table.assert_not_called()

    def test_unknown_team(self, api, mock_client):
        mock_client.table("teams").execute.return_value = None

        response = api.get(f"/api/v1/teams/{TEAM_ID}")

        assert response.status_code == 404

    def test_team_detail_has_invite_url(self, api, mock_client, team_row):
        mock_client.table("teams").execute.return_value.data = team_row

        response = api.get(f"/api/v1/teams/{team_row['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["invite_url"] == "https://board.example.com/join?code=k3x9a0qz"
        assert body["new_project_url"] == f"/teams/{team_row['id']}/new-project"

    def test_dashboard_lists_teams(self, api, mock_client, team_row):
        mock_client.table("memberships").execute.return_value.data = [
            {"role": "admin", "teams": team_row},
        ]

        response = api.get("/api/v1/dashboard")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Ada Lovelace"
        assert body["teams"][0]["invite_code"] == "k3x9a0qz"
        assert body["teams"][0]["role"] == "admin"


class TestProjectRoutes:

    @pytest.mark.parametrize("payload", [
        {"name": "", "start": "2025-01-13"},
        {"name": "Solar Car", "start": "  "},
        {},
    ])
    def test_missing_fields(self, api, mock_client, payload):
        response = api.post("/api/v1/teams/team-1/projects", json=payload)

        assert response.status_code == 422
        assert response.json()["detail"] == "Missing fields"
        mock_client.table.assert_not_called()

    def test_create_project(self, api, mock_client):
        mock_client.table("projects").execute.return_value.data = [{"id": "proj-1"}]

        response = api.post(
            f"/api/v1/teams/{TEAM_ID}/projects",
            json={"name": "Solar Car", "start": "2025-01-13"},
        )

        assert response.status_code == 201
        assert response.json()["redirect"] == "/projects/proj-1/tasks"
        assert len(mock_client.tables["milestones"].insert.call_args.args[0]) == 16

    def test_malformed_team_id(self, api, mock_client):
        response = api.post(
            "/api/v1/teams/team-1/projects",
            json={"name": "Solar Car", "start": "2025-01-13"},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "TEAM_NOT_FOUND"
        mock_client.table.assert_not_called()

    def test_week_date_is_rejected(self, api, mock_client):
        response = api.post(
            f"/api/v1/teams/{TEAM_ID}/projects",
            json={"name": "Solar Car", "start": "2025-W03-1"},
        )

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"
        mock_client.table.assert_not_called()


class TestMilestoneRoutes:

    @pytest.fixture
    def milestone_row(self, mock_client):
        mock_client.table("milestones").execute.return_value.data = {
            "project_id": PROJECT_ID,
            "projects": {"team_id": TEAM_ID},
        }
        as_admin(mock_client)

    def test_list_with_progress(self, api, mock_client):
        mock_client.table("milestones").execute.return_value.data = [
            {"id": MILESTONE_ID, "title": "Kickoff", "due_at": "2025-01-13T00:00:00+00:00", "status": "open"},
        ]
        mock_client.table("tasks").execute.side_effect = [
            MagicMock(count=4),
            MagicMock(count=1),
        ]

        response = api.get(f"/api/v1/projects/{PROJECT_ID}/milestones")

        assert response.status_code == 200
        milestone = response.json()["milestones"][0]
        assert milestone["total_tasks"] == 4
        assert milestone["completed_tasks"] == 1
        assert milestone["progress"] == 25

    def test_create_as_admin(self, api, mock_client):
        mock_client.table("projects").execute.return_value.data = {"team_id": TEAM_ID}
        as_admin(mock_client)

        response = api.post(
            f"/api/v1/projects/{PROJECT_ID}/milestones",
            json={"title": "Demo day", "due_at": "2025-04-30T00:00:00Z"},
        )

        assert response.status_code == 201
        row = mock_client.tables["milestones"].insert.call_args.args[0]
        assert row["title"] == "Demo day"
        assert row["project_id"] == PROJECT_ID

    def test_create_as_member_is_forbidden(self, api, mock_client):
        mock_client.table("projects").execute.return_value.data = {"team_id": TEAM_ID}
        mock_client.table("memberships").execute.return_value.data = {"role": "member"}

        response = api.post(f"/api/v1/projects/{PROJECT_ID}/milestones", json={"title": "Demo day"})

        assert response.status_code == 403
        assert response.json()["code"] == "NOT_TEAM_ADMIN"

    def test_null_due_date_clears_it(self, api, mock_client, milestone_row):
        response = api.patch(f"/api/v1/milestones/{MILESTONE_ID}", json={"due_at": None})

        assert response.status_code == 200
        mock_client.tables["milestones"].update.assert_called_once_with({"due_at": None})

    def test_omitted_due_date_is_left_alone(self, api, mock_client, milestone_row):
        response = api.patch(f"/api/v1/milestones/{MILESTONE_ID}", json={"title": "Demo"})

        assert response.status_code == 200
        mock_client.tables["milestones"].update.assert_called_once_with({"title": "Demo"})

    def test_delete_with_tasks_conflicts(self, api, mock_client, milestone_row):
        mock_client.table("tasks").execute.return_value.count = 2

        response = api.delete(f"/api/v1/milestones/{MILESTONE_ID}")

        assert response.status_code == 409
        assert response.json()["code"] == "MILESTONE_HAS_TASKS"
        mock_client.tables["milestones"].delete.assert_not_called()

    def test_delete_empty_milestone(self, api, mock_client, milestone_row):
        response = api.delete(f"/api/v1/milestones/{MILESTONE_ID}")

        assert response.status_code == 200
        mock_client.tables["milestones"].delete.assert_called_once_with()


class TestTaskRoutes:

    def test_create_task(self, api, mock_client):
        mock_client.table("tasks").execute.return_value.data = [{"id": TASK_ID}]

        response = api.post(
            f"/api/v1/projects/{PROJECT_ID}/tasks",
            json={"title": "Draft proposal", "size": 2},
        )

        assert response.status_code == 201
        assert response.json()["task_id"] == TASK_ID
        assert response.json()["redirect"] == f"/projects/{PROJECT_ID}/tasks"
        row = mock_client.tables["tasks"].insert.call_args.args[0]
        assert row["project_id"] == PROJECT_ID
        assert row["size"] == 2

    def test_list_tasks_page(self, api, mock_client):
        mock_client.table("tasks").execute.return_value.data = [
            {"id": TASK_ID, "title": "Draft proposal", "status": "open", "due_at": None},
        ]

        response = api.get(f"/api/v1/projects/{PROJECT_ID}/tasks?filter=me&page=2")

        assert response.status_code == 200
        body = response.json()
        assert body["page"] == 2
        assert body["page_size"] == 50
        assert body["tasks"][0]["title"] == "Draft proposal"
        mock_client.tables["tasks"].range.assert_called_once_with(50, 99)

    @pytest.mark.parametrize("query", ["?filter=everyone", "?page=0"])
    def test_bad_list_query(self, api, mock_client, query):
        response = api.get(f"/api/v1/projects/{PROJECT_ID}/tasks{query}")

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"
        mock_client.table.assert_not_called()

    def test_complete_unknown_task(self, api, mock_client):
        response = api.post(f"/api/v1/tasks/{TASK_ID}/complete")

        assert response.status_code == 404
        assert response.json()["code"] == "TASK_NOT_FOUND"

    def test_complete_task(self, api, mock_client):
        mock_client.table("tasks").execute.return_value.data = [{"id": TASK_ID, "project_id": PROJECT_ID}]

        response = api.post(f"/api/v1/tasks/{TASK_ID}/complete")

        assert response.status_code == 200
        assert response.json()["status"] == "done"
        mock_client.tables["events"].insert.assert_called_once()

    def test_assign_and_unassign(self, api, mock_client):
        assert api.put(f"/api/v1/tasks/{TASK_ID}/assignees/me").json()["assigned"] is True
        assert api.delete(f"/api/v1/tasks/{TASK_ID}/assignees/me").json()["assigned"] is False

        assignees = mock_client.tables["task_assignees"]
        assignees.upsert.assert_called_once()
        assignees.delete.assert_called_once_with()

    def test_comment_reports_notified_count(self, api, mock_client):
        mock_client.table("users").execute.return_value.data = [{"id": MEMBER_ID, "email": "grace@navy.mil"}]

        response = api.post(
            f"/api/v1/tasks/{TASK_ID}/comments",
            json={"body": "@grace@navy.mil can you review?"},
        )

        assert response.status_code == 201
        assert response.json()["notified"] == 1

    def test_anonymous_task_create(self, anonymous_api):
        response = anonymous_api.post(f"/api/v1/projects/{PROJECT_ID}/tasks", json={"title": "x"})

        assert response.status_code == 401


class TestTimelineRoutes:

    def test_project_timeline(self, api, mock_client):
        mock_client.table("projects").execute.return_value.data = {
            "id": PROJECT_ID, "name": "Solar Car", "team_id": TEAM_ID,
        }

        response = api.get(f"/api/v1/projects/{PROJECT_ID}/timeline")

        assert response.status_code == 200
        assert response.json()["project_name"] == "Solar Car"

    def test_unknown_project(self, api, mock_client):
        mock_client.table("projects").execute.return_value = None

        response = api.get(f"/api/v1/projects/{PROJECT_ID}/timeline")

        assert response.status_code == 404
        assert response.json()["code"] == "PROJECT_NOT_FOUND"

    def test_personal_timeline_empty(self, api):
        response = api.get("/api/v1/timeline")

        assert response.status_code == 200
        assert response.json()["tasks"] == []


class TestNotificationRoutes:

    def test_list(self, api, mock_client):
        mock_client.table("notifications").execute.return_value.data = [{
            "id": "n1",
            "kind": "mention",
            "payload_json": {"taskId": TASK_ID, "body": "@ada@example.edu"},
            "read_at": None,
            "created_at": "2025-02-03T10:00:00+00:00",
        }]

        response = api.get("/api/v1/notifications?limit=10")

        assert response.status_code == 200
        body = response.json()
        assert body["limit"] == 10
        assert body["notifications"][0]["payload_json"]["taskId"] == TASK_ID

    def test_limit_is_bounded(self, api, mock_client):
        response = api.get("/api/v1/notifications?limit=500")

        assert response.status_code == 422
        assert response.json()["details"]["field"] == "limit"

    def test_unread_count(self, api, mock_client):
        mock_client.table("notifications").execute.return_value.count = 3

        assert api.get("/api/v1/notifications/unread-count").json() == {"unread": 3}

    def test_read_all_and_delete_read(self, api, mock_client):
        assert api.post("/api/v1/notifications/read-all").status_code == 200
        assert api.delete("/api/v1/notifications/read").status_code == 200

        notifications = mock_client.tables["notifications"]
        notifications.update.assert_called_once()
        notifications.delete.assert_called_once_with()

    def test_mark_one_read(self, api, mock_client):
        notification_id = "0d1e2f3a-4b5c-4d6e-8f7a-9b0c1d2e3f4a"

        response = api.post(f"/api/v1/notifications/{notification_id}/read")

        assert response.status_code == 200
        mock_client.tables["notifications"].eq.assert_any_call("id", notification_id)


class TestWellnessRoutes:

    def test_check_in(self, api, mock_client):
        response = api.post("/api/v1/wellness/checkins", json={"mood": 4})

        assert response.status_code == 201
        assert response.json() == {
            "mood": 4,
            "current_streak": 1,
            "longest_streak": 1,
            "message": "Checked in",
        }

    def test_mood_out_of_range(self, api, mock_client):
        response = api.post("/api/v1/wellness/checkins", json={"mood": 9})

        assert response.status_code == 422
        assert response.json()["details"]["field"] == "mood"
        mock_client.table.assert_not_called()


class TestMemberRoutes:

    def test_list_members(self, api, mock_client):
        mock_client.table("memberships").execute.return_value.data = [{
            "user_id": MEMBER_ID,
            "role": "owner",
            "created_at": "2025-01-10T09:00:00+00:00",
            "users": {"name": "Grace Hopper", "email": "grace@navy.mil"},
        }]

        response = api.get(f"/api/v1/teams/{TEAM_ID}/members")

        assert response.status_code == 200
        member = response.json()["members"][0]
        assert member["name"] == "Grace Hopper"
        assert member["role"] is None

    def test_change_role(self, api, mock_client):
        mock_client.table("memberships").execute.side_effect = [
            MagicMock(data={"role": "admin"}),
            MagicMock(data=[{"user_id": MEMBER_ID, "role": "admin"}]),
        ]

        response = api.patch(f"/api/v1/teams/{TEAM_ID}/members/{MEMBER_ID}", json={"role": "admin"})

        assert response.status_code == 200
        assert response.json()["role"] == "admin"

    def test_change_role_of_non_member(self, api, mock_client):
        mock_client.table("memberships").execute.side_effect = [
            MagicMock(data={"role": "admin"}),
            MagicMock(data=[]),
        ]

        response = api.patch(f"/api/v1/teams/{TEAM_ID}/members/{MEMBER_ID}", json={"role": "member"})

        assert response.status_code == 404
        assert response.json()["code"] == "MEMBER_NOT_FOUND"

    def test_unknown_role_is_rejected(self, api, mock_client):
        response = api.patch(f"/api/v1/teams/{TEAM_ID}/members/{MEMBER_ID}", json={"role": "owner"})

        assert response.status_code == 422
        mock_client.table.assert_not_called()

    def test_remove_as_member_is_forbidden(self, api, mock_client):
        mock_client.table("memberships").execute.return_value.data = {"role": "member"}

        response = api.delete(f"/api/v1/teams/{TEAM_ID}/members/{MEMBER_ID}")

        assert response.status_code == 403
        mock_client.tables["memberships"].delete.assert_not_called()


class TestSettingsRoutes:

    def test_get_settings(self, api, mock_client, auth_user):
        mock_client.table("users").execute.return_value.data = {
            "id": str(auth_user.id), "name": "Ada", "email": "ada@example.edu",
        }
        mock_client.table("user_prefs").execute.return_value.data = {
            "email_mentions": False, "email_due": True, "email_digest": True,
        }

        response = api.get("/api/v1/settings")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Ada"
        assert body["email_mentions"] is False

    def test_update_profile(self, api, mock_client):
        response = api.patch("/api/v1/settings/profile", json={"name": "  Ada King "})

        assert response.status_code == 200
        assert response.json()["name"] == "Ada King"
        mock_client.tables["users"].update.assert_called_once_with({"name": "Ada King"})

    def test_update_email_preferences(self, api, mock_client, auth_user):
        response = api.patch("/api/v1/settings/email", json={"email_digest": True})

        assert response.status_code == 200
        mock_client.tables["user_prefs"].upsert.assert_called_once_with(
            {
                "user_id": str(auth_user.id),
                "email_mentions": False,
                "email_due": False,
                "email_digest": True,
            },
            on_conflict="user_id",
        )

    def test_stats(self, api, mock_client):
        mock_client.table("memberships").execute.return_value.count = 2
        mock_client.table("streaks").execute.return_value.data = {"current_days": 3, "longest_days": 8}
        mock_client.table("rewards").execute.return_value.data = [
            {"kind": "streak_7", "unlocked_at": "2025-02-10T08:00:00+00:00"},
        ]

        response = api.get("/api/v1/settings/stats")

        assert response.status_code == 200
        body = response.json()
        assert body["team_count"] == 2
        assert body["current_streak"] == 3
        assert body["longest_streak"] == 8
        assert body["badges"][0]["kind"] == "streak_7"


class TestIconRoute:

    def test_icon_is_cacheable_png(self, anonymous_api):
        response = anonymous_api.get("/icon.png")

        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert response.headers["cache-control"] == "public, max-age=31536000, immutable"
        assert response.content.startswith(base64.b64decode("iVBORw0KGgo="))


class TestHealthRoutes:

    def test_health(self, anonymous_api):
        response = anonymous_api.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_liveness(self, anonymous_api):
        assert anonymous_api.get("/api/v1/health/live").json()["status"] == "alive"

    def test_readiness_when_database_answers(self, anonymous_api, mock_client):
        with patch.object(SupabaseClient, "create", return_value=mock_client):
            response = anonymous_api.get("/api/v1/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"] == "healthy"
        mock_client.tables["teams"].limit.assert_called_once_with(1)

    def test_readiness_degraded_on_backend_error(self, anonymous_api):
        with patch.object(SupabaseClient, "create", side_effect=ConnectionError("connection refused")):
            response = anonymous_api.get("/api/v1/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "degraded"
        assert body["checks"]["database"].startswith("unhealthy: connection refused")


class TestLifespan:

    def test_startup_sweeps_local_storage_once(self, monkeypatch, tmp_path):
        store = str(tmp_path / "auth-store")
        cleanup = MagicMock(return_value=[])
        monkeypatch.setattr(settings, "LOCAL_STORAGE_PATH", store)
        monkeypatch.setattr("app.main.cleanup_local_storage", cleanup)

        with TestClient(app) as client:
            client.get("/api/v1/health/live")
            client.get("/api/v1/health/live")

        cleanup.assert_called_once_with(store, settings.SUPABASE_URL)


class TestAuthRoutes:

    @pytest.fixture
    def signed_in(self, mock_client, auth_user):
        app.dependency_overrides[get_current_user] = lambda: auth_user
        with patch.object(SupabaseClient, "for_request", return_value=mock_client) as for_request:
            yield for_request
        app.dependency_overrides.clear()

    def test_me_returns_profile_row(self, signed_in, mock_client, auth_user):
        mock_client.table("users").execute.return_value.data = {
            "id": str(auth_user.id), "email": "ada@example.edu", "name": "Countess Ada",
        }

        response = TestClient(app).get("/api/v1/auth/me")

        assert response.status_code == 200
        assert response.json()["name"] == "Countess Ada"
        signed_in.assert_called_once_with("test-access-token")

    def test_me_without_profile_row_uses_token_name(self, signed_in, mock_client):
        mock_client.table("users").execute.return_value = None

        response = TestClient(app).get("/api/v1/auth/me")

        assert response.status_code == 200
        assert response.json()["name"] == "Ada Lovelace"

    def test_me_on_backend_error_uses_token_name(self, signed_in, mock_client):
        mock_client.table("users").execute.side_effect = APIError({
            "message": "permission denied for table users",
            "code": "42501",
            "hint": None,
            "details": None,
        })

        response = TestClient(app).get("/api/v1/auth/me")

        assert response.status_code == 200
        assert response.json()["email"] == "ada@example.edu"
        assert response.json()["name"] == "Ada Lovelace"

    def test_verify(self, signed_in, auth_user):
        response = TestClient(app).get("/api/v1/auth/verify")

        assert response.status_code == 200
        assert response.json() == {
            "valid": True,
            "user_id": str(auth_user.id),
            "email": "ada@example.edu",
        }

    def test_me_without_token(self):
        response = TestClient(app).get("/api/v1/auth/me")

        assert response.status_code in (401, 403)


class TestOpenApiSchema:

    def test_field_examples_are_published(self, anonymous_api):
        schemas = anonymous_api.get("/openapi.json").json()["components"]["schemas"]

        team_id = schemas["TeamCreateResponse"]["properties"]["team_id"]
        assert team_id["examples"] == ["550e8400-e29b-41d4-a716-446655440000"]
        assert "example" not in team_id
        assert schemas["ProjectCreateRequest"]["properties"]["start"]["examples"] == ["2025-01-13"]

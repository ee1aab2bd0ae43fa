# =============================================================================
# app/routers/teams.py - Team, Dashboard & Join Endpoints
# =============================================================================
# Handles the dashboard, team creation, team detail, members and
# invite-code joins.
# Anonymous callers get a 401; on /join it carries the invite link to
# reopen after logging in.
# =============================================================================

from typing import Annotated
from urllib.parse import quote
from uuid import UUID

from fastapi import APIRouter, Path, Query
from pydantic import BaseModel

from app.config import settings
from app.dependencies import OptionalUserDep, SupabaseDep
from app.exceptions import MissingInviteCodeError, NotAuthenticatedError, TeamNotFoundError
from core.models.team import (
    JoinTeamResponse,
    MemberRoleUpdate,
    TeamCreate,
    TeamCreateResponse,
    TeamDetailResponse,
    TeamList,
    TeamMember,
    TeamMemberList,
    TeamResponse,
)
from core.services.base import require_user
from core.services.team_service import TeamService
from lib.utils import is_uuid

router = APIRouter()


class DashboardResponse(BaseModel):
    """Caller identity and teams."""
    user_id: str
    email: str | None = None
    name: str | None = None
    teams: list[TeamResponse]


def build_invite_url(invite_code: str | None) -> str:
    """Shareable join link for an invite code, or "" if there is none."""
    if not invite_code:
        return ""
    return f"{settings.SITE_URL.rstrip('/')}/join?code={quote(invite_code, safe='')}"


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(client: SupabaseDep, user: OptionalUserDep):
    """
    Dashboard overview.

    Returns the caller and the teams they belong to.
    """
    user = require_user(user)
    teams = TeamService.list_teams(client, user)

    return DashboardResponse(
        user_id=str(user.id),
        email=user.email,
        name=user.full_name,
        teams=[TeamResponse(**team) for team in teams],
    )


@router.get("/teams", response_model=TeamList)
async def list_teams(client: SupabaseDep, user: OptionalUserDep):
    """List the caller's teams."""
    teams = TeamService.list_teams(client, user)
    return TeamList(teams=[TeamResponse(**team) for team in teams], total=len(teams))


@router.post("/teams", response_model=TeamCreateResponse, status_code=201)
async def create_team(
    request: TeamCreate,
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """
    Create a team.

    The caller's profile and default preferences are created alongside.
    Returns the team id and the page to go to next.
    """
    team_id = TeamService.create_team(client, user, request)

    return TeamCreateResponse(team_id=team_id, redirect=f"/teams/{team_id}")


@router.get("/teams/{team_id}", response_model=TeamDetailResponse)
async def get_team(
    team_id: Annotated[str, Path(description="Team UUID")],
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """
    Team detail.

    Includes the invite code and a ready-to-share join link.
    """
    require_user(user)
    if not is_uuid(team_id):
        raise TeamNotFoundError(team_id)
    team = TeamService.get_team(client, team_id)

    return TeamDetailResponse(
        id=team["id"],
        name=team["name"],
        invite_code=team.get("invite_code"),
        invite_url=build_invite_url(team.get("invite_code")),
        new_project_url=f"/teams/{team['id']}/new-project",
    )


@router.get("/join", response_model=JoinTeamResponse)
async def join_team(
    client: SupabaseDep,
    user: OptionalUserDep,
    code: Annotated[str, Query(description="Invite code from the join link")] = "",
):
    """
    Join a team by invite code.

    A blank code is rejected before anything is sent to the backend.
    Unknown, expired or already used codes come back with the backend's
    own error message.
    """
    code = code.strip()
    if not code:
        raise MissingInviteCodeError()
    if user is None:
        raise NotAuthenticatedError(
            suggestion=f"Log in, then open the invite link again: {build_invite_url(code)}"
        )

    TeamService.join_team_by_code(client, user, code)

    return JoinTeamResponse()


# =============================================================================
# Members
# =============================================================================

@router.get("/teams/{team_id}/members", response_model=TeamMemberList)
async def list_members(
    team_id: Annotated[UUID, Path(description="Team UUID")],
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """List a team's members, oldest first."""
    members = TeamService.list_members(client, user, team_id)

    return TeamMemberList(
        team_id=str(team_id),
        members=[TeamMember(**member) for member in members],
        total=len(members),
    )


@router.patch("/teams/{team_id}/members/{user_id}")
async def update_member_role(
    team_id: Annotated[UUID, Path(description="Team UUID")],
    user_id: Annotated[UUID, Path(description="Member's user UUID")],
    request: MemberRoleUpdate,
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """Change a member's role (team admins only)."""
    TeamService.update_member_role(client, user, team_id, user_id, request.role)
    return {"user_id": str(user_id), "role": request.role.value, "message": "Role updated"}


@router.delete("/teams/{team_id}/members/{user_id}")
async def remove_member(
    team_id: Annotated[UUID, Path(description="Team UUID")],
    user_id: Annotated[UUID, Path(description="Member's user UUID")],
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """Remove a member from the team (team admins only)."""
    TeamService.remove_member(client, user, team_id, user_id)
    return {"user_id": str(user_id), "message": "Member removed"}

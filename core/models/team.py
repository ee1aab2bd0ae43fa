# =============================================================================
# core/models/team.py - Team Schemas
# =============================================================================
# These models define the API contract for team operations:
# - TeamCreate: Form input for creating a team
# - TeamResponse: A team as seen by one of its members
# - TeamDetailResponse: A team plus its shareable invite link
# - JoinTeamResponse: Invite-code join flow
# - TeamMember / MemberRoleUpdate: Members page and admin role changes
#
# Membership rows themselves are created by backend triggers and the
# `join_team_by_token` procedure; admins can change roles or remove rows.
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field


class TeamRole(str, Enum):
    """Role of a user within a team."""
    ADMIN = "admin"
    MEMBER = "member"


def coerce_role(value: Any) -> TeamRole | None:
    """Roles other than admin/member (set directly in the database) read as None."""
    if value is None or isinstance(value, TeamRole):
        return value
    try:
        return TeamRole(value)
    except ValueError:
        return None


MemberRole = Annotated[TeamRole | None, BeforeValidator(coerce_role)]


class TeamCreate(BaseModel):
    """
    Form input for creating a team.

    Example:
        {"name": "Capstone Group 7"}
    """

    name: str = Field(
        ...,
        min_length=2,
        description="Team name (at least 2 characters)"
    )

    model_config = {"str_strip_whitespace": True}


class TeamResponse(BaseModel):
    """A team the caller belongs to."""
    id: str
    name: str
    invite_code: str | None = None
    role: MemberRole = None


class TeamCreateResponse(BaseModel):
    """Response when creating a team."""
    team_id: str = Field(..., examples=["550e8400-e29b-41d4-a716-446655440000"])
    redirect: str = Field(..., examples=["/teams/550e8400-e29b-41d4-a716-446655440000"])
    message: str = Field(default="Team created successfully")


class TeamDetailResponse(BaseModel):
    """Team detail with the invite link members can share."""
    id: str
    name: str
    invite_code: str | None = None
    invite_url: str = ""
    new_project_url: str = ""


class TeamList(BaseModel):
    """The caller's teams."""
    teams: list[TeamResponse] = Field(default_factory=list)
    total: int = 0


class JoinTeamResponse(BaseModel):
    """Response after a successful invite-code join."""
    joined: bool = True
    redirect: str = "/dashboard"


class TeamMember(BaseModel):
    """A member of a team, as listed on the members page."""
    user_id: str
    name: str | None = None
    email: str | None = None
    role: MemberRole = None
    joined_at: datetime | None = None


class TeamMemberList(BaseModel):
    team_id: str
    members: list[TeamMember] = Field(default_factory=list)
    total: int = 0


class MemberRoleUpdate(BaseModel):
    """Change a member's role (admins only)."""
    role: TeamRole

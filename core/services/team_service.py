# =============================================================================
# core/services/team_service.py - Team Business Logic
# =============================================================================
# Handles team creation, listing, invite-code joins and member admin.
# Separates HTTP concerns from database/business logic.
#
# Every method takes the request-scoped Supabase client, so all reads and
# writes run under the caller's row-level security policies. Multi-step
# writes are not transactional: a failure in a later step leaves the
# earlier rows in place.
# =============================================================================

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID, uuid4

from postgrest.types import ReturnMethod
from supabase import Client

from app.auth.models import AuthUser
from app.exceptions import MemberNotFoundError, NotTeamAdminError, TeamNotFoundError
from core.models.team import TeamCreate, TeamRole
from core.services.base import parse_form, require_user
from lib.utils import generate_invite_code, normalize_uuid

logger = logging.getLogger(__name__)

JOIN_TEAM_PROCEDURE = "join_team_by_token"


class TeamService:
    """
    Service for team management operations.

    Provides a clean interface between API routes and database.
    """

    @staticmethod
    def create_team(
        client: Client,
        user: AuthUser | None,
        form: Mapping[str, Any] | TeamCreate,
    ) -> str:
        """
        Create a team owned by the caller.

        Steps, in order:
        1. Insert the team with a fresh invite code
        2. Upsert the caller's profile row
        3. Upsert the caller's default preferences (no-op if present)

        Args:
            client: Request-scoped Supabase client
            user: The caller (None if anonymous)
            form: Form data with a `name` of at least 2 characters

        Returns:
            The new team's id

        Raises:
            ValidationFailedError: If the name is missing or too short
            NotAuthenticatedError: If there is no caller
            APIError: If any backend write fails
        """
        data = parse_form(TeamCreate, form)
        user = require_user(user)

        team_id = str(uuid4())
        invite_code = generate_invite_code()

        try:
            # Row is not readable under RLS until the membership trigger has run
            client.table("teams").insert(
                {"id": team_id, "name": data.name, "invite_code": invite_code},
                returning=ReturnMethod.minimal,
            ).execute()

            client.table("users").upsert({
                "id": str(user.id),
                "email": user.email,
                "name": user.full_name,
            }).execute()

            client.table("user_prefs").upsert(
                {"user_id": str(user.id)},
                on_conflict="user_id",
                ignore_duplicates=True,
            ).execute()

        except Exception as e:
            logger.error(f"Failed to create team for user {user.id}: {e}")
            raise

        logger.info(f"Created team: {team_id} for user: {user.id}")
        return team_id

    @staticmethod
    def join_team_by_code(
        client: Client,
        user: AuthUser | None,
        code: str,
    ) -> None:
        """
        Join a team with an invite code.

        Validation and membership creation happen in the backend
        procedure; its errors (unknown, expired or used code) propagate
        unchanged.

        Raises:
            NotAuthenticatedError: If there is no caller
            APIError: If the procedure rejects the code
        """
        user = require_user(user)

        try:
            client.rpc(JOIN_TEAM_PROCEDURE, {"_token": code}).execute()
        except Exception as e:
            logger.warning(f"Join by code failed for user {user.id}: {e}")
            raise

        logger.info(f"User {user.id} joined a team by invite code")

    @staticmethod
    def list_teams(
        client: Client,
        user: AuthUser | None,
    ) -> list[dict[str, Any]]:
        """
        List the teams the caller belongs to.

        Returns:
            List of dicts with id, name, invite_code and the caller's role
        """
        user = require_user(user)

        response = (
            client.table("memberships")
            .select("role, teams(id, name, invite_code)")
            .eq("user_id", str(user.id))
            .execute()
        )

        teams = []
        for row in response.data or []:
            team = row.get("teams")
            if not team:
                continue
            teams.append({**team, "role": row.get("role")})

        logger.debug(f"Fetched {len(teams)} teams for user {user.id}")
        return teams

    @staticmethod
    def get_team(
        client: Client,
        team_id: str | UUID,
    ) -> dict[str, Any]:
        """
        Get a team by ID.

        Raises:
            TeamNotFoundError: If the team doesn't exist or isn't visible
        """
        team_id_str = normalize_uuid(team_id)

        response = (
            client.table("teams")
            .select("id, name, invite_code")
            .eq("id", team_id_str)
            .maybe_single()
            .execute()
        )

        if not response or not response.data:
            raise TeamNotFoundError(team_id_str)

        return response.data

    @staticmethod
    def get_membership_role(
        client: Client,
        team_id: str,
        user_id: str | UUID,
    ) -> str | None:
        """Return the caller's role in a team, or None if not a member."""
        response = (
            client.table("memberships")
            .select("role")
            .eq("team_id", team_id)
            .eq("user_id", normalize_uuid(user_id))
            .maybe_single()
            .execute()
        )

        if not response or not response.data:
            return None
        return response.data.get("role")

    @staticmethod
    def require_admin(
        client: Client,
        user: AuthUser,
        team_id: str,
        action: str,
    ) -> None:
        """
        Refuse unless the caller is an admin of the team.

        Raises:
            NotTeamAdminError: Naming the refused `action`
        """
        role = TeamService.get_membership_role(client, team_id, user.id)
        if role != TeamRole.ADMIN.value:
            raise NotTeamAdminError(action, team_id)

    # =========================================================================
    # Members
    # =========================================================================

    @staticmethod
    def list_members(
        client: Client,
        user: AuthUser | None,
        team_id: str | UUID,
    ) -> list[dict[str, Any]]:
        """
        List a team's members with their profile, oldest member first.

        Returns:
            List of dicts with user_id, name, email, role and joined_at
        """
        require_user(user)

        response = (
            client.table("memberships")
            .select("user_id, role, created_at, users(name, email)")
            .eq("team_id", normalize_uuid(team_id))
            .order("created_at", desc=False)
            .execute()
        )

        members = []
        for row in response.data or []:
            profile = row.get("users") or {}
            members.append({
                "user_id": row["user_id"],
                "name": profile.get("name"),
                "email": profile.get("email"),
                "role": row.get("role"),
                "joined_at": row.get("created_at"),
            })
        return members

    @staticmethod
    def update_member_role(
        client: Client,
        user: AuthUser | None,
        team_id: str | UUID,
        member_id: str | UUID,
        role: TeamRole,
    ) -> None:
        """
        Change a member's role (admins only).

        Raises:
            NotAuthenticatedError: If there is no caller
            NotTeamAdminError: If the caller isn't an admin of the team
            MemberNotFoundError: If the user isn't a member
        """
        user = require_user(user)
        team_id_str = normalize_uuid(team_id)
        member_id_str = normalize_uuid(member_id)

        TeamService.require_admin(client, user, team_id_str, "change member roles")

        response = (
            client.table("memberships")
            .update({"role": TeamRole(role).value})
            .eq("team_id", team_id_str)
            .eq("user_id", member_id_str)
            .execute()
        )
        if not response.data:
            raise MemberNotFoundError(team_id_str, member_id_str)

        logger.info(f"Set role of {member_id_str} in team {team_id_str} to {TeamRole(role).value}")

    @staticmethod
    def remove_member(
        client: Client,
        user: AuthUser | None,
        team_id: str | UUID,
        member_id: str | UUID,
    ) -> None:
        """
        Remove a member from a team (admins only).

        Raises:
            NotAuthenticatedError: If there is no caller
            NotTeamAdminError: If the caller isn't an admin of the team
            MemberNotFoundError: If the user isn't a member
        """
        user = require_user(user)
        team_id_str = normalize_uuid(team_id)
        member_id_str = normalize_uuid(member_id)

        TeamService.require_admin(client, user, team_id_str, "remove members")

        response = (
            client.table("memberships")
            .delete()
            .eq("team_id", team_id_str)
            .eq("user_id", member_id_str)
            .execute()
        )
        if not response.data:
            raise MemberNotFoundError(team_id_str, member_id_str)

        logger.info(f"Removed {member_id_str} from team {team_id_str}")

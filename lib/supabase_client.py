# =============================================================================
# lib/supabase_client.py - Supabase Client Factory
# =============================================================================
# Every request gets its own Supabase client. The client is created with the
# anon key and, when the caller sent a bearer token, authenticated as that
# caller so that row-level security applies to every query it makes.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   client = SupabaseClient.for_request(access_token)
#   client.table("teams").select("id, name").execute()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error while building a Supabase client.

    Provides actionable error messages: errors should tell HOW to fix,
    not just WHAT failed.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Factory for request-scoped Supabase clients.

    The PostgREST session carries the caller's token, so a client
    must never outlive its request.

    Example:
        client = SupabaseClient.for_request(user.access_token)
        teams = client.table("memberships").select("role, teams(id, name)").execute()
    """

    @classmethod
    def create(cls) -> Client:
        """
        Create an anonymous client using the anon key.

        Raises:
            SupabaseClientError: If client creation fails
        """
        try:
            return create_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to create Supabase client: {e}",
                code="CLIENT_INIT_FAILED",
                suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file"
            ) from e

    @classmethod
    def for_request(cls, access_token: str | None = None) -> Client:
        """
        Create a client for one request.

        Args:
            access_token: The caller's Supabase access token, if any

        Returns:
            Client: Supabase client whose queries run as the caller
        """
        client = cls.create()
        if access_token:
            client.postgrest.auth(access_token)
            logger.debug("Created request-scoped Supabase client for authenticated caller")
        return client

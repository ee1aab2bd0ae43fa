# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated, Optional

from fastapi import Depends
from supabase import Client

from app.auth import AuthUser, get_current_user_optional
from lib.supabase_client import SupabaseClient


def get_supabase_client(
    user: Optional[AuthUser] = Depends(get_current_user_optional),
) -> Client:
    """
    Get a Supabase client for this request.

    Authenticated callers get a client bound to their token; anonymous
    callers get a plain anon-key client.
    """
    return SupabaseClient.for_request(user.access_token if user else None)


# Type aliases for dependency injection
SupabaseDep = Annotated[Client, Depends(get_supabase_client)]
OptionalUserDep = Annotated[Optional[AuthUser], Depends(get_current_user_optional)]

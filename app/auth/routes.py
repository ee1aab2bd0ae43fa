# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for authentication-related operations.
#
# Note: Actual signup/login is handled by Supabase Auth client-side.
# These routes are for getting user info after authentication.
# =============================================================================

import logging

from fastapi import APIRouter, Depends
from postgrest.exceptions import APIError

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser, UserResponse
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    user: AuthUser = Depends(get_current_user)
) -> UserResponse:
    """
    Get the current authenticated user's profile.

    Raises:
        401: If not authenticated
    """
    client = SupabaseClient.for_request(user.access_token)

    try:
        response = (
            client.table("users")
            .select("id, email, name")
            .eq("id", str(user.id))
            .maybe_single()
            .execute()
        )

        if response and response.data:
            return UserResponse(**response.data)

    except APIError as e:
        logger.warning(f"Could not fetch user profile: {e}")

    # Profile row is written on first team creation
    return UserResponse(id=user.id, email=user.email, name=user.full_name)


@router.get("/verify")
async def verify_token(
    user: AuthUser = Depends(get_current_user)
) -> dict:
    """
    Verify that the current token is valid.

    Useful for checking if a stored token is still valid.
    """
    return {
        "valid": True,
        "user_id": str(user.id),
        "email": user.email
    }

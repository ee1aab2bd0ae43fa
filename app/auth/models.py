# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a Supabase JWT.

    This is the user info available from the token itself, without
    querying the database. The raw token is kept so that backend calls
    made on the user's behalf run under row-level security.
    """
    id: UUID
    email: Optional[str] = None
    user_metadata: dict[str, Any] = Field(default_factory=dict)
    access_token: str = Field(default="", repr=False)

    model_config = {"frozen": True}

    @property
    def full_name(self) -> Optional[str]:
        """Provider-supplied display name, or None when absent or blank."""
        name = self.user_metadata.get("full_name")
        if name is None:
            return None
        return str(name) or None


class UserResponse(BaseModel):
    """
    User profile returned by /auth/me.

    Includes the profile row from the public.users table when present.
    """
    id: UUID
    email: Optional[str] = None
    name: Optional[str] = None


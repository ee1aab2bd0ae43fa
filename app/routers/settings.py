# =============================================================================
# app/routers/settings.py - User Settings Endpoints
# =============================================================================
# Profile name, email notification preferences and activity stats.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import OptionalUserDep, SupabaseDep
from core.models.settings import EmailPreferencesUpdate, ProfileUpdate, UserSettings, UserStats
from core.services.settings_service import SettingsService

router = APIRouter()


@router.get("/settings", response_model=UserSettings)
async def get_settings(client: SupabaseDep, user: OptionalUserDep):
    """Get the caller's profile and notification preferences."""
    return UserSettings(**SettingsService.get_user_settings(client, user))


@router.get("/settings/stats", response_model=UserStats)
async def get_stats(client: SupabaseDep, user: OptionalUserDep):
    """Teams, completed tasks, streaks, check-ins and badges."""
    return UserStats(**SettingsService.get_user_stats(client, user))


@router.patch("/settings/profile")
async def update_profile(
    request: ProfileUpdate,
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """Rename the caller."""
    SettingsService.update_user_profile(client, user, request)
    return {"name": request.name, "message": "Profile updated"}


@router.patch("/settings/email")
async def update_email_preferences(
    request: EmailPreferencesUpdate,
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """Replace the caller's email notification switches."""
    SettingsService.update_email_preferences(client, user, request)
    return {**request.model_dump(), "message": "Email preferences updated"}

# =============================================================================
# app/routers/wellness.py - Daily Check-in Endpoint
# =============================================================================

from fastapi import APIRouter

from app.dependencies import OptionalUserDep, SupabaseDep
from core.models.wellness import CheckInCreate, CheckInResponse
from core.services.activity_service import ActivityService

router = APIRouter()


@router.post("/wellness/checkins", response_model=CheckInResponse, status_code=201)
async def check_in(
    request: CheckInCreate,
    client: SupabaseDep,
    user: OptionalUserDep,
):
    """
    Daily mood check-in (once per day).

    Returns your streak after the check-in.
    """
    streak = ActivityService.check_in(client, user, request)

    return CheckInResponse(
        mood=request.mood,
        current_streak=streak["current_days"],
        longest_streak=streak["longest_days"],
    )

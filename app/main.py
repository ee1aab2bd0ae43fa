# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the SemesterBoard API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError

from app.config import settings
from app.exceptions import (
    SemesterBoardException,
    backend_exception_handler,
    semesterboard_exception_handler,
    validation_exception_handler,
)
from app.routers import (
    health,
    icon,
    milestones,
    notifications,
    projects,
    tasks,
    teams,
    timeline,
    wellness,
)
from app.routers import settings as settings_routes
from app.auth import routes as auth_routes
from lib.storage_cleanup import cleanup_local_storage

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup: sweep legacy auth entries from the local store, once.
    """
    logger.info(f"Starting SemesterBoard API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    cleanup_local_storage(settings.LOCAL_STORAGE_PATH, settings.SUPABASE_URL)

    yield

    logger.info("Shutting down SemesterBoard API")


# Create FastAPI application
app = FastAPI(
    title="SemesterBoard API",
    description="""
## Team, Project & Milestone Planning

SemesterBoard helps student teams plan a semester. Authentication, storage
and row-level security are provided by Supabase; every request runs with
the caller's access token.

### How It Works

1. **Create a Team** - You get an invite code to share
2. **Invite Members** - Teammates open `/join?code=...`
3. **Create a Project** - Pick the semester start date; sixteen weekly
   milestones are laid out for you
4. **Adjust Milestones** - Admins can add, move or remove milestones
5. **Work the Tasks** - Create tasks, assign yourself, comment and
   @mention teammates by email
6. **Check In** - A daily mood check-in keeps your streak going
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Auth", "description": "Verify Supabase access tokens"},
        {"name": "Teams", "description": "Dashboard, teams and invite-code joins"},
        {"name": "Projects", "description": "Create projects from templates"},
        {"name": "Milestones", "description": "Project milestones"},
        {"name": "Tasks", "description": "Tasks, assignment and comments"},
        {"name": "Timeline", "description": "Project and personal timelines"},
        {"name": "Notifications", "description": "Mentions addressed to the caller"},
        {"name": "Wellness", "description": "Daily check-ins and streaks"},
        {"name": "Settings", "description": "Profile and email preferences"},
        {"name": "Health", "description": "API health and readiness checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(SemesterBoardException)
async def handle_semesterboard_exception(request: Request, exc: SemesterBoardException):
    """Handle custom SemesterBoard exceptions."""
    return await semesterboard_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Render request validation errors like ValidationFailedError."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(APIError)
async def handle_backend_exception(request: Request, exc: APIError):
    """Pass backend (PostgREST) errors through."""
    logger.warning(f"Backend error on {request.url.path}: {exc.message}")
    return await backend_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(auth_routes.router, prefix="/api/v1/auth", tags=["Auth"])
app.include_router(health.router, prefix="/api/v1", tags=["Health"])
app.include_router(teams.router, prefix="/api/v1", tags=["Teams"])
app.include_router(projects.router, prefix="/api/v1", tags=["Projects"])
app.include_router(milestones.router, prefix="/api/v1", tags=["Milestones"])
app.include_router(tasks.router, prefix="/api/v1", tags=["Tasks"])
app.include_router(timeline.router, prefix="/api/v1", tags=["Timeline"])
app.include_router(notifications.router, prefix="/api/v1", tags=["Notifications"])
app.include_router(wellness.router, prefix="/api/v1", tags=["Wellness"])
app.include_router(settings_routes.router, prefix="/api/v1", tags=["Settings"])
app.include_router(icon.router)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "SemesterBoard API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )

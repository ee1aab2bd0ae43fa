# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError


class SemesterBoardException(Exception):
    """
    Base exception for SemesterBoard API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "SEMESTERBOARD_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Request Exceptions
# =============================================================================

class ValidationFailedError(SemesterBoardException):
    """Raised when form input fails validation before any backend call."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=422,
            suggestion=f"Check the '{field}' field and try again",
            details={"field": field}
        )


class NotAuthenticatedError(SemesterBoardException):
    """Raised when an action needs a signed-in caller and there is none."""

    def __init__(
        self,
        message: str = "Unauthenticated",
        suggestion: str = "Log in, then retry the request with a Bearer token",
    ):
        super().__init__(
            message=message,
            code="NOT_AUTHENTICATED",
            status_code=401,
            suggestion=suggestion,
        )


class MissingInviteCodeError(SemesterBoardException):
    """Raised when the join link carries no usable invite code."""

    def __init__(self):
        super().__init__(
            message="Missing invite code.",
            code="MISSING_INVITE_CODE",
            status_code=400,
            suggestion="Open the full invite link, e.g. /join?code=abcd1234",
        )


# =============================================================================
# Team / Project Exceptions
# =============================================================================

class TeamNotFoundError(SemesterBoardException):
    """Raised when a team ID doesn't exist or isn't visible to the caller."""

    def __init__(self, team_id: str):
        super().__init__(
            message=f"Team not found: {team_id}",
            code="TEAM_NOT_FOUND",
            status_code=404,
            suggestion="Check that the team_id is correct and you are a member",
            details={"team_id": team_id}
        )


class ProjectNotFoundError(SemesterBoardException):
    """Raised when a project ID doesn't exist or isn't visible to the caller."""

    def __init__(self, project_id: str):
        super().__init__(
            message="Project not found",
            code="PROJECT_NOT_FOUND",
            status_code=404,
            suggestion="Check that the project_id is correct",
            details={"project_id": project_id}
        )


class NotTeamAdminError(SemesterBoardException):
    """Raised when a non-admin tries an admin-only change."""

    def __init__(self, action: str, team_id: str):
        super().__init__(
            message=f"Only admins can {action}",
            code="NOT_TEAM_ADMIN",
            status_code=403,
            suggestion="Ask a team admin to make this change",
            details={"team_id": team_id}
        )


class MemberNotFoundError(SemesterBoardException):
    """Raised when a user isn't a member of the team being edited."""

    def __init__(self, team_id: str, user_id: str):
        super().__init__(
            message="Member not found",
            code="MEMBER_NOT_FOUND",
            status_code=404,
            suggestion="Reload the members list; they may already have left",
            details={"team_id": team_id, "user_id": user_id}
        )


# =============================================================================
# Milestone Exceptions
# =============================================================================

class MilestoneNotFoundError(SemesterBoardException):
    """Raised when a milestone ID doesn't exist."""

    def __init__(self, milestone_id: str):
        super().__init__(
            message="Milestone not found",
            code="MILESTONE_NOT_FOUND",
            status_code=404,
            suggestion="Check that the milestone_id is correct",
            details={"milestone_id": milestone_id}
        )


class MilestoneHasTasksError(SemesterBoardException):
    """Raised when deleting a milestone that tasks still point at."""

    def __init__(self, milestone_id: str, task_count: int):
        super().__init__(
            message=f"Cannot delete milestone with {task_count} associated tasks.",
            code="MILESTONE_HAS_TASKS",
            status_code=409,
            suggestion="Please reassign or delete the tasks first",
            details={"milestone_id": milestone_id, "task_count": task_count}
        )


# =============================================================================
# Task Exceptions
# =============================================================================

class TaskNotFoundError(SemesterBoardException):
    """Raised when a task ID doesn't exist or isn't visible to the caller."""

    def __init__(self, task_id: str):
        super().__init__(
            message="Task not found",
            code="TASK_NOT_FOUND",
            status_code=404,
            suggestion="Check that the task_id is correct",
            details={"task_id": task_id}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def semesterboard_exception_handler(
    request: Request,
    exc: SemesterBoardException
) -> JSONResponse:
    """
    Convert SemesterBoardException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def backend_exception_handler(
    request: Request,
    exc: APIError
) -> JSONResponse:
    """
    Pass a PostgREST error through to the client unchanged.

    RPC failures (unknown or expired invite code) and RLS denials
    arrive here with the backend's own message and code.
    """
    content: dict[str, Any] = {
        "detail": exc.message or str(exc),
        "code": exc.code or "BACKEND_ERROR",
    }
    if exc.hint:
        content["suggestion"] = exc.hint
    if exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=400, content=content)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors raised by FastAPI.

    Renders the same body as ValidationFailedError, naming the first
    offending field; every error is listed under details.errors.
    """
    errors = [
        {
            "field": _field_name(error.get("loc", ())),
            "message": error.get("msg", "invalid value"),
            "type": error.get("type", "value_error"),
        }
        for error in exc.errors()
    ]
    first = errors[0] if errors else {"field": "request", "message": "invalid value"}

    error = ValidationFailedError(first["field"], f"{first['field']}: {first['message']}")
    error.details["errors"] = errors
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def _field_name(loc: tuple | list) -> str:
    # ("body", "name") -> "name"; ("query", "limit") -> "limit"
    parts = [str(part) for part in loc]
    if parts and parts[0] in ("body", "query", "path", "header", "cookie"):
        parts = parts[1:]
    return ".".join(parts) or "body"

# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import secrets
import string
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from pydantic import TypeAdapter

INVITE_CODE_ALPHABET = string.digits + string.ascii_lowercase
INVITE_CODE_LENGTH = 8

_TIMESTAMP = TypeAdapter(datetime)


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Handles both string and UUID objects, ensuring consistent string output.

    Example:
        team_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        team_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


def is_uuid(value: str | None) -> bool:
    """Check whether a string parses as a UUID."""
    if not value:
        return False
    try:
        UUID(str(value))
    except ValueError:
        return False
    return True


# =============================================================================
# Invite Codes
# =============================================================================

def generate_invite_code(length: int = INVITE_CODE_LENGTH) -> str:
    """
    Generate a random base-36 invite code.

    Uniqueness is not checked here; the teams table is the authority.

    Example:
        generate_invite_code()  # "k3x9a0qz"
    """
    return "".join(secrets.choice(INVITE_CODE_ALPHABET) for _ in range(length))


# =============================================================================
# Timestamps
# =============================================================================

def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(value: Any) -> datetime | None:
    """
    Parse a backend timestamp ("2025-01-13T09:30:00.123+00:00", "...Z").

    Naive values are taken as UTC. Returns None for None or "".

    Example:
        parse_timestamp("2025-01-13T00:00:00Z")  # datetime(2025, 1, 13, tzinfo=utc)
    """
    if value is None or value == "":
        return None
    parsed = _TIMESTAMP.validate_python(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

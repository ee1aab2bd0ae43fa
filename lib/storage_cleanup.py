# =============================================================================
# lib/storage_cleanup.py - Legacy Auth Entry Sweeper
# =============================================================================
# Removes stale Supabase auth entries from a local key/value store. Older
# clients persisted the session as a base64-encoded cookie value (prefix
# "base64-") under the default key `sb-<project-ref>-auth-token`; those
# entries can no longer be parsed and are dropped.
#
# Best effort: every error is logged at debug level and discarded.
#
# Usage:
#   from lib.storage_cleanup import sanitize_supabase_storage
#   sanitize_supabase_storage(store, settings.SUPABASE_URL)
# =============================================================================

from __future__ import annotations

import logging
import re
import shelve
from collections.abc import MutableMapping

logger = logging.getLogger(__name__)

LEGACY_VALUE_PREFIX = "base64-"
DEFAULT_KEY_PREFIX = "sb-"


def storage_key_prefix(supabase_url: str | None) -> str:
    """
    Build the auth storage key prefix for a Supabase project URL.

    Example: "https://abcd1234.supabase.co" -> "sb-abcd1234-auth-token"
    """
    match = re.match(r"^https?://([^.]+)\.", supabase_url or "")
    if not match:
        return DEFAULT_KEY_PREFIX
    return f"sb-{match.group(1)}-auth-token"


def sanitize_supabase_storage(
    storage: MutableMapping[str, str] | None,
    supabase_url: str | None,
) -> list[str]:
    """
    Remove legacy base64 auth entries from a key/value store.

    A key is removed only when it starts with the project's storage key
    prefix AND its value is a string starting with "base64-".

    Args:
        storage: Any mutable mapping (dict, shelve); None means unavailable
        supabase_url: The configured Supabase project URL

    Returns:
        The keys that were removed (empty if nothing matched or on error)
    """
    if storage is None:
        return []

    removed: list[str] = []
    try:
        key_prefix = storage_key_prefix(supabase_url)

        # Collect first, then delete, so iteration never sees a mutated mapping
        keys_to_remove = []
        for key in list(storage.keys()):
            if not key or not key.startswith(key_prefix):
                continue
            value = storage.get(key)
            if isinstance(value, str) and value.startswith(LEGACY_VALUE_PREFIX):
                keys_to_remove.append(key)

        for key in keys_to_remove:
            del storage[key]
            removed.append(key)

        if removed:
            logger.info(f"Removed {len(removed)} legacy auth entries from local storage")

    except Exception as e:
        logger.debug(f"Local storage cleanup skipped: {e}")

    return removed


def cleanup_local_storage(path: str | None, supabase_url: str | None) -> list[str]:
    """
    Open the shelve store at `path` and sanitize it.

    Missing path, unreadable file or a locked database all result in a
    no-op.
    """
    if not path:
        return []

    try:
        with shelve.open(path) as store:
            return sanitize_supabase_storage(store, supabase_url)
    except Exception as e:
        logger.debug(f"Local storage at {path} unavailable: {e}")
        return []

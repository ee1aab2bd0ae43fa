# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Request-scoped Supabase client factory
# - storage_cleanup.py: Sweeper for legacy auth entries in local storage
# - utils.py: Shared utilities (UUID normalization, invite codes)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.storage_cleanup import cleanup_local_storage, sanitize_supabase_storage
from lib.utils import generate_invite_code, normalize_uuid

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Local storage
    "cleanup_local_storage",
    "sanitize_supabase_storage",
    # Utils
    "generate_invite_code",
    "normalize_uuid",
]

#!/usr/bin/env python3
# =============================================================================
# scripts/sanitize_storage.py - Remove Legacy Auth Entries
# =============================================================================
# Sweeps a local shelve store for Supabase auth entries saved in the old
# base64 cookie format and removes them. Same routine the API runs once at
# startup when LOCAL_STORAGE_PATH is set.
#
# Usage:
#   python scripts/sanitize_storage.py                 # Uses LOCAL_STORAGE_PATH
#   python scripts/sanitize_storage.py path/to/store   # Explicit store
#
# Prerequisites:
#   - SUPABASE_URL and SUPABASE_ANON_KEY must be set (.env file)
# =============================================================================

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from lib.storage_cleanup import cleanup_local_storage, storage_key_prefix


def main():
    """Sanitize the store given on the command line or in the environment."""
    path = sys.argv[1] if len(sys.argv) > 1 else os.getenv("LOCAL_STORAGE_PATH")
    supabase_url = os.getenv("SUPABASE_URL", "")

    if not path:
        print("ERROR: no store given and LOCAL_STORAGE_PATH is not set")
        sys.exit(1)

    print(f"Store:      {path}")
    print(f"Key prefix: {storage_key_prefix(supabase_url)}")

    removed = cleanup_local_storage(path, supabase_url)

    if removed:
        print(f"Removed {len(removed)} legacy entries:")
        for key in removed:
            print(f"  - {key}")
    else:
        print("Nothing to remove")


if __name__ == "__main__":
    main()

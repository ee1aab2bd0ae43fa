# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides a chainable mock Supabase client and a sample caller
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-for-hs256-tokens")
os.environ.setdefault("SITE_URL", "https://board.example.com")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from unittest.mock import MagicMock
from uuid import UUID

import pytest

from app.auth.models import AuthUser

CHAIN_METHODS = (
    "select", "insert", "upsert", "update", "delete",
    "eq", "neq", "in_", "is_", "gte", "gt", "lte", "lt",
    "order", "limit", "range", "single", "maybe_single",
)


def make_table_mock(name: str) -> MagicMock:
    """
    Mock of a PostgREST query builder.

    Every builder method returns the same mock, so a whole chain ends at
    `table.execute`, whose return value tests configure directly.
    """
    table = MagicMock(name=f"table:{name}")
    for method in CHAIN_METHODS:
        getattr(table, method).return_value = table
    table.not_ = table
    table.execute.return_value = MagicMock(data=[], count=0)
    return table


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def mock_client():
    """
    Mock Supabase client with one builder mock per table.

    Access a table's mock with `mock_client.tables["teams"]` after the code
    under test touched it, or `mock_client.table("teams")` to preconfigure it
    (that call is then part of `mock_client.table.call_args_list`).
    """
    client = MagicMock(name="supabase")
    tables: dict[str, MagicMock] = {}

    def table(name: str) -> MagicMock:
        if name not in tables:
            tables[name] = make_table_mock(name)
        return tables[name]

    client.table.side_effect = table
    client.tables = tables
    return client


@pytest.fixture
def auth_user():
    """A signed-in caller with provider metadata."""
    return AuthUser(
        id=UUID("11111111-2222-3333-4444-555555555555"),
        email="ada@example.edu",
        user_metadata={"full_name": "Ada Lovelace"},
        access_token="test-access-token",
    )


@pytest.fixture
def team_row():
    """Sample team row as returned by the backend."""
    return {
        "id": "9b2f7c1e-0d4a-4c55-9a7e-3f1f2b8c6d01",
        "name": "Capstone Group 7",
        "invite_code": "k3x9a0qz",
    }

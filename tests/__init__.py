# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the SemesterBoard API:
# - test_models.py: Pydantic model and settings validation
# - test_project_service.py: Template expansion and project bootstrap
# - test_team_service.py: Team creation, listing and invite-code joins
# - test_milestone_service.py / test_settings_service.py: Supplementary services
# - test_storage_cleanup.py: Legacy local storage sweeper
# - test_auth.py: Supabase JWT verification
# - test_routes.py: HTTP layer via TestClient
#
# Run tests with: pytest
# =============================================================================

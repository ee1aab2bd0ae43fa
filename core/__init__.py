# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the API:
# - models/: Pydantic schemas for data validation
# - services/: Team, project, milestone and settings operations
# - templates.py: Static milestone templates (SEMESTER_16)
#
# Code in this package never sees HTTP requests or responses; it receives
# a Supabase client and the caller, which keeps it testable with mocks.
# =============================================================================

# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - teams.py: Dashboard, teams, members and invite-code joins
# - projects.py: New project from the semester template
# - milestones.py: Milestone listing and admin edits
# - tasks.py: Tasks, self-assignment and comments
# - timeline.py: Project and personal timelines
# - notifications.py: Mention notifications
# - wellness.py: Daily check-ins
# - settings.py: Profile, email preferences and activity stats
# - icon.py: Placeholder app icon
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import teams
from . import projects
from . import milestones
from . import tasks
from . import timeline
from . import notifications
from . import wellness
from . import settings
from . import icon

__all__ = [
    "health",
    "teams",
    "projects",
    "milestones",
    "tasks",
    "timeline",
    "notifications",
    "wellness",
    "settings",
    "icon",
]

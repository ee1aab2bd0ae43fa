# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .team_service import TeamService
from .project_service import ProjectService, compute_milestone_schedule
from .milestone_service import MilestoneService
from .task_service import TaskService
from .timeline_service import TimelineService
from .notification_service import NotificationService
from .activity_service import ActivityService
from .settings_service import SettingsService

__all__ = [
    "TeamService",
    "ProjectService",
    "compute_milestone_schedule",
    "MilestoneService",
    "TaskService",
    "TimelineService",
    "NotificationService",
    "ActivityService",
    "SettingsService",
]

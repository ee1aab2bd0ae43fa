# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - team.py: Team creation, listing and invite-code join schemas
# - project.py: New-project form and template schedule rows
# - milestone.py: Milestone create/update/response schemas
# - settings.py: Profile, email preference and activity stats schemas
# - task.py: Task, comment and timeline schemas
# - notification.py: Notification schemas
# - wellness.py: Daily check-in schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Team Models
# -----------------------------------------------------------------------------
from .team import (
    JoinTeamResponse,
    MemberRoleUpdate,
    TeamCreate,
    TeamCreateResponse,
    TeamDetailResponse,
    TeamList,
    TeamMember,
    TeamMemberList,
    TeamResponse,
    TeamRole,
)

# -----------------------------------------------------------------------------
# Project Models
# -----------------------------------------------------------------------------
from .project import (
    ProjectCreateRequest,
    ProjectCreateResponse,
)

# -----------------------------------------------------------------------------
# Milestone Models
# -----------------------------------------------------------------------------
from .milestone import (
    MilestoneCreate,
    MilestoneList,
    MilestoneResponse,
    MilestoneStatus,
    MilestoneUpdate,
)

# -----------------------------------------------------------------------------
# Settings Models
# -----------------------------------------------------------------------------
from .settings import (
    Badge,
    EmailPreferencesUpdate,
    ProfileUpdate,
    UserSettings,
    UserStats,
)

# -----------------------------------------------------------------------------
# Task Models
# -----------------------------------------------------------------------------
from .task import (
    CommentCreate,
    TaskCreate,
    TaskFilter,
    TaskList,
    TaskResponse,
    TaskStatus,
    TimelineAssignee,
    TimelineData,
    TimelineMilestone,
    TimelineTask,
)

# -----------------------------------------------------------------------------
# Notification Models
# -----------------------------------------------------------------------------
from .notification import (
    NotificationList,
    NotificationResponse,
    UnreadCount,
)

# -----------------------------------------------------------------------------
# Wellness Models
# -----------------------------------------------------------------------------
from .wellness import (
    ActivityKind,
    CheckInCreate,
    CheckInResponse,
)

__all__ = [
    # Team
    "JoinTeamResponse",
    "MemberRoleUpdate",
    "TeamCreate",
    "TeamCreateResponse",
    "TeamDetailResponse",
    "TeamList",
    "TeamMember",
    "TeamMemberList",
    "TeamResponse",
    "TeamRole",
    # Project
    "ProjectCreateRequest",
    "ProjectCreateResponse",
    # Milestone
    "MilestoneCreate",
    "MilestoneList",
    "MilestoneResponse",
    "MilestoneStatus",
    "MilestoneUpdate",
    # Settings
    "Badge",
    "EmailPreferencesUpdate",
    "ProfileUpdate",
    "UserSettings",
    "UserStats",
    # Task
    "CommentCreate",
    "TaskCreate",
    "TaskFilter",
    "TaskList",
    "TaskResponse",
    "TaskStatus",
    "TimelineAssignee",
    "TimelineData",
    "TimelineMilestone",
    "TimelineTask",
    # Notification
    "NotificationList",
    "NotificationResponse",
    "UnreadCount",
    # Wellness
    "ActivityKind",
    "CheckInCreate",
    "CheckInResponse",
]

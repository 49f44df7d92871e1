"""Models package - Pydantic models for API request/response"""

from teamtasks.models.team import (
    Member,
    MemberUpdate,
    TeamCreate,
    TeamUpdate,
)
from teamtasks.models.project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectMember,
)
from teamtasks.models.task import (
    Priority,
    Status,
    TaskCreate,
    TaskUpdate,
    Task,
    ReassignRequest,
    TaskListResponse,
)
from teamtasks.models.activity import ActivityLog, ActivityLogListResponse

__all__ = [
    # Team
    "Member",
    "MemberUpdate",
    "TeamCreate",
    "TeamUpdate",
    # Project
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectMember",
    # Task
    "Priority",
    "Status",
    "TaskCreate",
    "TaskUpdate",
    "Task",
    "ReassignRequest",
    "TaskListResponse",
    # Activity
    "ActivityLog",
    "ActivityLogListResponse",
]

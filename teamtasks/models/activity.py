"""Activity log models"""

from pydantic import BaseModel
from typing import Optional, List


class ActivityLog(BaseModel):
    id: str
    message: str
    task_id: str
    project_id: str
    from_member_name: Optional[str] = None
    to_member_name: Optional[str] = None
    task_title: Optional[str] = None
    created_at: str


class ActivityLogListResponse(BaseModel):
    logs: List[ActivityLog]

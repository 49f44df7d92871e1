"""Task models"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from enum import Enum


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Status(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


# Canonical ordering used when picking tasks to move
PRIORITY_RANK = {Priority.LOW.value: 0, Priority.MEDIUM.value: 1, Priority.HIGH.value: 2}


class TaskCreate(BaseModel):
    project_id: str
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    assigned_member_name: Optional[str] = None
    priority: Priority = Priority.LOW
    status: Status = Status.PENDING


class TaskUpdate(BaseModel):
    project_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    assigned_member_name: Optional[str] = None
    priority: Optional[Priority] = None
    status: Optional[Status] = None


class Task(BaseModel):
    id: str
    project_id: str
    title: str
    description: str
    assigned_member_name: Optional[str] = None
    priority: Priority
    status: Status
    created_at: str
    updated_at: str


class ReassignRequest(BaseModel):
    # Clients send ``projectId``; an empty value means every owned project
    project_id: Optional[str] = Field(None, alias="projectId")

    model_config = ConfigDict(populate_by_name=True)


class TaskListResponse(BaseModel):
    message: Optional[str] = None
    tasks: List[Task]

"""Project models"""

from pydantic import BaseModel, Field
from typing import Optional


class ProjectCreate(BaseModel):
    team_id: str
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)


class ProjectUpdate(BaseModel):
    team_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


class ProjectMember(BaseModel):
    name: str
    role: str
    capacity: int
    current_tasks: int
    active_tasks: int
    available: int

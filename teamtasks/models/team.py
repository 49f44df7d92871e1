"""Team and member models"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class Member(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    role: str = Field(..., min_length=1, max_length=100)
    capacity: int = Field(..., ge=0)


class MemberUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    role: Optional[str] = Field(None, min_length=1, max_length=100)
    capacity: Optional[int] = Field(None, ge=0)


class TeamCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    members: List[Member] = []


class TeamUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    members: Optional[List[Member]] = None

"""Team and member routes"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from teamtasks.auth.jwt import get_current_user
from teamtasks.models.team import TeamCreate, TeamUpdate, Member, MemberUpdate
from teamtasks.services.database import db_service

logger = logging.getLogger(__name__)

router = APIRouter()


def ensure_unique_names(members: List[dict]):
    """Member names identify assignees, so they must be unique within a team"""
    names = [m["name"] for m in members]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise HTTPException(
            status_code=400,
            detail=f"Duplicate member name(s): {', '.join(duplicates)}"
        )


def get_owned_team_or_404(team_id: str, user_id: str) -> dict:
    team = db_service.get_owned_team(team_id, user_id)
    if not team:
        raise HTTPException(status_code=404, detail="Team not found")
    return team


def get_member_index_or_404(team: dict, member_index: int) -> int:
    if member_index < 0 or member_index >= len(team.get("members", [])):
        raise HTTPException(status_code=404, detail="Member not found")
    return member_index


@router.post("", status_code=201)
async def create_team(data: TeamCreate, current_user: dict = Depends(get_current_user)):
    """Create a new team owned by the caller"""
    name = data.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Team name is required")

    members = [m.model_dump() for m in data.members]
    ensure_unique_names(members)

    team = db_service.create_team(current_user["id"], name, members)
    return {"message": "Team created successfully", "team": team}


@router.get("")
async def list_teams(current_user: dict = Depends(get_current_user)):
    """List teams owned by the caller, newest first"""
    teams = db_service.get_user_teams(current_user["id"])
    return {"teams": list(reversed(teams))}


@router.put("/{team_id}")
async def update_team(team_id: str, data: TeamUpdate, current_user: dict = Depends(get_current_user)):
    """Rename a team or replace its member list"""
    get_owned_team_or_404(team_id, current_user["id"])

    updates = {}
    if data.name is not None and data.name.strip():
        updates["name"] = data.name.strip()
    if data.members is not None:
        members = [m.model_dump() for m in data.members]
        ensure_unique_names(members)
        updates["members"] = members

    team = db_service.update_team(team_id, updates)
    return {"message": "Team updated successfully", "team": team}


@router.delete("/{team_id}")
async def delete_team(team_id: str, current_user: dict = Depends(get_current_user)):
    """Delete a team"""
    get_owned_team_or_404(team_id, current_user["id"])
    db_service.delete_team(team_id)
    return {"message": "Team deleted successfully"}


# =============================================================================
# Member Routes
# =============================================================================

@router.post("/{team_id}/members", status_code=201)
async def add_member(team_id: str, data: Member, current_user: dict = Depends(get_current_user)):
    """Append a member to a team"""
    team = get_owned_team_or_404(team_id, current_user["id"])

    members = team.get("members", []) + [data.model_dump()]
    ensure_unique_names(members)

    team = db_service.update_team(team_id, {"members": members})
    return {"message": "Member added successfully", "team": team}


@router.put("/{team_id}/members/{member_index}")
async def update_member(
    team_id: str,
    member_index: int,
    data: MemberUpdate,
    current_user: dict = Depends(get_current_user)
):
    """Update a member by position. Renaming does not follow existing task assignments."""
    team = get_owned_team_or_404(team_id, current_user["id"])
    get_member_index_or_404(team, member_index)

    members = [dict(m) for m in team["members"]]
    members[member_index].update(data.model_dump(exclude_unset=True, exclude_none=True))
    ensure_unique_names(members)

    team = db_service.update_team(team_id, {"members": members})
    return {"message": "Member updated successfully", "team": team}


@router.delete("/{team_id}/members/{member_index}")
async def delete_member(team_id: str, member_index: int, current_user: dict = Depends(get_current_user)):
    """Remove a member by position. Their tasks keep the old assignee name."""
    team = get_owned_team_or_404(team_id, current_user["id"])
    get_member_index_or_404(team, member_index)

    members = [m for i, m in enumerate(team["members"]) if i != member_index]
    team = db_service.update_team(team_id, {"members": members})
    return {"message": "Member removed successfully", "team": team}

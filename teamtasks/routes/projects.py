"""Project routes"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from teamtasks.auth.jwt import get_current_user
from teamtasks.models.project import ProjectCreate, ProjectUpdate, ProjectMember
from teamtasks.services.database import db_service
from teamtasks.services.workload import calculate_workload

logger = logging.getLogger(__name__)

router = APIRouter()


def get_accessible_project(project_id: str, user_id: str) -> tuple:
    """Return (project, team); 404 if missing, 403 if owned by someone else"""
    project = db_service.get_project_by_id(project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")

    team = db_service.get_owned_team(project["team_id"], user_id)
    if not team:
        raise HTTPException(status_code=403, detail="You don't have access to this project")

    return project, team


@router.post("", status_code=201)
async def create_project(data: ProjectCreate, current_user: dict = Depends(get_current_user)):
    """Create a project under a team owned by the caller"""
    title = data.title.strip()
    description = data.description.strip()
    if not title:
        raise HTTPException(status_code=400, detail="Project title is required")
    if not description:
        raise HTTPException(status_code=400, detail="Project description is required")

    team = db_service.get_owned_team(data.team_id, current_user["id"])
    if not team:
        raise HTTPException(status_code=404, detail="Team not found or you don't have access to it")

    project = db_service.create_project(team["id"], title, description)
    return {"message": "Project created successfully", "project": project}


@router.get("")
async def list_projects(team_id: Optional[str] = None, current_user: dict = Depends(get_current_user)):
    """List the caller's projects, newest first, optionally for one team"""
    teams = {t["id"]: t for t in db_service.get_user_teams(current_user["id"])}

    if team_id:
        if team_id not in teams:
            raise HTTPException(status_code=404, detail="Team not found or you don't have access to it")
        team_ids = [team_id]
    else:
        team_ids = list(teams)

    projects = db_service.get_team_projects(team_ids) if team_ids else []
    return {
        "projects": [
            {**p, "team_name": teams[p["team_id"]]["name"]}
            for p in reversed(projects)
        ]
    }


@router.put("/{project_id}")
async def update_project(project_id: str, data: ProjectUpdate, current_user: dict = Depends(get_current_user)):
    """Update a project, optionally moving it to another owned team"""
    project, _ = get_accessible_project(project_id, current_user["id"])

    updates = {}
    if data.team_id and data.team_id != project["team_id"]:
        if not db_service.get_owned_team(data.team_id, current_user["id"]):
            raise HTTPException(status_code=404, detail="New team not found or you don't have access to it")
        updates["team_id"] = data.team_id

    if data.title is not None and data.title.strip():
        updates["title"] = data.title.strip()
    if data.description is not None and data.description.strip():
        updates["description"] = data.description.strip()

    project = db_service.update_project(project_id, updates)
    return {"message": "Project updated successfully", "project": project}


@router.delete("/{project_id}")
async def delete_project(project_id: str, current_user: dict = Depends(get_current_user)):
    """Delete a project. Its tasks are left in place."""
    get_accessible_project(project_id, current_user["id"])
    db_service.delete_project(project_id)
    return {"message": "Project deleted successfully"}


@router.get("/{project_id}/members")
async def get_project_members(project_id: str, current_user: dict = Depends(get_current_user)):
    """Team members of a project with their current load in it"""
    project, team = get_accessible_project(project_id, current_user["id"])

    members = [
        ProjectMember(
            name=w.name,
            role=w.role,
            capacity=w.capacity,
            current_tasks=db_service.count_assigned_tasks(project["id"], w.name),
            active_tasks=w.active_count,
            available=w.available,
        )
        for w in calculate_workload(db_service, project["id"], team.get("members", []))
    ]
    return {"members": members}

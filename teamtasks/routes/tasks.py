"""Task routes"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from teamtasks.auth.jwt import get_current_user
from teamtasks.models.task import TaskCreate, TaskUpdate, ReassignRequest, TaskListResponse
from teamtasks.services.activity import log_assignment_change
from teamtasks.services.database import db_service
from teamtasks.services.reassignment import reassign_tasks as run_reassignment, ProjectNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


def has_project_access(project_id: str, user_id: str) -> bool:
    return db_service.get_owned_project_team(project_id, user_id) is not None


def get_accessible_task(task_id: str, user_id: str) -> dict:
    task = db_service.get_task_by_id(task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    if not has_project_access(task["project_id"], user_id):
        raise HTTPException(status_code=403, detail="You don't have access to this task")
    return task


@router.post("", status_code=201)
async def create_task(data: TaskCreate, current_user: dict = Depends(get_current_user)):
    """Create a task in one of the caller's projects"""
    title = data.title.strip()
    description = data.description.strip()
    if not title:
        raise HTTPException(status_code=400, detail="Task title is required")
    if not description:
        raise HTTPException(status_code=400, detail="Task description is required")

    if not has_project_access(data.project_id, current_user["id"]):
        raise HTTPException(status_code=404, detail="Project not found or you don't have access to it")

    assignee = (data.assigned_member_name or "").strip() or None
    task = db_service.create_task({
        "project_id": data.project_id,
        "title": title,
        "description": description,
        "assigned_member_name": assignee,
        "priority": data.priority.value,
        "status": data.status.value,
    })

    if assignee:
        log_assignment_change(db_service, task, None, assignee)

    return {"message": "Task created successfully", "task": task}


@router.get("")
async def list_tasks(
    project_id: Optional[str] = None,
    assigned_member_name: Optional[str] = None,
    current_user: dict = Depends(get_current_user)
):
    """List tasks in the caller's projects, newest first"""
    project_ids = [p["id"] for p in db_service.get_user_projects(current_user["id"])]

    if project_id:
        if project_id not in project_ids:
            raise HTTPException(status_code=404, detail="Project not found or you don't have access to it")
        project_ids = [project_id]

    tasks = db_service.get_project_tasks(project_ids) if project_ids else []
    if assigned_member_name:
        tasks = [t for t in tasks if t.get("assigned_member_name") == assigned_member_name]

    tasks = sorted(tasks, key=lambda t: (t.get("created_at", ""), t.doc_id), reverse=True)
    return {"tasks": tasks}


@router.post("/reassign", response_model=TaskListResponse)
async def reassign_tasks(data: Optional[ReassignRequest] = None, current_user: dict = Depends(get_current_user)):
    """Move work from over-capacity members to members with free slots.

    Covers one project when ``projectId`` is given, otherwise every project
    the caller owns. High priority and Done tasks are never moved.
    """
    project_id = data.project_id if data else None

    try:
        tasks = run_reassignment(db_service, current_user["id"], project_id or None)
    except ProjectNotFoundError:
        raise HTTPException(status_code=404, detail="Project not found or you don't have access to it")
    except Exception as e:
        logger.error(f"Reassign tasks error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Server error while reassigning tasks")

    if tasks:
        message = f"{len(tasks)} task{'' if len(tasks) == 1 else 's'} reassigned"
    else:
        message = "No tasks were reassigned"

    return {"message": message, "tasks": tasks}


@router.put("/{task_id}")
async def update_task(task_id: str, data: TaskUpdate, current_user: dict = Depends(get_current_user)):
    """Update a task; assignee changes are recorded in the activity log"""
    task = get_accessible_task(task_id, current_user["id"])
    fields = data.model_dump(exclude_unset=True)

    updates = {}
    if data.project_id and data.project_id != task["project_id"]:
        if not has_project_access(data.project_id, current_user["id"]):
            raise HTTPException(status_code=404, detail="New project not found or you don't have access to it")
        updates["project_id"] = data.project_id

    if data.title is not None and data.title.strip():
        updates["title"] = data.title.strip()
    if data.description is not None and data.description.strip():
        updates["description"] = data.description.strip()
    if "assigned_member_name" in fields:
        updates["assigned_member_name"] = (data.assigned_member_name or "").strip() or None
    if data.priority is not None:
        updates["priority"] = data.priority.value
    if data.status is not None:
        updates["status"] = data.status.value

    old_assignee = task.get("assigned_member_name")
    updated = db_service.update_task(task_id, updates)

    if "assigned_member_name" in updates:
        log_assignment_change(db_service, updated, old_assignee, updated.get("assigned_member_name"))

    return {"message": "Task updated successfully", "task": updated}


@router.delete("/{task_id}")
async def delete_task(task_id: str, current_user: dict = Depends(get_current_user)):
    """Delete a task"""
    get_accessible_task(task_id, current_user["id"])
    db_service.delete_task(task_id)
    return {"message": "Task deleted successfully"}

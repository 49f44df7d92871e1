"""Activity log routes"""

from fastapi import APIRouter, Depends, Query

from teamtasks.auth.jwt import get_current_user
from teamtasks.models.activity import ActivityLogListResponse
from teamtasks.services.database import db_service

router = APIRouter()


def enrich_logs(logs: list) -> list:
    """Attach the current task title to each log entry"""
    titles = {}
    for log in logs:
        task_id = log.get("task_id")
        if task_id not in titles:
            task = db_service.get_task_by_id(task_id)
            titles[task_id] = task["title"] if task else "Unknown Task"
    return [{**log, "task_title": titles[log.get("task_id")]} for log in logs]


@router.get("", response_model=ActivityLogListResponse)
async def get_activity_logs(
    limit: int = Query(50, ge=1, le=500),
    current_user: dict = Depends(get_current_user)
):
    """Assignment history for the caller's projects, newest first"""
    project_ids = [p["id"] for p in db_service.get_user_projects(current_user["id"])]
    if not project_ids:
        return {"logs": []}

    task_ids = [t["id"] for t in db_service.get_project_tasks(project_ids)]
    logs = db_service.get_activity_logs(project_ids, task_ids, limit=limit)
    return {"logs": enrich_logs(logs)}

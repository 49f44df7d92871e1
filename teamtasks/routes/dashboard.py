"""Dashboard routes"""

from collections import defaultdict

from fastapi import APIRouter, Depends

from teamtasks.auth.jwt import get_current_user
from teamtasks.models.task import Status
from teamtasks.routes.activity import enrich_logs
from teamtasks.services.database import db_service

router = APIRouter()

STATUS_KEYS = {
    Status.PENDING.value: "pending",
    Status.IN_PROGRESS.value: "in_progress",
    Status.DONE.value: "done",
}


@router.get("")
async def get_dashboard_stats(current_user: dict = Depends(get_current_user)):
    """Project and task totals, workload per assignee and latest activity"""
    teams = db_service.get_user_teams(current_user["id"])
    projects = db_service.get_team_projects([t["id"] for t in teams]) if teams else []
    project_ids = [p["id"] for p in projects]
    tasks = db_service.get_project_tasks(project_ids) if project_ids else []

    # Capacities by member name; later teams win on name clashes
    capacities = {}
    for team in teams:
        for member in team.get("members", []):
            capacities[member["name"]] = member.get("capacity", 0)

    grouped = defaultdict(lambda: {"count": 0, "pending": 0, "in_progress": 0, "done": 0})
    for task in tasks:
        name = task.get("assigned_member_name") or "Unassigned"
        data = grouped[name]
        data["count"] += 1
        status_key = STATUS_KEYS.get(task.get("status"))
        if status_key:
            data[status_key] += 1

    workload = [
        {"member_name": name, **data, "capacity": capacities.get(name, 0)}
        for name, data in grouped.items()
    ]
    workload.sort(key=lambda x: x["count"], reverse=True)

    task_ids = [t["id"] for t in tasks]
    logs = db_service.get_activity_logs(project_ids, task_ids, limit=5) if project_ids else []

    return {
        "total_projects": len(projects),
        "total_tasks": len(tasks),
        "workload": workload,
        "activity_logs": enrich_logs(logs),
    }

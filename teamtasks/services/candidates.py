"""Selection of tasks an overloaded member can give away"""

from typing import List

from teamtasks.models.task import Priority, PRIORITY_RANK
from teamtasks.services.database import DatabaseService

# High priority work is never moved automatically
MOVABLE_PRIORITIES = [Priority.LOW.value, Priority.MEDIUM.value]


def select_movable_tasks(db: DatabaseService, project_id: str, member_name: str, excess: int) -> List[dict]:
    """Pick up to ``excess`` tasks to move away from ``member_name``.

    Only non-Done Low/Medium tasks qualify. Lower priority goes first, then
    older tasks; insertion order settles identical timestamps. Fewer than
    ``excess`` tasks are returned when not enough qualify.
    """
    if excess <= 0:
        return []

    tasks = db.find_active_tasks(project_id, member_name, MOVABLE_PRIORITIES)
    tasks.sort(key=lambda t: (PRIORITY_RANK[t["priority"]], t.get("created_at", ""), t.doc_id))
    return tasks[:excess]

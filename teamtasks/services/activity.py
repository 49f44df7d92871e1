"""Audit trail for task assignment changes"""

import logging
from typing import Optional

from teamtasks.services.database import DatabaseService

logger = logging.getLogger(__name__)


def assignment_message(title: str, from_name: Optional[str], to_name: Optional[str]) -> str:
    """Human readable description of an assignee change"""
    if from_name and to_name:
        return f"Task '{title}' reassigned from '{from_name}' to '{to_name}'."
    if to_name:
        return f"Task '{title}' assigned to '{to_name}'."
    return f"Task '{title}' unassigned from '{from_name}'."


def log_assignment_change(
    db: DatabaseService,
    task: dict,
    from_name: Optional[str],
    to_name: Optional[str]
) -> Optional[dict]:
    """Append an activity log entry when a task's assignee name changes.

    Returns the created entry, or None when the name did not change. Storage
    errors propagate; the task update that triggered the entry is not undone.
    """
    from_name = from_name or None
    to_name = to_name or None
    if from_name == to_name:
        return None

    entry = db.log_activity(
        message=assignment_message(task["title"], from_name, to_name),
        task_id=task["id"],
        project_id=task["project_id"],
        from_member_name=from_name,
        to_member_name=to_name,
    )
    logger.debug(f"Activity logged for task {task['id']}: {entry['message']}")
    return entry

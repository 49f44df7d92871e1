"""Capacity-aware workload rebalancing

Moves Low/Medium tasks away from members carrying more active tasks than
their capacity, towards members with free slots in the same project. Each
project is balanced on its own; there is no borrowing across projects.

Order of work is fixed so two runs over the same data make the same moves:
projects in creation order, overloaded members in team order, their tasks
by priority then age, and recipients by most free slots then name.
"""

import logging
from typing import List, Optional

from teamtasks.services.activity import log_assignment_change
from teamtasks.services.candidates import select_movable_tasks
from teamtasks.services.database import DatabaseService
from teamtasks.services.workload import calculate_workload, MemberWorkload

logger = logging.getLogger(__name__)


class ProjectNotFoundError(LookupError):
    """Project does not exist or is not owned by the caller"""


def resolve_projects(db: DatabaseService, owner_id: str, project_id: Optional[str] = None) -> List[dict]:
    """Projects a reassignment pass covers for ``owner_id``"""
    if project_id:
        project = db.get_project_by_id(project_id)
        if not project or not db.get_owned_team(project["team_id"], owner_id):
            raise ProjectNotFoundError(project_id)
        return [project]
    return db.get_user_projects(owner_id)


def pick_recipient(recipients: List[MemberWorkload]) -> Optional[MemberWorkload]:
    """Member with the most free slots, ties broken by name"""
    open_slots = [r for r in recipients if r.available > 0]
    if not open_slots:
        return None
    return min(open_slots, key=lambda r: (-r.available, r.name))


def rebalance_project(db: DatabaseService, project: dict, team: dict) -> List[dict]:
    """Run one balancing pass over a single project"""
    workload = calculate_workload(db, project["id"], team.get("members", []))
    overloaded = [w for w in workload if w.is_overloaded]
    recipients = [w for w in workload if w.available > 0]

    moved = []
    if not overloaded or not recipients:
        return moved

    for donor in overloaded:
        for task in select_movable_tasks(db, project["id"], donor.name, donor.excess):
            recipient = pick_recipient(recipients)
            if recipient is None:
                logger.info(f"Project {project['id']}: no spare capacity left, stopping")
                return moved

            updated = db.set_task_assignee(task["id"], recipient.name)
            recipient.available -= 1
            recipient.active_count += 1
            donor.active_count -= 1

            log_assignment_change(db, updated, donor.name, recipient.name)
            logger.debug(f"Task {task['id']} moved from '{donor.name}' to '{recipient.name}'")
            moved.append(updated)

    return moved


def reassign_tasks(db: DatabaseService, owner_id: str, project_id: Optional[str] = None) -> List[dict]:
    """Rebalance one owned project, or every project the caller owns.

    Raises ProjectNotFoundError before touching anything when ``project_id``
    is unknown or belongs to someone else. Returns every task whose assignee
    changed. Moves already persisted stay in place if a later write fails.
    """
    projects = resolve_projects(db, owner_id, project_id)

    reassigned = []
    for project in projects:
        team = db.get_owned_team(project["team_id"], owner_id)
        if not team:
            logger.debug(f"Skipping project {project['id']}: team not owned by {owner_id}")
            continue

        moved = rebalance_project(db, project, team)
        if moved:
            logger.info(f"Project {project['id']}: reassigned {len(moved)} task(s)")
        reassigned.extend(moved)

    return reassigned

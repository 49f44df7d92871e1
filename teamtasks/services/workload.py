"""Per-member workload snapshots for a project"""

import logging
from dataclasses import dataclass
from typing import List

from teamtasks.services.database import DatabaseService

logger = logging.getLogger(__name__)


@dataclass
class MemberWorkload:
    name: str
    role: str
    capacity: int
    active_count: int
    available: int

    @property
    def excess(self) -> int:
        return max(0, self.active_count - self.capacity)

    @property
    def is_overloaded(self) -> bool:
        return self.active_count > self.capacity


def calculate_workload(db: DatabaseService, project_id: str, members: List[dict]) -> List[MemberWorkload]:
    """Compute active (non-Done) task counts and free slots for each member.

    Results follow the order of ``members``. Tasks assigned to names that do
    not match a member are not counted anywhere. A repeated member name is
    only reported once.
    """
    workload = []
    seen = set()

    for member in members:
        name = member["name"]
        if name in seen:
            logger.warning(f"Duplicate member name '{name}' in project {project_id}, ignoring repeat")
            continue
        seen.add(name)

        capacity = member.get("capacity", 0)
        active_count = db.count_active_tasks(project_id, name)
        workload.append(MemberWorkload(
            name=name,
            role=member.get("role", ""),
            capacity=capacity,
            active_count=active_count,
            available=max(0, capacity - active_count),
        ))

    return workload

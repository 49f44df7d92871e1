"""Workload Calculator Tests"""

import pytest

from teamtasks.services.workload import calculate_workload
from tests.factories import create_member, create_tasks, task_data


@pytest.mark.unit
class TestCalculateWorkload:
    """Per-member active counts and free slots"""

    def test_counts_only_active_tasks(self, db, alpha_team, alpha_project):
        create_tasks(db, alpha_project["id"], "A", 3)
        create_tasks(db, alpha_project["id"], "A", 2, prefix="Finished", status="Done")
        create_tasks(db, alpha_project["id"], "B", 1, status="In Progress")

        workload = calculate_workload(db, alpha_project["id"], alpha_team["members"])

        assert [(w.name, w.active_count, w.available) for w in workload] == [
            ("A", 3, 0),
            ("B", 1, 1),
        ]

    def test_member_without_tasks(self, db, alpha_team, alpha_project):
        workload = calculate_workload(db, alpha_project["id"], alpha_team["members"])

        assert all(w.active_count == 0 for w in workload)
        assert [w.available for w in workload] == [2, 2]

    def test_empty_team(self, db, alpha_project):
        assert calculate_workload(db, alpha_project["id"], []) == []

    def test_unknown_assignee_not_counted(self, db, alpha_team, alpha_project):
        create_tasks(db, alpha_project["id"], "Ghost", 4)
        create_tasks(db, alpha_project["id"], None, 2, prefix="Loose")

        workload = calculate_workload(db, alpha_project["id"], alpha_team["members"])

        assert sum(w.active_count for w in workload) == 0

    def test_scoped_to_project(self, db, alpha_team, alpha_project):
        other = db.create_project(alpha_team["id"], "P2", "Second project")
        create_tasks(db, other["id"], "A", 5)

        workload = calculate_workload(db, alpha_project["id"], alpha_team["members"])

        assert workload[0].active_count == 0

    def test_overloaded_member_has_excess(self, db, alpha_team, alpha_project):
        create_tasks(db, alpha_project["id"], "A", 4)

        member = calculate_workload(db, alpha_project["id"], alpha_team["members"])[0]

        assert member.is_overloaded
        assert member.excess == 2
        assert member.available == 0

    def test_duplicate_member_names_reported_once(self, db, alpha_project):
        members = [create_member("A", capacity=1), create_member("A", capacity=5)]
        db.create_task(task_data(alpha_project["id"], "Only", "A"))

        workload = calculate_workload(db, alpha_project["id"], members)

        assert len(workload) == 1
        assert workload[0].capacity == 1

    def test_preserves_member_order(self, db, alpha_project):
        members = [create_member("Zed"), create_member("Amy"), create_member("Max")]

        workload = calculate_workload(db, alpha_project["id"], members)

        assert [w.name for w in workload] == ["Zed", "Amy", "Max"]

    def test_zero_capacity_member(self, db, alpha_project):
        members = [create_member("Idle", capacity=0)]

        member = calculate_workload(db, alpha_project["id"], members)[0]

        assert member.available == 0
        assert not member.is_overloaded

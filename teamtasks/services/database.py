"""TinyDB database service"""

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, List

from tinydb import TinyDB, Query
from tinydb.storages import MemoryStorage

from teamtasks.config import settings, MEMORY_DATABASE

logger = logging.getLogger(__name__)

DONE = "Done"


class DatabaseService:
    """TinyDB record store for teams, projects, tasks and activity logs

    Records are plain dicts keyed by a short string ``id``. Task assignment
    is a name match against a team member, never a reference to a member
    record, so renaming or removing a member leaves old tasks untouched.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        self.db: Optional[TinyDB] = None

    def initialize(self):
        """Initialize database connection"""
        if self.db is not None:
            return
        if self.db_path == MEMORY_DATABASE:
            self.db = TinyDB(storage=MemoryStorage)
        else:
            path = Path(self.db_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self.db = TinyDB(str(path))
        logger.info(f"Database connected: {self.db_path}")

    def close(self):
        if self.db is not None:
            self.db.close()
            self.db = None

    def truncate(self):
        """Drop every record (used by tests and seeding)"""
        self.initialize()
        self.db.drop_tables()

    @property
    def teams(self):
        self.initialize()
        return self.db.table("teams")

    @property
    def projects(self):
        self.initialize()
        return self.db.table("projects")

    @property
    def tasks(self):
        self.initialize()
        return self.db.table("tasks")

    @property
    def activity_logs(self):
        self.initialize()
        return self.db.table("activity_logs")

    def generate_id(self) -> str:
        return str(uuid.uuid4())[:8]

    def timestamp(self) -> str:
        return datetime.now(timezone.utc).isoformat()

    # =========================================================================
    # Team Operations
    # =========================================================================

    def create_team(self, owner_id: str, name: str, members: List[dict]) -> dict:
        """Create a new team"""
        team = {
            "id": self.generate_id(),
            "name": name,
            "owner_id": owner_id,
            "members": members,
            "created_at": self.timestamp(),
        }
        team["updated_at"] = team["created_at"]
        self.teams.insert(team)
        logger.info(f"Team created: {team['id']} ({name})")
        return team

    def get_team_by_id(self, team_id: str) -> Optional[dict]:
        Team = Query()
        return self.teams.get(Team.id == team_id)

    def get_owned_team(self, team_id: str, owner_id: str) -> Optional[dict]:
        """Get a team only if it is owned by ``owner_id``"""
        Team = Query()
        return self.teams.get((Team.id == team_id) & (Team.owner_id == owner_id))

    def get_user_teams(self, owner_id: str) -> List[dict]:
        """Get all teams owned by a user, in creation order"""
        Team = Query()
        teams = self.teams.search(Team.owner_id == owner_id)
        return sorted(teams, key=lambda t: (t.get("created_at", ""), t.doc_id))

    def update_team(self, team_id: str, updates: dict) -> Optional[dict]:
        Team = Query()
        updates["updated_at"] = self.timestamp()
        self.teams.update(updates, Team.id == team_id)
        return self.get_team_by_id(team_id)

    def delete_team(self, team_id: str) -> bool:
        Team = Query()
        return bool(self.teams.remove(Team.id == team_id))

    # =========================================================================
    # Project Operations
    # =========================================================================

    def create_project(self, team_id: str, title: str, description: str) -> dict:
        project = {
            "id": self.generate_id(),
            "team_id": team_id,
            "title": title,
            "description": description,
            "created_at": self.timestamp(),
        }
        project["updated_at"] = project["created_at"]
        self.projects.insert(project)
        logger.info(f"Project created: {project['id']} in team {team_id}")
        return project

    def get_project_by_id(self, project_id: str) -> Optional[dict]:
        Project = Query()
        return self.projects.get(Project.id == project_id)

    def get_team_projects(self, team_ids: List[str]) -> List[dict]:
        """Get projects under the given teams, in creation order"""
        Project = Query()
        projects = self.projects.search(Project.team_id.one_of(team_ids))
        return sorted(projects, key=lambda p: (p.get("created_at", ""), p.doc_id))

    def get_user_projects(self, owner_id: str) -> List[dict]:
        """Get every project under every team owned by a user"""
        team_ids = [team["id"] for team in self.get_user_teams(owner_id)]
        if not team_ids:
            return []
        return self.get_team_projects(team_ids)

    def get_owned_project_team(self, project_id: str, owner_id: str) -> Optional[dict]:
        """Get the team owning a project, or None if the caller does not own it"""
        project = self.get_project_by_id(project_id)
        if not project:
            return None
        return self.get_owned_team(project["team_id"], owner_id)

    def update_project(self, project_id: str, updates: dict) -> Optional[dict]:
        Project = Query()
        updates["updated_at"] = self.timestamp()
        self.projects.update(updates, Project.id == project_id)
        return self.get_project_by_id(project_id)

    def delete_project(self, project_id: str) -> bool:
        Project = Query()
        return bool(self.projects.remove(Project.id == project_id))

    # =========================================================================
    # Task Operations
    # =========================================================================

    def create_task(self, task_data: dict) -> dict:
        task_data["id"] = self.generate_id()
        task_data["created_at"] = self.timestamp()
        task_data["updated_at"] = task_data["created_at"]
        self.tasks.insert(task_data)
        return task_data

    def get_task_by_id(self, task_id: str) -> Optional[dict]:
        Task = Query()
        return self.tasks.get(Task.id == task_id)

    def get_project_tasks(self, project_ids: List[str]) -> List[dict]:
        Task = Query()
        return self.tasks.search(Task.project_id.one_of(project_ids))

    def count_active_tasks(self, project_id: str, member_name: str) -> int:
        """Count non-Done tasks in a project assigned to a member name"""
        Task = Query()
        return self.tasks.count(
            (Task.project_id == project_id)
            & (Task.assigned_member_name == member_name)
            & (Task.status != DONE)
        )

    def count_assigned_tasks(self, project_id: str, member_name: str) -> int:
        """Count tasks of any status in a project assigned to a member name"""
        Task = Query()
        return self.tasks.count(
            (Task.project_id == project_id) & (Task.assigned_member_name == member_name)
        )

    def find_active_tasks(self, project_id: str, member_name: str, priorities: List[str]) -> List[dict]:
        """Find non-Done tasks in a project assigned to a member with one of ``priorities``"""
        Task = Query()
        return self.tasks.search(
            (Task.project_id == project_id)
            & (Task.assigned_member_name == member_name)
            & (Task.status != DONE)
            & (Task.priority.one_of(priorities))
        )

    def update_task(self, task_id: str, updates: dict) -> Optional[dict]:
        Task = Query()
        updates["updated_at"] = self.timestamp()
        self.tasks.update(updates, Task.id == task_id)
        return self.get_task_by_id(task_id)

    def set_task_assignee(self, task_id: str, member_name: Optional[str]) -> Optional[dict]:
        """Set ``assigned_member_name`` on a task and persist"""
        return self.update_task(task_id, {"assigned_member_name": member_name})

    def delete_task(self, task_id: str) -> bool:
        Task = Query()
        return bool(self.tasks.remove(Task.id == task_id))

    # =========================================================================
    # Activity Log Operations
    # =========================================================================

    def log_activity(
        self,
        message: str,
        task_id: str,
        project_id: str,
        from_member_name: str = None,
        to_member_name: str = None
    ) -> dict:
        """Append an immutable activity log entry"""
        entry = {
            "id": self.generate_id(),
            "message": message,
            "task_id": task_id,
            "project_id": project_id,
            "from_member_name": from_member_name,
            "to_member_name": to_member_name,
            "created_at": self.timestamp(),
        }
        self.activity_logs.insert(entry)
        return entry

    def get_activity_logs(
        self,
        project_ids: List[str],
        task_ids: Optional[List[str]] = None,
        limit: Optional[int] = None
    ) -> List[dict]:
        """Get activity logs recorded in ``project_ids`` or about ``task_ids``, newest first"""
        Log = Query()
        logs = self.activity_logs.search(
            Log.project_id.one_of(project_ids) | Log.task_id.one_of(task_ids or [])
        )
        logs = sorted(logs, key=lambda x: (x.get("created_at", ""), x.doc_id), reverse=True)
        if limit is not None:
            logs = logs[:limit]
        return logs


db_service = DatabaseService(settings.database_path)

"""API Routes"""

from teamtasks.routes import teams, projects, tasks, activity, dashboard

__all__ = ["teams", "projects", "tasks", "activity", "dashboard"]

"""Services module"""

from teamtasks.services.database import db_service
from teamtasks.services.reassignment import reassign_tasks, ProjectNotFoundError

__all__ = ["db_service", "reassign_tasks", "ProjectNotFoundError"]

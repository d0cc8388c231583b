"""
Tasks service
"""

from typing import Optional

from models.task import Task
from services.api_service import ApiService
from services.base_service import BaseResourceService

class TasksService(BaseResourceService[Task]):

    def __init__(self, api: Optional[ApiService] = None):
        super().__init__("tasks", Task, api)

# Global service instance
_tasks_service: Optional[TasksService] = None

def get_tasks_service() -> TasksService:
    """Get the global tasks service instance"""
    global _tasks_service
    if _tasks_service is None:
        _tasks_service = TasksService()
    return _tasks_service

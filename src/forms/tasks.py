"""
Task creation form
"""

import math
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from pydantic import Field

from forms.base import BaseForm
from models.enums import TaskPriority, TaskStatus, TaskType
from models.organization import User
from models.task import Task
from services.tasks_service import TasksService


class NewTaskForm(BaseForm):
    action: ClassVar[str] = "create_task"
    failure_message: ClassVar[str] = "Failed to create task"
    keep_on_reset: ClassVar[Tuple[str, ...]] = ("current_user_id", "users")

    title: str = ""
    description: str = ""
    task_type: TaskType = TaskType.ADMINISTRATIVE
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    due_date: str = ""
    estimated_hours: str = ""
    assigned_to: str = ""
    case_id: str = ""
    contract_id: str = ""
    current_user_id: Optional[str] = None
    users: List[User] = Field(default_factory=list)

    def filter_users(self, query: str) -> List[User]:
        """Assignee search by name or email"""
        needle = query.lower()
        return [
            user for user in self.users
            if needle in user.full_name.lower() or needle in user.email.lower()
        ]

    def parsed_hours(self) -> Optional[float]:
        if not self.estimated_hours.strip():
            return None
        hours = float(self.estimated_hours)
        if not math.isfinite(hours):
            raise ValueError(f"Estimated hours must be finite, got: {self.estimated_hours!r}")
        return hours

    def validation_errors(self) -> Dict[str, str]:
        if not self.title or not self.assigned_to:
            return {"required": "Please fill in all required fields."}
        try:
            self.parsed_hours()
        except ValueError:
            return {"estimated_hours": "Estimated hours must be a number"}
        return {}

    def build_payload(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "task_type": self.task_type.value,
            "priority": self.priority.value,
            "status": self.status.value,
            "due_date": self.due_date or None,
            "assigned_to": self.assigned_to,
            "assigned_by": self.current_user_id,
            "estimated_hours": self.parsed_hours(),
            "case_id": self.case_id or None,
            "contract_id": self.contract_id or None,
        }

    async def perform(self) -> Task:
        return await TasksService(self._api).create(self.build_payload())

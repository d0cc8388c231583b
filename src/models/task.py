"""
Task Pydantic model
"""

from typing import Optional
from models.base import Record
from models.enums import TaskType, TaskPriority, TaskStatus


class Task(Record):
    id: str
    title: str
    description: Optional[str] = None
    task_type: TaskType = TaskType.OTHER
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    due_date: Optional[str] = None
    completed_date: Optional[str] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    assigned_to: Optional[str] = None
    assigned_by: Optional[str] = None
    case_id: Optional[str] = None
    contract_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

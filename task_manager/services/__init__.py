"""Domain services for Task Manager."""
from .base import BaseService
from .filters import build_task_predicate
from .labels import LabelService
from .relationships import RelationshipMaintainer, TaskReferences
from .task_statuses import TaskStatusService
from .tasks import TaskService
from .users import UserService

__all__ = [
    "BaseService",
    "build_task_predicate",
    "LabelService",
    "RelationshipMaintainer",
    "TaskReferences",
    "TaskStatusService",
    "TaskService",
    "UserService",
]

"""Database models for Task Manager."""
from .user import User
from .task_status import TaskStatus
from .label import Label
from .task import Task, task_labels

__all__ = ["User", "TaskStatus", "Label", "Task", "task_labels"]

"""
Pydantic schemas for tasks.
"""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator

from .nullable import PatchModel


def _not_blank(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


class TaskCreate(BaseModel):
    """Schema for creating a task"""
    index: Optional[int] = Field(None, description="Display position on the board")
    assignee_id: Optional[int] = Field(None, description="ID of the assigned user")
    title: str = Field(..., min_length=1, max_length=255, description="Task title")
    content: Optional[str] = Field(None, description="Task description")
    status: str = Field(..., min_length=1, description="Slug of the task status")
    label_ids: List[int] = Field(default_factory=list, description="IDs of task labels")

    @field_validator("title", "status")
    @classmethod
    def check_not_blank(cls, value):
        return _not_blank(value)


class TaskUpdate(PatchModel):
    """Schema for updating a task, omitted fields are left untouched"""
    index: Optional[int] = Field(None, description="Display position on the board")
    assignee_id: Optional[int] = Field(None, description="ID of the assigned user")
    title: Optional[str] = Field(None, min_length=1, max_length=255, description="Task title")
    content: Optional[str] = Field(None, description="Task description")
    status: Optional[str] = Field(None, min_length=1, description="Slug of the task status")
    label_ids: Optional[List[int]] = Field(None, description="IDs of task labels")

    @field_validator("title", "status")
    @classmethod
    def check_not_blank(cls, value):
        return _not_blank(value)


class TaskResponse(BaseModel):
    """Schema for task response"""
    id: int = Field(..., description="Task ID")
    index: Optional[int] = Field(None, description="Display position on the board")
    title: str = Field(..., description="Task title")
    content: Optional[str] = Field(None, description="Task description")
    status: str = Field(..., description="Slug of the task status")
    assignee_id: Optional[int] = Field(None, description="ID of the assigned user")
    label_ids: List[int] = Field(default_factory=list, description="IDs of task labels")
    created_at: datetime = Field(..., description="Task creation timestamp")

    @classmethod
    def from_task(cls, task) -> "TaskResponse":
        return cls(
            id=task.id,
            index=task.index,
            title=task.name,
            content=task.description,
            status=task.task_status.slug,
            assignee_id=task.assignee_id,
            label_ids=sorted(label.id for label in task.labels),
            created_at=task.created_at,
        )


class TaskFilter(BaseModel):
    """Optional conditions for task listing, absent ones do not restrict"""
    title_cont: Optional[str] = Field(None, description="Case-insensitive substring of the title")
    assignee_id: Optional[int] = Field(None, description="ID of the assigned user")
    status: Optional[str] = Field(None, description="Exact task status slug")
    label_id: Optional[int] = Field(None, description="ID of a label the task carries")

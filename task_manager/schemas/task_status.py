"""
Pydantic schemas for task statuses.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from .nullable import PatchModel


class TaskStatusCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Status name")
    slug: str = Field(..., min_length=1, max_length=255, description="Unique status slug")


class TaskStatusUpdate(PatchModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255, description="Status name")
    slug: Optional[str] = Field(None, min_length=1, max_length=255, description="Unique status slug")


class TaskStatusResponse(BaseModel):
    id: int
    name: str
    slug: str
    created_at: datetime

    class Config:
        from_attributes = True

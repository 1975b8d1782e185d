"""
Pydantic schemas for labels.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from .nullable import PatchModel


class LabelCreate(BaseModel):
    name: str = Field(..., min_length=3, max_length=1000, description="Unique label name")


class LabelUpdate(PatchModel):
    name: Optional[str] = Field(None, min_length=3, max_length=1000, description="Unique label name")


class LabelResponse(BaseModel):
    id: int
    name: str
    created_at: datetime

    class Config:
        from_attributes = True

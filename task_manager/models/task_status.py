from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..core.database import Base


class TaskStatus(Base):
    """Task status model for database"""
    __tablename__ = "task_statuses"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, index=True, nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    tasks = relationship("Task", viewonly=True, order_by="Task.id")

    def __repr__(self):
        return f"<TaskStatus(id={self.id}, slug='{self.slug}')>"

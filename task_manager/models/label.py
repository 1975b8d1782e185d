from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..core.database import Base


class Label(Base):
    """Label model for database"""
    __tablename__ = "labels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(1000), unique=True, index=True, nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    tasks = relationship(
        "Task",
        secondary="task_labels",
        viewonly=True,
        order_by="Task.id"
    )

    def __repr__(self):
        return f"<Label(id={self.id}, name='{self.name}')>"

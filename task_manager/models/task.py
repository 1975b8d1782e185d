from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..core.database import Base


task_labels = Table(
    "task_labels",
    Base.metadata,
    Column("task_id", Integer, ForeignKey("tasks.id"), primary_key=True),
    Column("label_id", Integer, ForeignKey("labels.id"), primary_key=True),
)


class Task(Base):
    """
    Task model for database

    Only the task side of each association is writable. The ``tasks``
    collections on TaskStatus, Label and User are read back from these
    columns, see services.relationships.
    """
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    index = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)

    task_status_id = Column(
        Integer,
        ForeignKey("task_statuses.id"),
        nullable=False,
        index=True
    )
    assignee_id = Column(
        Integer,
        ForeignKey("users.id"),
        nullable=True,
        index=True
    )

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    task_status = relationship("TaskStatus")
    assignee = relationship("User")
    labels = relationship("Label", secondary=task_labels, collection_class=set)

    def __eq__(self, other):
        if not isinstance(other, Task):
            return NotImplemented
        return (self.name, self.task_status) == (other.name, other.task_status)

    def __hash__(self):
        return hash((self.name, self.task_status))

    def __repr__(self):
        return f"<Task(id={self.id}, name='{self.name}', status_id={self.task_status_id})>"

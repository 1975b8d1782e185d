import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.exceptions import ResourceNotFoundError
from ..models import Task
from ..schemas.task import TaskCreate, TaskFilter, TaskUpdate
from .base import BaseService
from .filters import build_task_predicate
from .relationships import RelationshipMaintainer

logger = logging.getLogger(__name__)


class TaskService(BaseService):
    """CRUD and filtered listing for tasks."""

    def __init__(self, db: Session, maintainer: Optional[RelationshipMaintainer] = None):
        super().__init__(db)
        self.maintainer = maintainer or RelationshipMaintainer(db)

    def list(self, task_filter: Optional[TaskFilter] = None) -> List[Task]:
        return (
            self.db.query(Task)
            .filter(build_task_predicate(task_filter))
            .order_by(Task.id)
            .all()
        )

    def get(self, task_id: int) -> Task:
        task = self.db.get(Task, task_id)
        if task is None:
            raise ResourceNotFoundError(f"Task with id {task_id} not found")
        return task

    def create(self, data: TaskCreate) -> Task:
        with self.transaction():
            task = Task(
                name=data.title,
                index=data.index,
                description=data.content,
                task_status=self.maintainer.resolve_status(data.status),
                labels=self.maintainer.resolve_labels(data.label_ids),
            )
            if data.assignee_id is not None:
                task.assignee = self.maintainer.resolve_assignee(data.assignee_id)
            self.db.add(task)
            self.maintainer.attach(task)
        self.db.refresh(task)
        logger.info(f"Created task id={task.id} in status '{data.status}'")
        return task

    def update(self, task_id: int, data: TaskUpdate) -> Task:
        task = self.get(task_id)

        title = data.field("title").require("title")
        status = data.field("status").require("status")
        label_ids = data.field("label_ids").require("label_ids")
        assignee_id = data.field("assignee_id")

        previous = self.maintainer.snapshot(task)

        with self.transaction():
            title.if_present(lambda value: setattr(task, "name", value))
            data.field("index").if_present(lambda value: setattr(task, "index", value))
            data.field("content").if_present(lambda value: setattr(task, "description", value))
            status.if_present(
                lambda value: setattr(task, "task_status", self.maintainer.resolve_status(value))
            )
            if assignee_id.is_present:
                task.assignee = (
                    None if assignee_id.is_null
                    else self.maintainer.resolve_assignee(assignee_id.get())
                )
            label_ids.if_present(
                lambda value: setattr(task, "labels", self.maintainer.resolve_labels(value))
            )
            self.maintainer.reattach(task, previous.status, previous.assignee, previous.labels)
        self.db.refresh(task)
        logger.info(f"Updated task id={task.id}")
        return task

    def delete(self, task_id: int) -> None:
        task = self.get(task_id)
        with self.transaction():
            self.maintainer.detach(task)
        logger.info(f"Deleted task id={task_id}")

import logging
from typing import List

from ..core.exceptions import ResourceNotFoundError
from ..models import TaskStatus
from ..schemas.task_status import TaskStatusCreate, TaskStatusUpdate
from .base import BaseService

logger = logging.getLogger(__name__)


class TaskStatusService(BaseService):

    def list(self) -> List[TaskStatus]:
        return self.db.query(TaskStatus).order_by(TaskStatus.id).all()

    def get(self, status_id: int) -> TaskStatus:
        status = self.db.get(TaskStatus, status_id)
        if status is None:
            raise ResourceNotFoundError(f"Task status with id {status_id} not found")
        return status

    def create(self, data: TaskStatusCreate) -> TaskStatus:
        status = TaskStatus(name=data.name, slug=data.slug)
        with self.transaction():
            self.db.add(status)
        self.db.refresh(status)
        logger.info(f"Created task status '{status.slug}' (id={status.id})")
        return status

    def update(self, status_id: int, data: TaskStatusUpdate) -> TaskStatus:
        status = self.get(status_id)
        name = data.field("name").require("name")
        slug = data.field("slug").require("slug")
        with self.transaction():
            name.if_present(lambda value: setattr(status, "name", value))
            slug.if_present(lambda value: setattr(status, "slug", value))
        self.db.refresh(status)
        return status

    def delete(self, status_id: int) -> None:
        status = self.get(status_id)
        with self.transaction():
            self.db.delete(status)
        logger.info(f"Deleted task status id={status_id}")

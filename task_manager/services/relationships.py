"""
Relationship maintenance between tasks and the entities they reference.

A task owns its references (status, assignee, labels). The inverse
``tasks`` collections on TaskStatus, User and Label are read-only and loaded
from the foreign keys, so keeping them symmetric means flushing the task's
references and then expiring every back-set the task entered or left. The
next access re-queries it.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from sqlalchemy.orm import Session

from ..core.exceptions import InvalidRequestError
from ..models import Label, Task, TaskStatus, User

logger = logging.getLogger(__name__)


@dataclass
class TaskReferences:
    """References held by a task at one point in time"""
    status: Optional[TaskStatus] = None
    assignee: Optional[User] = None
    labels: Set[Label] = field(default_factory=set)


class RelationshipMaintainer:
    """Resolves task references and keeps their back-sets consistent."""

    def __init__(self, db: Session):
        self.db = db

    # -- Resolution by natural key --

    def resolve_status(self, slug: str) -> TaskStatus:
        status = self.db.query(TaskStatus).filter(TaskStatus.slug == slug).first()
        if status is None:
            raise InvalidRequestError(f"Task status with slug '{slug}' does not exist")
        return status

    def resolve_assignee(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise InvalidRequestError(f"User with id {user_id} does not exist")
        return user

    def resolve_assignee_by_email(self, email: str) -> User:
        user = self.db.query(User).filter(User.email == email).first()
        if user is None:
            raise InvalidRequestError(f"User with email '{email}' does not exist")
        return user

    def resolve_labels(self, label_ids: Iterable[int]) -> Set[Label]:
        wanted = set(label_ids)
        if not wanted:
            return set()
        labels = set(self.db.query(Label).filter(Label.id.in_(wanted)).all())
        missing = wanted - {label.id for label in labels}
        if missing:
            raise InvalidRequestError(f"Labels with ids {sorted(missing)} do not exist")
        return labels

    # -- Back-set maintenance --

    @staticmethod
    def snapshot(task: Task) -> TaskReferences:
        return TaskReferences(
            status=task.task_status,
            assignee=task.assignee,
            labels=set(task.labels),
        )

    def attach(self, task: Task) -> None:
        """Register a new task in the back-sets of everything it references."""
        self.db.flush()
        self._refresh(self._referenced(TaskReferences(task.task_status, task.assignee, set(task.labels))))
        logger.debug(f"Attached {task!r}")

    def reattach(
        self,
        task: Task,
        previous_status: Optional[TaskStatus],
        previous_assignee: Optional[User],
        previous_labels: Iterable[Label],
    ) -> None:
        """Move an updated task from its previous back-sets to its current ones."""
        # Current references are looked up again by natural key rather than
        # trusting the objects the update left on the task.
        task.task_status = self.resolve_status(task.task_status.slug)
        if task.assignee is not None:
            task.assignee = self.resolve_assignee_by_email(task.assignee.email)
        task.labels = self.resolve_labels(label.id for label in task.labels)

        self.db.flush()

        previous = TaskReferences(previous_status, previous_assignee, set(previous_labels))
        current = TaskReferences(task.task_status, task.assignee, set(task.labels))
        self._refresh(self._referenced(previous) + self._referenced(current))
        logger.debug(f"Reattached {task!r}")

    def detach(self, task: Task) -> None:
        """Delete a task and drop it from every back-set it belonged to."""
        references = self.snapshot(task)
        self.db.delete(task)
        self.db.flush()
        self._refresh(self._referenced(references))
        logger.debug(f"Detached {task!r}")

    @staticmethod
    def _referenced(references: TaskReferences) -> List[object]:
        entities = [references.status, references.assignee, *references.labels]
        return [entity for entity in entities if entity is not None]

    def _refresh(self, entities: Iterable[object]) -> None:
        seen = set()
        for entity in entities:
            if id(entity) in seen or entity not in self.db:
                continue
            seen.add(id(entity))
            self.db.expire(entity, ["tasks"])

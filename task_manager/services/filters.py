"""
Task filter builder.

Turns a :class:`TaskFilter` into one SQLAlchemy boolean clause. Each present
field adds an independent condition and the conditions are ANDed, so the
order in which they are given never changes the result. An empty filter
yields ``true()`` and therefore the full listing.
"""
import logging

from sqlalchemy import and_, true
from sqlalchemy.sql.elements import ColumnElement

from ..models import Label, Task, TaskStatus
from ..schemas.task import TaskFilter

logger = logging.getLogger(__name__)


def status_slug_equals(slug: str) -> ColumnElement[bool]:
    return Task.task_status.has(TaskStatus.slug == slug)


def assignee_id_equals(assignee_id: int) -> ColumnElement[bool]:
    # NULL = x is never true, unassigned tasks drop out
    return Task.assignee_id == assignee_id


def title_contains(fragment: str) -> ColumnElement[bool]:
    return Task.name.icontains(fragment, autoescape=True)


def label_id_equals(label_id: int) -> ColumnElement[bool]:
    return Task.labels.any(Label.id == label_id)


def build_task_predicate(task_filter: TaskFilter | None) -> ColumnElement[bool]:
    """Build the WHERE clause for a task listing."""
    if task_filter is None:
        return true()

    conditions = []
    if task_filter.status is not None:
        conditions.append(status_slug_equals(task_filter.status))
    if task_filter.assignee_id is not None:
        conditions.append(assignee_id_equals(task_filter.assignee_id))
    if task_filter.title_cont is not None:
        conditions.append(title_contains(task_filter.title_cont))
    if task_filter.label_id is not None:
        conditions.append(label_id_equals(task_filter.label_id))

    logger.debug(f"Built task filter with {len(conditions)} condition(s): {task_filter}")

    if not conditions:
        return true()
    return and_(*conditions)

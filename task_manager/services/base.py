import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.exceptions import ResourceConflictError

logger = logging.getLogger(__name__)


class BaseService:
    """Service bound to one database session.

    Every write goes through :meth:`transaction`, so the entity changes and
    the back-set refreshes of one request commit together or not at all.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        try:
            yield self.db
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Write rejected by database constraint: {e.orig}")
            raise ResourceConflictError(
                "Operation violates a uniqueness or reference constraint"
            ) from e
        except Exception:
            self.db.rollback()
            raise

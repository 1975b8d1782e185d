"""
Default data created on startup.
"""
import logging
from sqlalchemy.orm import Session

from ..models import Label, TaskStatus, User
from ..utils.security import get_password_hash
from .config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_TASK_STATUSES = [
    ("Draft", "draft"),
    ("ToReview", "to_review"),
    ("ToBeFixed", "to_be_fixed"),
    ("ToPublish", "to_publish"),
    ("Published", "published"),
]

DEFAULT_LABELS = ["feature", "bug"]


def seed_defaults(db: Session) -> None:
    """Create the admin user, default statuses and labels if they are missing."""
    settings = get_settings()

    if not db.query(User).filter(User.email == settings.admin_email).first():
        db.add(User(
            email=settings.admin_email,
            first_name="Admin",
            last_name="Admin",
            password_digest=get_password_hash(settings.admin_password),
        ))
        logger.info(f"Seeded admin user {settings.admin_email}")

    existing_slugs = {slug for (slug,) in db.query(TaskStatus.slug).all()}
    for name, slug in DEFAULT_TASK_STATUSES:
        if slug not in existing_slugs:
            db.add(TaskStatus(name=name, slug=slug))
            logger.info(f"Seeded task status '{slug}'")

    existing_labels = {name for (name,) in db.query(Label.name).all()}
    for name in DEFAULT_LABELS:
        if name not in existing_labels:
            db.add(Label(name=name))
            logger.info(f"Seeded label '{name}'")

    db.commit()

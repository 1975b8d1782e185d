import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DATA"] = "false"

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from task_manager.core.database import Base, create_db_engine, get_db
from task_manager.core.seed import seed_defaults
from task_manager.main import app
from task_manager.models import Label, TaskStatus, User
from task_manager.schemas.task import TaskCreate
from task_manager.services.tasks import TaskService
from task_manager.utils.security import create_access_token, get_password_hash

PASSWORD = "secret-password"


@pytest.fixture()
def engine(tmp_path: Path):
    """Per-test SQLite database file with all tables created."""
    db_engine = create_db_engine(f"sqlite:///{tmp_path / 'tasks.sqlite3'}")
    Base.metadata.create_all(bind=db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory) -> Session:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory) -> TestClient:
    """TestClient whose requests run against the per-test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def defaults(db: Session) -> dict:
    """Default statuses and labels, keyed by slug / name."""
    seed_defaults(db)
    return {
        "statuses": {status.slug: status for status in db.query(TaskStatus).all()},
        "labels": {label.name: label for label in db.query(Label).all()},
    }


def make_user(db: Session, email: str, first_name: str = "Test") -> User:
    user = User(
        email=email,
        first_name=first_name,
        last_name="User",
        password_digest=get_password_hash(PASSWORD),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def user(db: Session) -> User:
    return make_user(db, "alice@example.com", "Alice")


@pytest.fixture()
def other_user(db: Session) -> User:
    return make_user(db, "bob@example.com", "Bob")


@pytest.fixture()
def auth_headers(user: User) -> dict:
    token = create_access_token({"sub": user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def make_task(db: Session):
    """Create a task through the service layer."""
    service = TaskService(db)

    def _make(title: str, status: str = "draft", assignee=None, labels=(), **extra):
        return service.create(TaskCreate(
            title=title,
            status=status,
            assignee_id=assignee.id if assignee is not None else None,
            label_ids=[label.id for label in labels],
            **extra,
        ))

    return _make

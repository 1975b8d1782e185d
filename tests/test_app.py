from task_manager.core.seed import DEFAULT_LABELS, DEFAULT_TASK_STATUSES, seed_defaults
from task_manager.models import Label, TaskStatus, User


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "connected"


def test_seed_is_idempotent(db):
    seed_defaults(db)
    seed_defaults(db)

    assert db.query(TaskStatus).count() == len(DEFAULT_TASK_STATUSES)
    assert db.query(Label).count() == len(DEFAULT_LABELS)
    assert db.query(User).count() == 1

"""Demo data seeding tests."""

from scripts.seed_demo_data import DEMO_EMAIL, DEMO_PASSWORD, seed
from todogenie.models import Task


def test_seed_is_repeatable(db):
    first = seed(db)
    second = seed(db)

    assert first.user_id == second.user_id
    assert db.query(Task).filter_by(user_id=first.user_id).count() == 5


def test_seeded_user_can_log_in(client, db):
    seed(db)

    response = client.post("/api/auth/login", json={"email": DEMO_EMAIL, "password": DEMO_PASSWORD})
    assert response.status_code == 200

    token = response.json()["token"]
    tasks = client.get(
        "/api/tasks",
        headers={"Authorization": f"Bearer {token}"},
        params={"filter_status": "complete"},
    )
    assert len(tasks.json()) == 2

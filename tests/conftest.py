"""Pytest fixtures shared across unit and Django integration tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest
from django.contrib.auth import get_user_model


@pytest.fixture
def records() -> list[dict[str, object]]:
    """Return three chronologically ordered exam records for one student."""

    return [
        {
            "sitting": "exam1",
            "total_scaled-score": 480,
            "total_school-rank": 120,
            "language_scaled-score": 101,
            "language_school-rank": 88,
            "language_raw-score": 98,
        },
        {
            "sitting": "exam2",
            "total_scaled-score": 510,
            "total_school-rank": 95,
            "language_scaled-score": 108,
            "language_raw-score": 104,
        },
        {
            "sitting": "exam3",
            "total_scaled-score": 495,
            "total_school-rank": 101,
            "language_scaled-score": 104,
            "language_school-rank": 79,
        },
    ]


@pytest.fixture
def user(db):
    """Return a User that can log in."""

    user_model = get_user_model()
    return user_model.objects.create_user(username="alice", password="password")


@pytest.fixture
def auth_client(client, user):
    """Return a Django test client authenticated as the default test user."""

    client.force_login(user)
    return client


@pytest.fixture
def student(db, records):
    """Return a stored Student with the `records` fixture saved as exam records.

    Records are saved out of order to prove the store sorts by sitting order.
    """

    from grades.models import ExamRecord, Student

    stored = Student.objects.create(student_number="20240117", name="Li Hua", grade="Grade 11", class_name="Class 3")
    for order, record in reversed(list(enumerate(records, start=1))):
        scores = {key: value for key, value in record.items() if key != "sitting"}
        ExamRecord.objects.create(student=stored, sitting=record["sitting"], sitting_order=order, scores=scores)
    return stored


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching Django, database, views, or templates.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )

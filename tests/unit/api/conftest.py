"""Fixtures for REST API route tests."""

from datetime import date
from typing import Any, Callable, Generator

import pytest
from fastapi.testclient import TestClient

from booking_api.dependencies import get_today, reset_services
from booking_api.main import app


@pytest.fixture
def client(seeded_db: Any, today: date) -> Generator[TestClient, None, None]:
    """Test client backed by the seeded mock tables, with today pinned."""
    reset_services()
    app.dependency_overrides[get_today] = lambda: today
    yield TestClient(app)
    app.dependency_overrides.clear()
    reset_services()


@pytest.fixture
def auth_headers(make_token: Callable[..., str]) -> dict[str, str]:
    """Authorization header for a regular traveller."""
    return {"Authorization": f"Bearer {make_token(sub='user-traveller-1')}"}


@pytest.fixture
def admin_headers(make_token: Callable[..., str]) -> dict[str, str]:
    """Authorization header for a back-office administrator."""
    return {"Authorization": f"Bearer {make_token(sub='admin-1', role='admin')}"}

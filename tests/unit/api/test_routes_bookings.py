"""Unit tests for traveller booking routes.

Tests for:
- POST /api/bookings - Create booking (session required)
- GET /api/bookings/me - Caller's bookings (session required)
"""

from decimal import Decimal
from typing import Any, Callable

from fastapi.testclient import TestClient
from starlette.status import (
    HTTP_200_OK,
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
)

STAY_REQUEST = {
    "listing_id": "LST-STAY-001",
    "booking_date": "2025-03-01",
    "check_out_date": "2025-03-05",
    "guests": 2,
    "payment_plan": "lipa_mdogo_mdogo",
}


class TestCreateBooking:
    """Tests for POST /api/bookings."""

    def test_creates_stay_booking(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post("/api/bookings", json=STAY_REQUEST, headers=auth_headers)
        assert response.status_code == HTTP_201_CREATED

        data = response.json()
        assert data["booking_id"].startswith("BKG-")
        assert data["user_id"] == "user-traveller-1"
        assert data["payment_status"] == "pending"
        assert data["payment_plan"] == "lipa_mdogo_mdogo"
        assert Decimal(data["total_amount"]) == Decimal("800")

    def test_dates_become_unselectable(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        client.post("/api/bookings", json=STAY_REQUEST, headers=auth_headers)

        response = client.get("/api/listings/LST-STAY-001/booked-dates")

        assert "2025-03-05" in response.json()["dates"]

    def test_requires_session(self, client: TestClient) -> None:
        response = client.post("/api/bookings", json=STAY_REQUEST)
        assert response.status_code == HTTP_401_UNAUTHORIZED

        assert response.json()["error_code"] == "ERR_AUTH_001"

    def test_expired_session(
        self, client: TestClient, make_token: Callable[..., str]
    ) -> None:
        headers = {"Authorization": f"Bearer {make_token(exp=1_000_000_000)}"}

        response = client.post("/api/bookings", json=STAY_REQUEST, headers=headers)

        assert response.status_code == HTTP_401_UNAUTHORIZED
        assert response.json()["error_code"] == "ERR_AUTH_002"

    def test_overlapping_range_conflicts(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        body = {**STAY_REQUEST, "booking_date": "2025-02-05", "check_out_date": "2025-02-15"}

        response = client.post("/api/bookings", json=body, headers=auth_headers)

        assert response.status_code == HTTP_409_CONFLICT
        assert response.json()["error_code"] == "ERR_001"

    def test_booked_start_date(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        body = {**STAY_REQUEST, "booking_date": "2025-02-12", "check_out_date": "2025-02-15"}

        response = client.post("/api/bookings", json=body, headers=auth_headers)

        assert response.status_code == HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "ERR_002"

    def test_stay_without_checkout(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        body = {"listing_id": "LST-STAY-001", "booking_date": "2025-03-01"}

        response = client.post("/api/bookings", json=body, headers=auth_headers)

        assert response.status_code == HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "ERR_004"

    def test_too_many_guests(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        body = {**STAY_REQUEST, "guests": 20}

        response = client.post("/api/bookings", json=body, headers=auth_headers)

        assert response.status_code == HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "ERR_003"

    def test_checkout_before_start_is_validation_error(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        body = {**STAY_REQUEST, "check_out_date": "2025-02-25"}

        response = client.post("/api/bookings", json=body, headers=auth_headers)

        assert response.status_code == 422

    def test_unknown_listing(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        body = {**STAY_REQUEST, "listing_id": "LST-NOPE"}

        response = client.post("/api/bookings", json=body, headers=auth_headers)

        assert response.status_code == HTTP_404_NOT_FOUND


class TestListMyBookings:
    """Tests for GET /api/bookings/me."""

    def test_returns_own_bookings(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        seeded_db: Any,
        booking_item: Callable[..., dict[str, Any]],
    ) -> None:
        seeded_db.put_item("bookings", booking_item("BKG-OTHER", user_id="someone-else"))

        response = client.get("/api/bookings/me", headers=auth_headers)
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["total_count"] == 1
        assert data["bookings"][0]["booking_id"] == "BKG-EXISTING01"

    def test_requires_session(self, client: TestClient) -> None:
        response = client.get("/api/bookings/me")

        assert response.status_code == HTTP_401_UNAUTHORIZED

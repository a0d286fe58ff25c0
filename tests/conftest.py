"""Pytest configuration and fixtures for Safari Bookings backend tests.

This module provides reusable fixtures for testing:
- DynamoDB mocking with moto
- Sample listing and booking data
- Bearer tokens shaped like the hosted auth provider's JWTs
"""

import base64
import json
import os
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Callable, Generator

import boto3
import pytest
from moto import mock_aws

# === Environment Setup ===

# Set environment variables for testing before imports
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")
os.environ.setdefault("DYNAMODB_TABLE_PREFIX", "test-booking")

# Only set fake credentials for moto if no real credentials are present
if not os.environ.get("AWS_PROFILE") and not os.environ.get("AWS_ACCESS_KEY_ID"):
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")


# === DynamoDB Fixtures ===


@pytest.fixture(autouse=True)
def reset_dynamodb_singleton() -> Generator[None, None, None]:
    """Reset DynamoDB singleton before and after each test.

    This ensures tests using mock_aws get a fresh service instance
    inside the mock context rather than reusing a singleton from
    a previous test or non-mocked context.
    """
    from booking_core.services.dynamodb import reset_dynamodb_service

    reset_dynamodb_service()
    yield
    reset_dynamodb_service()


@pytest.fixture
def aws_credentials() -> None:
    """Mocked AWS Credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "eu-west-1"


@pytest.fixture
def dynamodb_client(aws_credentials: None) -> Generator[Any, None, None]:
    """Create a mocked DynamoDB client."""
    with mock_aws():
        client = boto3.client("dynamodb", region_name="eu-west-1")
        yield client


@pytest.fixture
def create_tables(dynamodb_client: Any) -> None:
    """Create all required DynamoDB tables for testing."""
    tables = [
        {
            "TableName": "test-booking-listings",
            "KeySchema": [{"AttributeName": "listing_id", "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": "listing_id", "AttributeType": "S"},
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
        {
            "TableName": "test-booking-bookings",
            "KeySchema": [{"AttributeName": "booking_id", "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": "booking_id", "AttributeType": "S"},
                {"AttributeName": "listing_id", "AttributeType": "S"},
                {"AttributeName": "user_id", "AttributeType": "S"},
            ],
            "GlobalSecondaryIndexes": [
                {
                    "IndexName": "listing_id-index",
                    "KeySchema": [{"AttributeName": "listing_id", "KeyType": "HASH"}],
                    "Projection": {"ProjectionType": "ALL"},
                },
                {
                    "IndexName": "user_id-index",
                    "KeySchema": [{"AttributeName": "user_id", "KeyType": "HASH"}],
                    "Projection": {"ProjectionType": "ALL"},
                },
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
    ]

    for table_config in tables:
        dynamodb_client.create_table(**table_config)


@pytest.fixture
def db(create_tables: None) -> Any:
    """DynamoDBService bound to the mocked tables."""
    from booking_core.services.dynamodb import get_dynamodb_service

    return get_dynamodb_service()


# === Sample Data Fixtures ===


@pytest.fixture
def stay_item() -> dict[str, Any]:
    """A published stay with no availability whitelist."""
    return {
        "listing_id": "LST-STAY-001",
        "title": "Serengeti Tented Camp",
        "category": "stay",
        "sub_category": "tented_camp",
        "price": Decimal("100.00"),
        "status": "published",
        "location": "Serengeti, Tanzania",
    }


@pytest.fixture
def tour_item() -> dict[str, Any]:
    """A published tour open on three dates only."""
    return {
        "listing_id": "LST-TOUR-001",
        "title": "Kilimanjaro Day Hike",
        "category": "tour",
        "price": Decimal("250.00"),
        "status": "published",
        "availability": ["2025-02-10", "2025-02-11", "2025-02-12"],
        "location": "Moshi, Tanzania",
    }


@pytest.fixture
def volunteer_item() -> dict[str, Any]:
    """A published volunteer placement."""
    return {
        "listing_id": "LST-VOL-001",
        "title": "Arusha School Teaching",
        "category": "volunteer",
        "price": Decimal("40.00"),
        "status": "published",
    }


@pytest.fixture
def draft_item() -> dict[str, Any]:
    """A stay that has not been published yet."""
    return {
        "listing_id": "LST-DRAFT-001",
        "title": "Zanzibar Beach Villa",
        "category": "stay",
        "price": Decimal("180.00"),
        "status": "draft",
    }


@pytest.fixture
def booking_item() -> Callable[..., dict[str, Any]]:
    """Factory for stored booking items."""

    def _make(
        booking_id: str,
        listing_id: str = "LST-STAY-001",
        booking_date: str = "2025-02-10",
        check_out_date: str | None = "2025-02-13",
        user_id: str = "user-traveller-1",
        payment_status: str = "pending",
        created_at: str = "2025-01-20T09:00:00+00:00",
    ) -> dict[str, Any]:
        item: dict[str, Any] = {
            "booking_id": booking_id,
            "listing_id": listing_id,
            "user_id": user_id,
            "booking_date": booking_date,
            "guests": 2,
            "total_amount": Decimal("600.00"),
            "payment_status": payment_status,
            "payment_plan": "arrival",
            "created_at": created_at,
        }
        if check_out_date:
            item["check_out_date"] = check_out_date
        return item

    return _make


@pytest.fixture
def seeded_db(
    db: Any,
    stay_item: dict[str, Any],
    tour_item: dict[str, Any],
    volunteer_item: dict[str, Any],
    draft_item: dict[str, Any],
    booking_item: Callable[..., dict[str, Any]],
) -> Any:
    """Mocked tables holding the sample listings and one stay booking (Feb 10-13)."""
    for item in (stay_item, tour_item, volunteer_item, draft_item):
        db.put_item("listings", item)
    db.put_item("bookings", booking_item("BKG-EXISTING01"))
    return db


# === Auth Fixtures ===


def _b64(data: dict[str, Any]) -> str:
    return base64.urlsafe_b64encode(json.dumps(data).encode()).decode().rstrip("=")


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Build an unsigned JWT with the hosted auth provider's claim layout."""

    def _make(
        sub: str = "user-traveller-1",
        role: str | None = None,
        exp: int | None = None,
        email: str = "traveller@example.com",
    ) -> str:
        payload: dict[str, Any] = {"sub": sub, "email": email}
        if role is not None:
            payload["user_metadata"] = {"role": role}
        if exp is not None:
            payload["exp"] = exp
        return f"{_b64({'alg': 'HS256', 'typ': 'JWT'})}.{_b64(payload)}.mock-signature"

    return _make


# === Helper Fixtures ===


@pytest.fixture
def today() -> date:
    """Fixed current date used across calendar and booking tests."""
    return date(2025, 2, 1)


@pytest.fixture
def freeze_time() -> Generator[datetime, None, None]:
    """Fixture to provide a fixed datetime for testing."""
    fixed_time = datetime(2025, 2, 1, 12, 0, 0, tzinfo=timezone.utc)
    yield fixed_time

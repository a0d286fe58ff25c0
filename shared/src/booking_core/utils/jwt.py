"""JWT utility functions for deriving the caller's session from tokens.

Architecture Note:
- Tokens are issued by the hosted auth provider and sent as
  ``Authorization: Bearer <token>``
- We decode the JWT payload without signature verification; the gateway
  in front of the API has already verified it
- ``sub`` is the user ID, ``user_metadata.role`` carries the role
"""

import base64
import datetime as dt
import json
import logging
from typing import Any

from booking_core.models.errors import BookingError, ErrorCode
from booking_core.models.session import DEFAULT_ROLE, UserSession

logger = logging.getLogger(__name__)


def decode_jwt_payload(token: str | None) -> dict[str, Any] | None:
    """Decode a JWT token and return the full payload.

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if decoding fails
    """
    if not token:
        return None

    try:
        # JWT format: header.payload.signature
        parts = token.split(".")
        if len(parts) != 3:
            logger.debug("Invalid JWT format: expected 3 parts, got %d", len(parts))
            return None

        payload_b64 = parts[1]

        # base64url requires padding to a multiple of 4
        padding = 4 - len(payload_b64) % 4
        if padding != 4:
            payload_b64 += "=" * padding

        payload = json.loads(base64.urlsafe_b64decode(payload_b64))
        if not isinstance(payload, dict):
            return None
        return payload

    except (ValueError, json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Failed to decode JWT payload: %s", type(e).__name__)
        return None


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token part of an ``Authorization: Bearer`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def session_from_token(
    token: str | None,
    now: dt.datetime | None = None,
) -> UserSession:
    """Derive a UserSession from a hosted-auth JWT.

    Args:
        token: Raw JWT (without the Bearer prefix)
        now: Current time, defaults to the UTC clock

    Returns:
        The caller's session

    Raises:
        BookingError: AUTH_REQUIRED for a missing or unreadable token,
            SESSION_EXPIRED when the exp claim is in the past
    """
    payload = decode_jwt_payload(token)
    if not payload or not payload.get("sub"):
        raise BookingError(ErrorCode.AUTH_REQUIRED)

    exp = payload.get("exp")
    if exp is not None:
        try:
            expires_at = int(exp)
        except (TypeError, ValueError) as e:
            raise BookingError(ErrorCode.AUTH_REQUIRED) from e
        now = now or dt.datetime.now(dt.UTC)
        if expires_at <= int(now.timestamp()):
            raise BookingError(ErrorCode.SESSION_EXPIRED)

    metadata = payload.get("user_metadata") or {}
    role = metadata.get("role") if isinstance(metadata, dict) else None

    return UserSession(
        user_id=str(payload["sub"]),
        email=payload.get("email"),
        role=role or DEFAULT_ROLE,
    )

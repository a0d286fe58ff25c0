"""Session dependencies for protected routes.

The hosted auth provider issues the JWT; the gateway in front of the API
verifies its signature. Routes only derive the session from its claims
and gate back-office endpoints on the admin role.
"""

from fastapi import Depends, Header

from booking_core.models.errors import BookingError, ErrorCode
from booking_core.models.session import UserSession
from booking_core.utils.jwt import extract_bearer_token, session_from_token


def get_current_session(
    authorization: str | None = Header(default=None),
) -> UserSession:
    """Require a signed-in caller.

    Raises:
        BookingError: AUTH_REQUIRED or SESSION_EXPIRED
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise BookingError(ErrorCode.AUTH_REQUIRED)
    return session_from_token(token)


def require_admin(
    session: UserSession = Depends(get_current_session),
) -> UserSession:
    """Require a signed-in caller with the admin role."""
    if not session.is_admin:
        raise BookingError(ErrorCode.ADMIN_REQUIRED, details={"role": session.role})
    return session

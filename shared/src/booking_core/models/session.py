"""Authenticated session derived from hosted-auth token claims."""

from pydantic import BaseModel, Field

ADMIN_ROLE = "admin"
DEFAULT_ROLE = "user"


class UserSession(BaseModel):
    """Identity of the caller for the current request."""

    user_id: str = Field(..., description="Hosted-auth user ID (sub claim)")
    email: str | None = None
    role: str = Field(default=DEFAULT_ROLE, description="Role from user metadata")

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE

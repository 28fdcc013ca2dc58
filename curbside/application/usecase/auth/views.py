"""Response models for the authenticated user."""

from datetime import datetime

from pydantic import BaseModel


class CurrentUserResponse(BaseModel):
    """Profile of the authenticated user.

    `can_view_immediately` is evaluated at request time from last_posted_at.
    """

    user_id: str
    username: str
    email: str
    kudos: int
    last_posted_at: datetime | None
    can_view_immediately: bool
    created_at: datetime

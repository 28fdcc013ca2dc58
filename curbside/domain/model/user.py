"""User aggregate root.

Users register with a username, email and password, post finds, and
accumulate kudos from other users.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from curbside.domain.model.common import DomainModel
from curbside.domain.value import UserId, Username
from curbside.util.clock import utcnow


class User(DomainModel):
    """User aggregate root.

    `kudos` is a running total of kudos received across all of the user's
    posts, maintained on every kudos add/remove.

    `last_posted_at` is the single source of truth for immediate-viewing
    qualification; the participation gate derives it at read time.
    """

    id: UserId
    username: Username
    email: str = Field(min_length=3, max_length=255)
    password_hash: str
    kudos: int = Field(default=0, ge=0)
    last_posted_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)

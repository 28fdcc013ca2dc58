"""Kudos entity.

Kudos are endorsements of a post by a user.
"""

from datetime import datetime

from pydantic import Field

from curbside.domain.model.common import DomainModel
from curbside.domain.value import KudosId, PostId, UserId
from curbside.util.clock import utcnow


class Kudos(DomainModel):
    """Kudos entity.

    Business rules:
    - One kudos per user per post (enforced by unique constraint on insert)
    - Each kudos adds one to the post author's running kudos total
    """

    id: KudosId
    post_id: PostId
    user_id: UserId
    created_at: datetime = Field(default_factory=utcnow)

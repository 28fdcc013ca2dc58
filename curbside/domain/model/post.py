"""Post aggregate root.

A post is a "find": something left out at a location, described by a
free-text label, coordinates, a list of items and some photos.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from curbside.domain.model.common import DomainModel
from curbside.domain.value import Latitude, Longitude, PostId, PostStatus, UserId
from curbside.util.clock import utcnow


class Post(DomainModel):
    """Post aggregate root.

    Only the author may change the status. Items carry their own status,
    which is set independently of the post status.
    """

    id: PostId
    user_id: UserId
    location: str = Field(min_length=1, max_length=255)
    latitude: Latitude
    longitude: Longitude
    description: Optional[str] = Field(default=None, max_length=5000)
    status: PostStatus = PostStatus.AVAILABLE
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

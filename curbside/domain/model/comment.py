"""Comment entity."""

from datetime import datetime

from pydantic import Field

from curbside.domain.model.common import DomainModel
from curbside.domain.value import CommentId, PostId, UserId
from curbside.util.clock import utcnow


class Comment(DomainModel):
    """Flat comment on a post, listed oldest first."""

    id: CommentId
    post_id: PostId
    user_id: UserId
    content: str = Field(min_length=1, max_length=2000)
    created_at: datetime = Field(default_factory=utcnow)

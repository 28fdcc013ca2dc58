"""PostWithDetails read model.

Assembled from the store on every read and never persisted or cached.
"""

from typing import Optional

from pydantic import Field

from curbside.domain.model.comment import Comment
from curbside.domain.model.common import DomainModel
from curbside.domain.model.image import Image
from curbside.domain.model.item import Item
from curbside.domain.model.post import Post
from curbside.domain.model.user import User
from curbside.domain.value import Username


class CommentWithAuthor(DomainModel):
    """Comment together with its author's username (None if the author is gone)."""

    comment: Comment
    author_username: Optional[Username] = None


class PostWithDetails(DomainModel):
    """A post joined with everything needed to present it.

    - kudos_count is counted from kudos rows at assembly time
    - user_kudos is viewer-specific: whether the requesting user gave kudos
    """

    post: Post
    user: User
    items: list[Item] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    comments: list[CommentWithAuthor] = Field(default_factory=list)
    kudos_count: int = Field(default=0, ge=0)
    user_kudos: bool = False

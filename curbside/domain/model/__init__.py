"""Domain model entities for Curbside."""

from curbside.domain.model.comment import Comment
from curbside.domain.model.image import Image
from curbside.domain.model.item import Item
from curbside.domain.model.kudos import Kudos
from curbside.domain.model.post import Post
from curbside.domain.model.post_details import CommentWithAuthor, PostWithDetails
from curbside.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Item",
    "Image",
    "Comment",
    "Kudos",
    "CommentWithAuthor",
    "PostWithDetails",
]

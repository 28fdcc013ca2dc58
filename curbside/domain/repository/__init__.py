"""Repository interfaces for Curbside domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from curbside.domain.repository.comment import CommentRepository
from curbside.domain.repository.image import ImageRepository
from curbside.domain.repository.item import ItemRepository
from curbside.domain.repository.kudos import KudosRepository
from curbside.domain.repository.post import PostRepository
from curbside.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "ItemRepository",
    "ImageRepository",
    "CommentRepository",
    "KudosRepository",
]

"""Domain value objects for Curbside."""

from curbside.domain.value.identifiers import (
    CommentId,
    ImageId,
    ItemId,
    KudosId,
    PostId,
    UserId,
)
from curbside.domain.value.types import (
    ItemStatus,
    Latitude,
    Longitude,
    PostStatus,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "ItemId",
    "ImageId",
    "CommentId",
    "KudosId",
    # Types
    "PostStatus",
    "ItemStatus",
    "Username",
    "Latitude",
    "Longitude",
]

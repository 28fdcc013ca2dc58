"""Strongly typed identifiers for Curbside domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
ItemId = NewType("ItemId", UUID)
ImageId = NewType("ImageId", UUID)
CommentId = NewType("CommentId", UUID)
KudosId = NewType("KudosId", UUID)

"""In-memory repository implementations."""

from .comment import InMemoryCommentRepository
from .image import InMemoryImageRepository
from .item import InMemoryItemRepository
from .kudos import InMemoryKudosRepository
from .post import InMemoryPostRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryImageRepository",
    "InMemoryItemRepository",
    "InMemoryKudosRepository",
    "InMemoryPostRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]

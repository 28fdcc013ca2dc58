"""PostgreSQL repository implementations."""

from curbside.persistence.repository.comment import PostgresCommentRepository
from curbside.persistence.repository.image import PostgresImageRepository
from curbside.persistence.repository.item import PostgresItemRepository
from curbside.persistence.repository.kudos import PostgresKudosRepository
from curbside.persistence.repository.post import PostgresPostRepository
from curbside.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresItemRepository",
    "PostgresImageRepository",
    "PostgresCommentRepository",
    "PostgresKudosRepository",
]

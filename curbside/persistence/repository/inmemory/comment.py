"""In-memory comment repository."""

from typing import List, Optional

from curbside.domain.model.comment import Comment
from curbside.domain.repository.comment import CommentRepository
from curbside.domain.value import PostId
from curbside.persistence.repository.inmemory.store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._store.comments.values() if c.post_id == post_id]
        return sorted(comments, key=lambda c: c.created_at)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._store.comments[comment.id] = comment
        return comment

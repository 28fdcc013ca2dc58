"""In-memory post repository."""

from datetime import datetime
from typing import List, Optional

from curbside.domain.model.post import Post
from curbside.domain.repository.post import PostRepository
from curbside.domain.value import PostId, PostStatus, UserId
from curbside.persistence.repository.inmemory.store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def find_all(self) -> List[Post]:
        """Find every post, oldest first."""
        return sorted(self._store.posts.values(), key=lambda p: p.created_at)

    async def find_recent(self, limit: int) -> List[Post]:
        """Find the newest posts, newest first."""
        posts = sorted(
            self._store.posts.values(), key=lambda p: p.created_at, reverse=True
        )
        return posts[:limit]

    async def find_by_user(self, user_id: UserId) -> List[Post]:
        """Find all posts by an author, newest first."""
        posts = [p for p in self._store.posts.values() if p.user_id == user_id]
        return sorted(posts, key=lambda p: p.created_at, reverse=True)

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._store.posts[post.id] = post
        return post

    async def update_status(
        self, post_id: PostId, status: PostStatus, at: datetime
    ) -> Optional[Post]:
        """Set post status and bump updated_at."""
        post = self._store.posts.get(post_id)
        if not post:
            return None
        updated = post.model_copy(update={"status": status, "updated_at": at})
        self._store.posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> None:
        """Delete a post together with its children."""
        self._store.delete_post(post_id)

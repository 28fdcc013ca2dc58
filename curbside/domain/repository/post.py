"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from curbside.domain.model.post import Post
from curbside.domain.value import PostId, PostStatus, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find every post, oldest first.

        Returns:
            All posts ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_recent(self, limit: int) -> List[Post]:
        """Find the newest posts.

        Args:
            limit: Maximum number of posts to return

        Returns:
            Posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Post]:
        """Find all posts authored by a user, newest first.

        Args:
            user_id: The author's user ID

        Returns:
            List of posts by the author
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_status(
        self, post_id: PostId, status: PostStatus, at: datetime
    ) -> Optional[Post]:
        """Set the post status and bump updated_at.

        Args:
            post_id: ID of the post to update
            status: New status
            at: Update time

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post with its items, images, comments and kudos.

        Args:
            post_id: The post ID to delete
        """
        pass

"""Comment domain service."""

from uuid import uuid4

import logfire

from curbside.domain.error import NotFoundError
from curbside.domain.model.comment import Comment
from curbside.domain.repository import CommentRepository, PostRepository
from curbside.domain.value import CommentId, PostId, UserId
from curbside.util.clock import Clock

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        clock: Clock,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
            clock: Source of the current time
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.clock = clock

    async def create_comment(
        self, post_id: PostId, user_id: UserId, content: str
    ) -> Comment:
        """Add a comment to a post.

        Args:
            post_id: Post ID
            user_id: Author user ID
            content: Comment text (1-2000 characters)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            user_id=str(user_id),
        ):
            if not await self.post_repository.find_by_id(post_id):
                logfire.warn("Comment on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                user_id=user_id,
                content=content,
                created_at=self.clock.now(),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get a post's comments, oldest first."""
        return await self.comment_repository.find_by_post(post_id)

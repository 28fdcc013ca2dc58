"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from curbside.application.usecase.post.views import CommentAuthor, CommentView
from curbside.domain.service import CommentService, UserService
from curbside.domain.value import PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    user_id: str  # User ID from authenticated user
    content: str = Field(min_length=1, max_length=2000)


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the post or the commenting user doesn't exist
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        comment = await self.comment_service.create_comment(
            post_id=PostId(UUID(request.post_id)),
            user_id=user.id,
            content=request.content,
        )

        return CommentView(
            id=str(comment.id),
            post_id=str(comment.post_id),
            user_id=str(comment.user_id),
            content=comment.content,
            created_at=comment.created_at,
            user=CommentAuthor(id=str(user.id), username=user.username.root),
        )

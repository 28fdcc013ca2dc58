"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from curbside.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from curbside.domain.error import NotFoundError
from curbside.domain.repository import PostRepository, UserRepository
from curbside.util.clock import Clock
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_carries_author(self, unit_env):
        """The response includes the commenter's ID and username."""
        use_case = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        clock = await unit_env.get(Clock)
        author = await user_repo.save(make_user("author"))
        commenter = await user_repo.save(make_user("commenter"))
        post = await post_repo.save(make_post(author.id, created_at=clock.now()))

        response = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id), user_id=str(commenter.id), content="Mine!"
            )
        )

        assert response.content == "Mine!"
        assert response.user.id == str(commenter.id)
        assert response.user.username == "commenter"

    @pytest.mark.asyncio
    async def test_comment_on_missing_post(self, unit_env):
        """Commenting on an unknown post raises NotFoundError."""
        use_case = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        commenter = await user_repo.save(make_user("commenter"))

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(uuid4()), user_id=str(commenter.id), content="hi"
                )
            )

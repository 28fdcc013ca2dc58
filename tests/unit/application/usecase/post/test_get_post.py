"""Unit tests for GetPostUseCase."""

from datetime import timedelta
from uuid import uuid4

import pytest

from curbside.application.usecase.post import GetPostRequest, GetPostUseCase
from curbside.domain.error import AccessDeniedError, NotFoundError
from curbside.domain.repository import PostRepository, UserRepository
from curbside.util.clock import Clock
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_fresh_post_is_denied_to_non_participant(self, unit_env):
        """A viewer who hasn't posted gets AccessDeniedError for a fresh post."""
        use_case = await unit_env.get(GetPostUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        clock = await unit_env.get(Clock)
        author = await user_repo.save(make_user("author"))
        viewer = await user_repo.save(make_user("viewer"))
        post = await post_repo.save(make_post(author.id, created_at=clock.now()))

        with pytest.raises(AccessDeniedError, match="participate by posting"):
            await use_case.execute(
                GetPostRequest(post_id=str(post.id), viewer_id=str(viewer.id))
            )

    @pytest.mark.asyncio
    async def test_post_is_served_after_delay(self, unit_env):
        """After the delay the same viewer gets the full post."""
        use_case = await unit_env.get(GetPostUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        clock = await unit_env.get(Clock)
        author = await user_repo.save(make_user("author"))
        post = await post_repo.save(make_post(author.id, created_at=clock.now()))

        clock.advance(timedelta(hours=25))
        response = await use_case.execute(GetPostRequest(post_id=str(post.id)))

        assert response.id == str(post.id)
        assert response.user.username == "author"
        assert response.latitude == "40.7128"
        assert response.user_kudos is False

    @pytest.mark.asyncio
    async def test_author_sees_own_fresh_post(self, unit_env):
        """Having just posted, the author qualifies for immediate viewing."""
        use_case = await unit_env.get(GetPostUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        clock = await unit_env.get(Clock)
        author = await user_repo.save(
            make_user("author", last_posted_at=clock.now())
        )
        post = await post_repo.save(make_post(author.id, created_at=clock.now()))

        response = await use_case.execute(
            GetPostRequest(post_id=str(post.id), viewer_id=str(author.id))
        )

        assert response.id == str(post.id)

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        """Unknown post IDs raise NotFoundError."""
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(post_id=str(uuid4())))

"""Unit tests for AddKudosUseCase and RemoveKudosUseCase."""

from uuid import uuid4

import pytest

from curbside.application.usecase.kudos import (
    AddKudosRequest,
    AddKudosUseCase,
    RemoveKudosRequest,
    RemoveKudosUseCase,
)
from curbside.domain.error import DuplicateKudosError, NotFoundError
from curbside.domain.repository import PostRepository, UserRepository
from curbside.util.clock import Clock
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(unit_env):
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)
    clock = await unit_env.get(Clock)
    author = await user_repo.save(make_user("author"))
    fan = await user_repo.save(make_user("fan"))
    post = await post_repo.save(make_post(author.id, created_at=clock.now()))
    return author, fan, post


class TestAddKudosUseCase:
    """Tests for AddKudosUseCase."""

    @pytest.mark.asyncio
    async def test_add_returns_kudos_record(self, unit_env):
        """The response echoes the stored kudos."""
        use_case = await unit_env.get(AddKudosUseCase)
        _, fan, post = await _seed(unit_env)

        response = await use_case.execute(
            AddKudosRequest(post_id=str(post.id), user_id=str(fan.id))
        )

        assert response.post_id == str(post.id)
        assert response.user_id == str(fan.id)

    @pytest.mark.asyncio
    async def test_duplicate_add_is_rejected(self, unit_env):
        """A second add from the same user raises DuplicateKudosError."""
        use_case = await unit_env.get(AddKudosUseCase)
        _, fan, post = await _seed(unit_env)
        request = AddKudosRequest(post_id=str(post.id), user_id=str(fan.id))
        await use_case.execute(request)

        with pytest.raises(DuplicateKudosError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_add_on_missing_post(self, unit_env):
        """Kudos on an unknown post raises NotFoundError."""
        use_case = await unit_env.get(AddKudosUseCase)
        _, fan, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                AddKudosRequest(post_id=str(uuid4()), user_id=str(fan.id))
            )


class TestRemoveKudosUseCase:
    """Tests for RemoveKudosUseCase."""

    @pytest.mark.asyncio
    async def test_remove_reports_whether_anything_changed(self, unit_env):
        """The message is constant; `removed` tells the two cases apart."""
        add = await unit_env.get(AddKudosUseCase)
        remove = await unit_env.get(RemoveKudosUseCase)
        _, fan, post = await _seed(unit_env)
        await add.execute(AddKudosRequest(post_id=str(post.id), user_id=str(fan.id)))
        request = RemoveKudosRequest(post_id=str(post.id), user_id=str(fan.id))

        first = await remove.execute(request)
        second = await remove.execute(request)

        assert first.message == second.message == "Kudos removed"
        assert first.removed is True
        assert second.removed is False

"""Unit tests for PostService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from curbside.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from curbside.domain.repository import (
    ImageRepository,
    ItemRepository,
    PostRepository,
    UserRepository,
)
from curbside.domain.service import PostService
from curbside.domain.value import (
    ItemId,
    ItemStatus,
    Latitude,
    Longitude,
    PostId,
    PostStatus,
)
from curbside.util.clock import Clock
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - in-memory store, manual clock
unit_env = create_env_fixture()


async def _create(unit_env, author, items=("bookshelf", "lamp"), images=()):
    post_service = await unit_env.get(PostService)
    return await post_service.create_post(
        user_id=author.id,
        location="Corner of Elm St",
        latitude=Latitude("40.7128"),
        longitude=Longitude("-74.0060"),
        description="Solid wood",
        item_names=items,
        image_urls=images,
    )


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_post_writes_items_and_images(self, unit_env):
        """Items and images are stored in the order given."""
        user_repo = await unit_env.get(UserRepository)
        item_repo = await unit_env.get(ItemRepository)
        image_repo = await unit_env.get(ImageRepository)
        clock = await unit_env.get(Clock)
        author = await user_repo.save(make_user("author"))

        post = await _create(
            unit_env, author, images=("https://img/1.jpg", "https://img/2.jpg")
        )

        assert post.status == PostStatus.AVAILABLE
        assert post.created_at == clock.now()
        items = await item_repo.find_by_post(post.id)
        assert [i.name for i in items] == ["bookshelf", "lamp"]
        assert all(i.status == ItemStatus.AVAILABLE for i in items)
        images = await image_repo.find_by_post(post.id)
        assert [i.url for i in images] == ["https://img/1.jpg", "https://img/2.jpg"]

    @pytest.mark.asyncio
    async def test_create_post_marks_author_as_recent_poster(self, unit_env):
        """Posting sets the author's last_posted_at to the post's creation time."""
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("author"))

        post = await _create(unit_env, author)

        refreshed = await user_repo.find_by_id(author.id)
        assert refreshed.last_posted_at == post.created_at

    @pytest.mark.asyncio
    async def test_create_post_without_items(self, unit_env):
        """A post may have no items and no images."""
        user_repo = await unit_env.get(UserRepository)
        item_repo = await unit_env.get(ItemRepository)
        author = await user_repo.save(make_user("author"))

        post = await _create(unit_env, author, items=())

        assert await item_repo.find_by_post(post.id) == []

    @pytest.mark.asyncio
    async def test_invalid_item_name_writes_nothing(self, unit_env):
        """A bad item name rejects the whole post before anything is stored."""
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.save(make_user("author"))

        with pytest.raises(ValueError):
            await _create(unit_env, author, items=("lamp", ""))

        assert await post_repo.find_by_user(author.id) == []
        refreshed = await user_repo.find_by_id(author.id)
        assert refreshed.last_posted_at is None

    @pytest.mark.asyncio
    async def test_invalid_image_url_writes_nothing(self, unit_env):
        """A bad image URL rejects the whole post before anything is stored."""
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.save(make_user("author"))

        with pytest.raises(ValueError):
            await _create(unit_env, author, images=("https://img/1.jpg", ""))

        assert await post_repo.find_by_user(author.id) == []


class TestUpdatePost:
    """Tests for update_post."""

    @pytest.mark.asyncio
    async def test_owner_updates_status_and_bumps_updated_at(self, unit_env):
        """The author can change the post status."""
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        clock = await unit_env.get(Clock)
        author = await user_repo.save(make_user("author"))
        post = await _create(unit_env, author)

        clock.advance(timedelta(hours=2))
        updated = await post_service.update_post(
            post.id, author.id, status=PostStatus.PARTIAL
        )

        assert updated.status == PostStatus.PARTIAL
        assert updated.updated_at == clock.now()
        assert updated.created_at == post.created_at

    @pytest.mark.asyncio
    async def test_item_status_is_independent_of_post_status(self, unit_env):
        """Marking an item taken leaves the post status alone."""
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        item_repo = await unit_env.get(ItemRepository)
        author = await user_repo.save(make_user("author"))
        post = await _create(unit_env, author)
        lamp = (await item_repo.find_by_post(post.id))[1]

        updated = await post_service.update_post(
            post.id, author.id, item_statuses=[(lamp.id, ItemStatus.TAKEN)]
        )

        assert updated.status == PostStatus.AVAILABLE
        items = await item_repo.find_by_post(post.id)
        assert [i.status for i in items] == [ItemStatus.AVAILABLE, ItemStatus.TAKEN]

    @pytest.mark.asyncio
    async def test_update_appends_images(self, unit_env):
        """New image URLs are appended after the existing ones."""
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        image_repo = await unit_env.get(ImageRepository)
        author = await user_repo.save(make_user("author"))
        post = await _create(unit_env, author, images=("https://img/1.jpg",))

        await post_service.update_post(
            post.id, author.id, new_image_urls=["https://img/2.jpg"]
        )

        images = await image_repo.find_by_post(post.id)
        assert [i.url for i in images] == ["https://img/1.jpg", "https://img/2.jpg"]

    @pytest.mark.asyncio
    async def test_non_owner_cannot_update(self, unit_env):
        """Only the author may update a post."""
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("author"))
        stranger = await user_repo.save(make_user("stranger"))
        post = await _create(unit_env, author)

        with pytest.raises(NotAuthorizedError):
            await post_service.update_post(
                post.id, stranger.id, status=PostStatus.TAKEN
            )

    @pytest.mark.asyncio
    async def test_update_missing_post_raises_not_found(self, unit_env):
        """Updating a post that doesn't exist fails with NotFoundError."""
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("author"))

        with pytest.raises(NotFoundError):
            await post_service.update_post(
                PostId(uuid4()), author.id, status=PostStatus.TAKEN
            )

    @pytest.mark.asyncio
    async def test_item_from_another_post_is_rejected_without_writes(self, unit_env):
        """A foreign item fails validation and nothing is changed."""
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        item_repo = await unit_env.get(ItemRepository)
        author = await user_repo.save(make_user("author"))
        post = await _create(unit_env, author)
        other = await _create(unit_env, author, items=("chair",))
        chair = (await item_repo.find_by_post(other.id))[0]

        with pytest.raises(ValidationError):
            await post_service.update_post(
                post.id,
                author.id,
                status=PostStatus.TAKEN,
                item_statuses=[(chair.id, ItemStatus.TAKEN)],
            )

        assert (await post_service.get_post_by_id(post.id)).status == (
            PostStatus.AVAILABLE
        )
        assert (await item_repo.find_by_id(chair.id)).status == ItemStatus.AVAILABLE

    @pytest.mark.asyncio
    async def test_unknown_item_is_rejected(self, unit_env):
        """An item ID with no item behind it fails validation."""
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("author"))
        post = await _create(unit_env, author)

        with pytest.raises(ValidationError):
            await post_service.update_post(
                post.id,
                author.id,
                item_statuses=[(ItemId(uuid4()), ItemStatus.TAKEN)],
            )

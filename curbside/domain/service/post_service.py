"""Post domain service."""

from typing import Optional, Sequence
from uuid import uuid4

import logfire

from curbside.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from curbside.domain.model import Image, Item, Post
from curbside.domain.repository import ImageRepository, ItemRepository, PostRepository
from curbside.domain.value import (
    ImageId,
    ItemId,
    ItemStatus,
    Latitude,
    Longitude,
    PostId,
    PostStatus,
    UserId,
)
from curbside.util.clock import Clock

from .base import Service
from .user_service import UserService


class PostService(Service):
    """Domain service for post operations.

    Owns the write side of the post aggregate: the post row, its items and
    its images.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        item_repository: ItemRepository,
        image_repository: ImageRepository,
        user_service: UserService,
        clock: Clock,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            item_repository: Item repository
            image_repository: Image repository
            user_service: User domain service
            clock: Source of the current time
        """
        self.post_repository = post_repository
        self.item_repository = item_repository
        self.image_repository = image_repository
        self.user_service = user_service
        self.clock = clock

    async def create_post(
        self,
        user_id: UserId,
        location: str,
        latitude: Latitude,
        longitude: Longitude,
        description: Optional[str] = None,
        item_names: Sequence[str] = (),
        image_urls: Sequence[str] = (),
    ) -> Post:
        """Create a post with its items and images.

        Marks the author as having posted now, which is what grants them
        immediate viewing of new finds.

        Args:
            user_id: Author user ID
            location: Free-text location label
            latitude: Latitude of the find
            longitude: Longitude of the find
            description: Optional description
            item_names: Names of the items, in display order
            image_urls: Image URLs, in display order

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post",
            user_id=str(user_id),
            items=len(item_names),
            images=len(image_urls),
        ):
            now = self.clock.now()
            post = Post(
                id=PostId(uuid4()),
                user_id=user_id,
                location=location,
                latitude=latitude,
                longitude=longitude,
                description=description,
                status=PostStatus.AVAILABLE,
                created_at=now,
                updated_at=now,
            )
            items = [
                Item(id=ItemId(uuid4()), post_id=post.id, name=name)
                for name in item_names
            ]
            images = self._build_images(post.id, image_urls)

            saved = await self.post_repository.save(post)
            for item in items:
                await self.item_repository.save(item)
            for image in images:
                await self.image_repository.save(image)

            await self.user_service.touch_last_posted(user_id, now)

            logfire.info("Post created", post_id=str(saved.id), user_id=str(user_id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
            return post

    async def update_post(
        self,
        post_id: PostId,
        user_id: UserId,
        status: Optional[PostStatus] = None,
        item_statuses: Sequence[tuple[ItemId, ItemStatus]] = (),
        new_image_urls: Sequence[str] = (),
    ) -> Post:
        """Apply an owner's changes to a post.

        Post status and item statuses are independent: changing one never
        changes the other.

        Args:
            post_id: Post ID
            user_id: ID of the user making the change
            status: New post status, if any
            item_statuses: (item ID, new status) pairs for items of this post
            new_image_urls: Image URLs to append

        Returns:
            The post after the update

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user isn't the post's author
            ValidationError: If an item doesn't belong to the post
        """
        with logfire.span(
            "post_service.update_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Update on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            if post.user_id != user_id:
                logfire.warn(
                    "Unauthorized post update attempt",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(user_id))

            # Validate every item and image before writing anything
            images = self._build_images(post_id, new_image_urls)
            for item_id, _ in item_statuses:
                item = await self.item_repository.find_by_id(item_id)
                if not item or item.post_id != post_id:
                    logfire.warn(
                        "Item does not belong to post",
                        post_id=str(post_id),
                        item_id=str(item_id),
                    )
                    raise ValidationError(
                        f"Item {item_id} does not belong to this post"
                    )

            if status is not None:
                updated = await self.post_repository.update_status(
                    post_id, status, self.clock.now()
                )
                if updated:
                    post = updated

            for item_id, item_status in item_statuses:
                await self.item_repository.update_status(item_id, item_status)

            for image in images:
                await self.image_repository.save(image)

            logfire.info("Post updated", post_id=str(post_id))
            return post

    def _build_images(self, post_id: PostId, urls: Sequence[str]) -> list[Image]:
        now = self.clock.now()
        return [
            Image(id=ImageId(uuid4()), post_id=post_id, url=url, created_at=now)
            for url in urls
        ]

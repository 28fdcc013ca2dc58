"""Kudos domain service."""

from typing import Sequence
from uuid import uuid4

import logfire

from curbside.domain.error import DuplicateKudosError, NotFoundError
from curbside.domain.model.kudos import Kudos
from curbside.domain.repository import KudosRepository, PostRepository
from curbside.domain.value import KudosId, PostId, UserId
from curbside.util.clock import Clock

from .base import Service
from .user_service import UserService


class KudosService(Service):
    """Domain service for the kudos ledger.

    The kudos rows are the source of truth for per-post counts. Each post
    author's `kudos` total is a counter kept in step with inserts and
    deletes inside the same transaction.
    """

    def __init__(
        self,
        kudos_repository: KudosRepository,
        post_repository: PostRepository,
        user_service: UserService,
        clock: Clock,
    ) -> None:
        """Initialize kudos service.

        Args:
            kudos_repository: Kudos repository
            post_repository: Post repository
            user_service: User domain service
            clock: Source of the current time
        """
        self.kudos_repository = kudos_repository
        self.post_repository = post_repository
        self.user_service = user_service
        self.clock = clock

    async def add_kudos(self, post_id: PostId, user_id: UserId) -> Kudos:
        """Give kudos to a post.

        Args:
            post_id: Post ID
            user_id: ID of the user giving kudos

        Returns:
            Created kudos

        Raises:
            NotFoundError: If the post doesn't exist
            DuplicateKudosError: If the user already gave kudos to the post
        """
        with logfire.span(
            "kudos_service.add_kudos", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Kudos on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            kudos = Kudos(
                id=KudosId(uuid4()),
                post_id=post_id,
                user_id=user_id,
                created_at=self.clock.now(),
            )
            if not await self.kudos_repository.add(kudos):
                logfire.warn(
                    "Duplicate kudos attempt",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise DuplicateKudosError(str(post_id), str(user_id))

            await self.user_service.increment_kudos(post.user_id)

            logfire.info("Kudos added", post_id=str(post_id), user_id=str(user_id))
            return kudos

    async def remove_kudos(self, post_id: PostId, user_id: UserId) -> bool:
        """Withdraw a user's kudos from a post.

        Args:
            post_id: Post ID
            user_id: ID of the user withdrawing kudos

        Returns:
            True if kudos was removed, False if there was nothing to remove
        """
        with logfire.span(
            "kudos_service.remove_kudos", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.info("Kudos removal on missing post", post_id=str(post_id))
                return False

            deleted = await self.kudos_repository.delete_by_post_and_user(
                post_id, user_id
            )

            if deleted:
                await self.user_service.decrement_kudos(post.user_id)
                logfire.info(
                    "Kudos removed", post_id=str(post_id), user_id=str(user_id)
                )
            else:
                logfire.info(
                    "No kudos to remove", post_id=str(post_id), user_id=str(user_id)
                )

            return deleted

    async def has_user_given_kudos(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether a user gave kudos to a post."""
        return await self.kudos_repository.exists(post_id, user_id)

    async def kudos_count_for_post(self, post_id: PostId) -> int:
        """Count kudos on a post from the ledger rows."""
        return await self.kudos_repository.count_by_post(post_id)

    async def kudos_flags(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> set[PostId]:
        """Return the subset of post_ids the user gave kudos to."""
        return await self.kudos_repository.find_post_ids_with_kudos_from(
            user_id, post_ids
        )

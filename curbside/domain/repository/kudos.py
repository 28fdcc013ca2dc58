"""Kudos repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from curbside.domain.model.kudos import Kudos
from curbside.domain.value import PostId, UserId


class KudosRepository(ABC):
    """Repository for Kudos entity.

    Kudos are keyed by (post_id, user_id): the store holds at most one row
    per pair and `add` is an atomic insert-if-absent.
    """

    @abstractmethod
    async def add(self, kudos: Kudos) -> bool:
        """Insert a kudos row unless one already exists for the pair.

        Args:
            kudos: The kudos to insert

        Returns:
            True if inserted, False if the user already gave kudos to the post
        """
        pass

    @abstractmethod
    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a user's kudos on a post.

        Args:
            post_id: The post ID
            user_id: The user's ID

        Returns:
            True if a row was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether a user gave kudos to a post.

        Args:
            post_id: The post ID
            user_id: The user's ID

        Returns:
            True if a kudos row exists for the pair
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count kudos rows for a post.

        Args:
            post_id: The post ID

        Returns:
            Number of kudos
        """
        pass

    @abstractmethod
    async def find_post_ids_with_kudos_from(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> set[PostId]:
        """Find which of the given posts a user gave kudos to (batch query).

        Args:
            user_id: The user's ID
            post_ids: Post IDs to check

        Returns:
            Subset of post_ids the user gave kudos to
        """
        pass

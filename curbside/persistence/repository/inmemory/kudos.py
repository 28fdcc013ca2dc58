"""In-memory kudos repository."""

from typing import Optional, Sequence

from curbside.domain.model.kudos import Kudos
from curbside.domain.repository.kudos import KudosRepository
from curbside.domain.value import PostId, UserId
from curbside.persistence.repository.inmemory.store import InMemoryStore


class InMemoryKudosRepository(KudosRepository):
    """In-memory implementation of KudosRepository.

    Rows are keyed by (post_id, user_id). `add` checks and inserts without
    awaiting in between, so it is atomic on a single event loop.
    """

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def add(self, kudos: Kudos) -> bool:
        """Insert a kudos row unless one already exists for the pair."""
        key = (kudos.post_id, kudos.user_id)
        if key in self._store.kudos:
            return False
        self._store.kudos[key] = kudos
        return True

    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a user's kudos on a post."""
        return self._store.kudos.pop((post_id, user_id), None) is not None

    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether a user gave kudos to a post."""
        return (post_id, user_id) in self._store.kudos

    async def count_by_post(self, post_id: PostId) -> int:
        """Count kudos rows for a post."""
        return sum(1 for k in self._store.kudos.values() if k.post_id == post_id)

    async def find_post_ids_with_kudos_from(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> set[PostId]:
        """Find which of the given posts a user gave kudos to."""
        return {pid for pid in post_ids if (pid, user_id) in self._store.kudos}

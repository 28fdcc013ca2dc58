"""In-memory item repository."""

from typing import List, Optional

from curbside.domain.model.item import Item
from curbside.domain.repository.item import ItemRepository
from curbside.domain.value import ItemId, ItemStatus, PostId
from curbside.persistence.repository.inmemory.store import InMemoryStore


class InMemoryItemRepository(ItemRepository):
    """In-memory implementation of ItemRepository."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, item_id: ItemId) -> Optional[Item]:
        """Find an item by ID."""
        return self._store.items.get(item_id)

    async def find_by_post(self, post_id: PostId) -> List[Item]:
        """Find all items of a post in insertion order."""
        return [i for i in self._store.items.values() if i.post_id == post_id]

    async def save(self, item: Item) -> Item:
        """Save or update an item."""
        self._store.items[item.id] = item
        return item

    async def update_status(
        self, item_id: ItemId, status: ItemStatus
    ) -> Optional[Item]:
        """Set an item's status."""
        item = self._store.items.get(item_id)
        if not item:
            return None
        updated = item.model_copy(update={"status": status})
        self._store.items[item_id] = updated
        return updated

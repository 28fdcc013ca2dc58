"""Item repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from curbside.domain.model.item import Item
from curbside.domain.value import ItemId, ItemStatus, PostId


class ItemRepository(ABC):
    """Repository for Item entity."""

    @abstractmethod
    async def find_by_id(self, item_id: ItemId) -> Optional[Item]:
        """Find an item by ID.

        Args:
            item_id: The item's unique identifier

        Returns:
            The item if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Item]:
        """Find all items of a post in insertion order.

        Args:
            post_id: The post ID

        Returns:
            Items of the post (empty if none)
        """
        pass

    @abstractmethod
    async def save(self, item: Item) -> Item:
        """Save an item (create or update).

        Args:
            item: The item to save

        Returns:
            The saved item
        """
        pass

    @abstractmethod
    async def update_status(
        self, item_id: ItemId, status: ItemStatus
    ) -> Optional[Item]:
        """Set an item's status.

        Args:
            item_id: ID of the item to update
            status: New status

        Returns:
            Updated item, or None if the item doesn't exist
        """
        pass

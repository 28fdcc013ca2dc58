"""Item entity."""

from pydantic import Field

from curbside.domain.model.common import DomainModel
from curbside.domain.value import ItemId, ItemStatus, PostId


class Item(DomainModel):
    """A single thing within a find (e.g. "bookshelf", "lamp")."""

    id: ItemId
    post_id: PostId
    name: str = Field(min_length=1, max_length=255)
    status: ItemStatus = ItemStatus.AVAILABLE

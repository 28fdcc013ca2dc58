"""In-memory image repository."""

from typing import List, Optional

from curbside.domain.model.image import Image
from curbside.domain.repository.image import ImageRepository
from curbside.domain.value import PostId
from curbside.persistence.repository.inmemory.store import InMemoryStore


class InMemoryImageRepository(ImageRepository):
    """In-memory implementation of ImageRepository."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_post(self, post_id: PostId) -> List[Image]:
        """Find all images of a post, oldest first."""
        images = [i for i in self._store.images.values() if i.post_id == post_id]
        # sorted() is stable, so equal timestamps keep insertion order
        return sorted(images, key=lambda i: i.created_at)

    async def save(self, image: Image) -> Image:
        """Save an image reference."""
        self._store.images[image.id] = image
        return image

"""Image repository interface."""

from abc import ABC, abstractmethod
from typing import List

from curbside.domain.model.image import Image
from curbside.domain.value import PostId


class ImageRepository(ABC):
    """Repository for Image entity."""

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Image]:
        """Find all images of a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            Images of the post (empty if none)
        """
        pass

    @abstractmethod
    async def save(self, image: Image) -> Image:
        """Save an image reference.

        Args:
            image: The image to save

        Returns:
            The saved image
        """
        pass

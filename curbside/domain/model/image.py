"""Image entity."""

from datetime import datetime

from pydantic import Field

from curbside.domain.model.common import DomainModel
from curbside.domain.value import ImageId, PostId
from curbside.util.clock import utcnow


class Image(DomainModel):
    """Reference to a photo of a find. Images are displayed in insertion order."""

    id: ImageId
    post_id: PostId
    url: str = Field(min_length=1, max_length=2048)
    created_at: datetime = Field(default_factory=utcnow)

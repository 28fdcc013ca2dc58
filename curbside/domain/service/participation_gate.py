"""Participation gate.

Decides whether a viewer may see a post right now. Fresh finds are held
back for a delay window (24 hours by default) from everyone except users
who have posted a find themselves within the participation window (7 days
by default). Once the delay has passed, a post is visible to anyone,
including anonymous viewers.

Qualification is derived from `User.last_posted_at` at read time, so it
lapses on its own once the participation window runs out.
"""

from datetime import timedelta

from curbside.config import VisibilitySettings
from curbside.domain.model import Post, User
from curbside.domain.value import UserId
from curbside.util.clock import Clock

from .base import Service
from .user_service import UserService


class ParticipationGate(Service):
    """Visibility predicate over (post, viewer, now)."""

    def __init__(
        self,
        user_service: UserService,
        clock: Clock,
        visibility: VisibilitySettings,
    ) -> None:
        self.user_service = user_service
        self.clock = clock
        self.delay = timedelta(hours=visibility.delay_hours)
        self.participation_window = timedelta(
            days=visibility.participation_window_days
        )

    def is_past_delay(self, post: Post) -> bool:
        """True once the post is at least `delay` old."""
        return self.clock.now() - post.created_at >= self.delay

    def viewer_qualifies(self, viewer: User | None) -> bool:
        """True if the viewer posted within the participation window."""
        if viewer is None or viewer.last_posted_at is None:
            return False
        return self.clock.now() - viewer.last_posted_at <= self.participation_window

    def is_visible(self, post: Post, viewer: User | None) -> bool:
        """True if `viewer` (None for anonymous) may see `post` now."""
        return self.is_past_delay(post) or self.viewer_qualifies(viewer)

    async def resolve_viewer(self, viewer_id: UserId | None) -> User | None:
        """Load the viewing user, or None for anonymous or unknown viewers."""
        if viewer_id is None:
            return None
        return await self.user_service.find_by_id(viewer_id)

    async def visible_now(self, post: Post, viewer_id: UserId | None) -> bool:
        """Resolve the viewer and evaluate the gate for a single post."""
        if self.is_past_delay(post):
            return True
        return self.viewer_qualifies(await self.resolve_viewer(viewer_id))

"""Post aggregate assembler.

Builds the PostWithDetails read model from the store and applies the
participation gate to listings. Nothing here is cached: every call reads
the current state of the store.
"""

from decimal import Decimal
from typing import Optional, Sequence

import logfire

from curbside.domain.model import CommentWithAuthor, Post, PostWithDetails, User
from curbside.domain.repository import ImageRepository, ItemRepository, PostRepository
from curbside.domain.value import Latitude, Longitude, PostId, UserId

from .base import Service
from .comment_service import CommentService
from .kudos_service import KudosService
from .participation_gate import ParticipationGate
from .user_service import UserService


class PostAssembler(Service):
    """Read side of the post aggregate."""

    def __init__(
        self,
        post_repository: PostRepository,
        item_repository: ItemRepository,
        image_repository: ImageRepository,
        comment_service: CommentService,
        kudos_service: KudosService,
        user_service: UserService,
        gate: ParticipationGate,
    ) -> None:
        """Initialize assembler.

        Args:
            post_repository: Post repository
            item_repository: Item repository
            image_repository: Image repository
            comment_service: Comment domain service
            kudos_service: Kudos ledger
            user_service: User domain service
            gate: Participation gate applied to listings
        """
        self.post_repository = post_repository
        self.item_repository = item_repository
        self.image_repository = image_repository
        self.comment_service = comment_service
        self.kudos_service = kudos_service
        self.user_service = user_service
        self.gate = gate

    async def assemble(
        self, post_id: PostId, viewer_id: Optional[UserId]
    ) -> Optional[PostWithDetails]:
        """Assemble a single post for a viewer.

        Does not apply the gate; callers decide whether the viewer may see it.

        Args:
            post_id: Post ID
            viewer_id: Requesting user, or None for anonymous

        Returns:
            The assembled post, or None if the post or its author is missing
        """
        with logfire.span("post_assembler.assemble", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                return None

            owner = await self.user_service.find_by_id(post.user_id)
            if not owner:
                logfire.warn(
                    "Post owner missing, treating post as absent",
                    post_id=str(post_id),
                    user_id=str(post.user_id),
                )
                return None

            user_kudos = False
            if viewer_id is not None:
                user_kudos = await self.kudos_service.has_user_given_kudos(
                    post_id, viewer_id
                )

            return await self._details(post, owner, user_kudos)

    async def nearby_posts(
        self,
        latitude: Latitude,
        longitude: Longitude,
        radius: Decimal,
        viewer_id: Optional[UserId],
    ) -> list[PostWithDetails]:
        """List posts near a point that the viewer may see, oldest first.

        The coordinates and radius are validated by their types but do not
        filter the result: every post is a candidate.
        """
        with logfire.span(
            "post_assembler.nearby_posts",
            latitude=latitude.root,
            longitude=longitude.root,
            radius=str(radius),
        ):
            posts = await self.post_repository.find_all()
            return await self._gated(posts, viewer_id)

    async def recent_posts(
        self, limit: int, viewer_id: Optional[UserId]
    ) -> list[PostWithDetails]:
        """List the newest posts that the viewer may see.

        The newest `limit` posts are fetched first and the gate is applied
        afterwards, so fewer than `limit` posts may come back.
        """
        with logfire.span("post_assembler.recent_posts", limit=limit):
            posts = await self.post_repository.find_recent(limit)
            return await self._gated(posts, viewer_id)

    async def user_posts(self, user_id: UserId) -> list[PostWithDetails]:
        """List all of a user's posts, newest first, without gating.

        Each post is assembled with its owner as the viewer.
        """
        with logfire.span("post_assembler.user_posts", user_id=str(user_id)):
            posts = await self.post_repository.find_by_user(user_id)
            return await self._assemble_many(posts, user_id)

    async def _gated(
        self, posts: Sequence[Post], viewer_id: Optional[UserId]
    ) -> list[PostWithDetails]:
        viewer = await self.gate.resolve_viewer(viewer_id)
        visible = [p for p in posts if self.gate.is_visible(p, viewer)]
        logfire.debug(
            "Gate applied", candidates=len(posts), visible=len(visible)
        )
        return await self._assemble_many(visible, viewer_id)

    async def _assemble_many(
        self, posts: Sequence[Post], viewer_id: Optional[UserId]
    ) -> list[PostWithDetails]:
        if not posts:
            return []

        owners = await self.user_service.find_by_ids([p.user_id for p in posts])
        flags: set[PostId] = set()
        if viewer_id is not None:
            flags = await self.kudos_service.kudos_flags(
                viewer_id, [p.id for p in posts]
            )

        result = []
        for post in posts:
            owner = owners.get(post.user_id)
            if not owner:
                continue
            result.append(await self._details(post, owner, post.id in flags))
        return result

    async def _details(
        self, post: Post, owner: User, user_kudos: bool
    ) -> PostWithDetails:
        items = await self.item_repository.find_by_post(post.id)
        images = await self.image_repository.find_by_post(post.id)
        comments = await self.comment_service.get_comments_for_post(post.id)
        authors = await self.user_service.find_by_ids([c.user_id for c in comments])
        kudos_count = await self.kudos_service.kudos_count_for_post(post.id)

        return PostWithDetails(
            post=post,
            user=owner,
            items=items,
            images=images,
            comments=[
                CommentWithAuthor(
                    comment=c,
                    author_username=(
                        authors[c.user_id].username if c.user_id in authors else None
                    ),
                )
                for c in comments
            ],
            kudos_count=kudos_count,
            user_kudos=user_kudos,
        )

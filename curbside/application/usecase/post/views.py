"""Response models for the post read model.

These flatten PostWithDetails into the JSON shape served by the API. The
owner's password hash and email never leave the domain layer.
"""

from datetime import datetime

from pydantic import BaseModel

from curbside.domain.model import CommentWithAuthor, PostWithDetails, User
from curbside.domain.value import ItemStatus, PostStatus


class UserSummary(BaseModel):
    """Public profile of a user as shown next to their posts."""

    id: str
    username: str
    kudos: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            id=str(user.id),
            username=user.username.root,
            kudos=user.kudos,
            created_at=user.created_at,
        )


class ItemView(BaseModel):
    id: str
    name: str
    status: ItemStatus


class ImageView(BaseModel):
    id: str
    url: str
    created_at: datetime


class CommentAuthor(BaseModel):
    id: str
    username: str | None


class CommentView(BaseModel):
    """A comment with its author's username."""

    id: str
    post_id: str
    user_id: str
    content: str
    created_at: datetime
    user: CommentAuthor

    @classmethod
    def from_comment(cls, entry: CommentWithAuthor) -> "CommentView":
        comment = entry.comment
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            user_id=str(comment.user_id),
            content=comment.content,
            created_at=comment.created_at,
            user=CommentAuthor(
                id=str(comment.user_id),
                username=entry.author_username.root if entry.author_username else None,
            ),
        )


class PostDetailsResponse(BaseModel):
    """A post with its author, items, images, comments and kudos."""

    id: str
    user_id: str
    location: str
    latitude: str
    longitude: str
    description: str | None
    status: PostStatus
    created_at: datetime
    updated_at: datetime
    user: UserSummary
    items: list[ItemView]
    images: list[ImageView]
    comments: list[CommentView]
    kudos_count: int
    user_kudos: bool

    @classmethod
    def from_details(cls, details: PostWithDetails) -> "PostDetailsResponse":
        post = details.post
        return cls(
            id=str(post.id),
            user_id=str(post.user_id),
            location=post.location,
            latitude=post.latitude.root,
            longitude=post.longitude.root,
            description=post.description,
            status=post.status,
            created_at=post.created_at,
            updated_at=post.updated_at,
            user=UserSummary.from_user(details.user),
            items=[
                ItemView(id=str(i.id), name=i.name, status=i.status)
                for i in details.items
            ],
            images=[
                ImageView(id=str(i.id), url=i.url, created_at=i.created_at)
                for i in details.images
            ],
            comments=[CommentView.from_comment(c) for c in details.comments],
            kudos_count=details.kudos_count,
            user_kudos=details.user_kudos,
        )

"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Union
from uuid import UUID

from curbside.domain.model import Comment, Image, Item, Kudos, Post, User
from curbside.domain.value import (
    CommentId,
    ImageId,
    ItemId,
    ItemStatus,
    Latitude,
    Longitude,
    PostId,
    PostStatus,
    UserId,
    Username,
)


def _uuid(value: Union[str, UUID]) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        password_hash=row["password_hash"],
        kudos=row["kudos"],
        last_posted_at=row.get("last_posted_at"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["username"] = user.username.root
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        location=row["location"],
        latitude=Latitude(row["latitude"]),
        longitude=Longitude(row["longitude"]),
        description=row.get("description"),
        status=PostStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = post.model_dump()
    data["latitude"] = post.latitude.root
    data["longitude"] = post.longitude.root
    data["status"] = post.status.value
    return data


def row_to_item(row: Dict[str, Any]) -> Item:
    """Convert database row to Item domain model."""
    return Item(
        id=ItemId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        name=row["name"],
        status=ItemStatus(row["status"]),
    )


def item_to_dict(item: Item) -> Dict[str, Any]:
    """Convert Item domain model to database dict."""
    data = item.model_dump()
    data["status"] = item.status.value
    return data


def row_to_image(row: Dict[str, Any]) -> Image:
    """Convert database row to Image domain model."""
    return Image(
        id=ImageId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        url=row["url"],
        created_at=row["created_at"],
    )


def image_to_dict(image: Image) -> Dict[str, Any]:
    """Convert Image domain model to database dict."""
    return image.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        content=row["content"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump()


def kudos_to_dict(kudos: Kudos) -> Dict[str, Any]:
    """Convert Kudos domain model to database dict.

    Args:
        kudos: Kudos domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return kudos.model_dump()

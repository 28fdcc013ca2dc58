"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from curbside.domain.model import Post, User
from curbside.domain.value import Latitude, Longitude, PostId, UserId, Username
from tests.di import TEST_EPOCH


def make_user(
    username: str,
    last_posted_at: datetime | None = None,
    kudos: int = 0,
) -> User:
    """Helper to build a user entity for seeding repositories.

    The password hash is a placeholder; use UserService.register when a
    test needs to log in.
    """
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=f"{username}@example.com",
        password_hash="not-a-real-hash",
        kudos=kudos,
        last_posted_at=last_posted_at,
        created_at=TEST_EPOCH - timedelta(days=30),
    )


def make_post(
    user_id: UserId,
    created_at: datetime,
    location: str = "Corner of Elm St",
) -> Post:
    """Helper to build a post entity created at a given time."""
    return Post(
        id=PostId(uuid4()),
        user_id=user_id,
        location=location,
        latitude=Latitude("40.7128"),
        longitude=Longitude("-74.0060"),
        description="Free stuff",
        created_at=created_at,
        updated_at=created_at,
    )

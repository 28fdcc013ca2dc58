"""Process-local storage shared by the in-memory repositories."""

from curbside.domain.model import Comment, Image, Item, Kudos, Post, User
from curbside.domain.value import CommentId, ImageId, ItemId, PostId, UserId


class InMemoryStore:
    """Tables of the in-memory backend.

    One store is shared by every repository of a process so that
    cross-aggregate deletes cascade the same way ON DELETE CASCADE does in
    PostgreSQL. Dicts keep insertion order, which stands in for the
    sequence columns of the SQL schema.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
        self.items: dict[ItemId, Item] = {}
        self.images: dict[ImageId, Image] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.kudos: dict[tuple[PostId, UserId], Kudos] = {}

    def delete_post(self, post_id: PostId) -> None:
        self.posts.pop(post_id, None)
        self.items = {k: v for k, v in self.items.items() if v.post_id != post_id}
        self.images = {k: v for k, v in self.images.items() if v.post_id != post_id}
        self.comments = {
            k: v for k, v in self.comments.items() if v.post_id != post_id
        }
        self.kudos = {k: v for k, v in self.kudos.items() if v.post_id != post_id}

    def delete_user(self, user_id: UserId) -> None:
        for post_id in [p.id for p in self.posts.values() if p.user_id == user_id]:
            self.delete_post(post_id)
        self.comments = {
            k: v for k, v in self.comments.items() if v.user_id != user_id
        }
        self.kudos = {k: v for k, v in self.kudos.items() if v.user_id != user_id}
        self.users.pop(user_id, None)

    def clear(self) -> None:
        self.users.clear()
        self.posts.clear()
        self.items.clear()
        self.images.clear()
        self.comments.clear()
        self.kudos.clear()

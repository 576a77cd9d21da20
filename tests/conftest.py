"""Test configuration and helpers."""

from datetime import datetime
from uuid import uuid4

from forum.domain.model import Comment, Post, User
from forum.domain.value import CommentId, PostId, UserId


def make_user(name: str = "Ada Lovelace", username: str | None = None) -> User:
    """Build a user with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        name=name,
        username=username,
        email=None,
        image=None,
    )


def make_post(author_id: UserId, title: str = "Test Post") -> Post:
    """Build a post with a fresh ID."""
    now = datetime.now()
    return Post(
        id=PostId(uuid4()),
        author_id=author_id,
        title=title,
        created_at=now,
        updated_at=now,
    )


def make_comment(
    post_id: PostId,
    author_id: UserId,
    body: str = "Test comment",
    parent_id: CommentId | None = None,
    created_at: datetime | None = None,
) -> Comment:
    """Build a comment with a fresh ID.

    Pass ``created_at`` when a test depends on ordering.
    """
    timestamp = created_at or datetime.now()
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id,
        body=body,
        parent_id=parent_id,
        created_at=timestamp,
        updated_at=timestamp,
    )

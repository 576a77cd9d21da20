"""Domain model entities for the forum."""

from forum.domain.model.comment import Comment
from forum.domain.model.like import Like
from forum.domain.model.notification import Notification
from forum.domain.model.post import Post
from forum.domain.model.thread import MAX_THREAD_DEPTH, ThreadNode
from forum.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Like",
    "Notification",
    "ThreadNode",
    "MAX_THREAD_DEPTH",
]

"""Comment thread read model.

A thread is the tree of comments under a post as returned to readers:
each node joins a comment with its author, its like count and whether the
viewer liked it.
"""

from typing import Optional

from forum.domain.model.comment import Comment
from forum.domain.model.common import DomainModel
from forum.domain.model.user import User

# Deepest reply level fetched for a thread. Top-level comments are depth 0,
# so a thread shows a top-level comment and up to six levels of replies.
MAX_THREAD_DEPTH = 6


class ThreadNode(DomainModel):
    """A comment inside a thread.

    ``children`` is None when the node sits at the depth cutoff and its
    replies were never fetched, and a (possibly empty) list otherwise.
    """

    comment: Comment
    author: User
    depth: int
    like_count: int = 0
    liked_by_viewer: bool = False
    children: Optional[list["ThreadNode"]] = None

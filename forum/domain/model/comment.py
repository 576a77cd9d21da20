"""Comment entity.

Comments are threaded discussions on posts. A comment without a parent is a
top-level comment; any other comment is a reply.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through parent_id alone (None for top-level).
    Deleting a comment removes its whole reply subtree.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    body: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

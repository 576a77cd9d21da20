"""Post entity.

Posts are owned by another part of the application; comments only need
to know who wrote them.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import PostId, UserId


class Post(DomainModel):
    """Post entity."""

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

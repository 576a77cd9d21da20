"""Like entity."""

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, UserId


class Like(DomainModel):
    """A user's endorsement of a single comment.

    Identified by the (user_id, comment_id) pair; a user likes a comment
    at most once (enforced by the table's composite primary key).
    """

    user_id: UserId
    comment_id: CommentId

"""Notification entity."""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)


class Notification(DomainModel):
    """Notification informing a user about activity on their content.

    Attributes:
        notifier_id: User whose action caused the notification
        user_id: Recipient
        type: What happened
        post_id: Post the activity happened on
        comment_id: Comment that caused the notification
    """

    id: NotificationId
    notifier_id: UserId
    user_id: UserId
    type: NotificationType
    post_id: PostId
    comment_id: CommentId
    created_at: datetime = Field(default_factory=datetime.now)

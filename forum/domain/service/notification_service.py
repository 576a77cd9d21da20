"""Notification domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from forum.domain.model import Comment, Notification, Post
from forum.domain.repository import CommentRepository, NotificationRepository
from forum.domain.value import NotificationId, NotificationType

from .base import Service


class NotificationService(Service):
    """Domain service for notifying users about activity on their content."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            comment_repository: Comment repository (parent author lookup)
        """
        self.notification_repository = notification_repository
        self.comment_repository = comment_repository

    async def notify_comment_created(
        self, comment: Comment, post: Post
    ) -> Notification | None:
        """Notify the owner of the content a new comment responds to.

        A reply notifies the parent comment's author; a top-level comment
        notifies the post's author. Nobody is notified about their own
        comments.

        Args:
            comment: The newly created comment
            post: The post the comment was made on

        Returns:
            The created notification, None if nobody needed notifying
        """
        with logfire.span(
            "notification_service.notify_comment_created",
            comment_id=str(comment.id),
            post_id=str(post.id),
        ):
            if comment.parent_id:
                parent = await self.comment_repository.find_by_id(comment.parent_id)
                recipient_id = parent.author_id if parent else None
                notification_type = NotificationType.NEW_REPLY_TO_YOUR_COMMENT
            else:
                recipient_id = post.author_id
                notification_type = NotificationType.NEW_COMMENT_ON_YOUR_POST

            if recipient_id is None or recipient_id == comment.author_id:
                logfire.info(
                    "No notification needed",
                    comment_id=str(comment.id),
                    type=notification_type.value,
                )
                return None

            notification = Notification(
                id=NotificationId(uuid4()),
                notifier_id=comment.author_id,
                user_id=recipient_id,
                type=notification_type,
                post_id=post.id,
                comment_id=comment.id,
                created_at=datetime.now(),
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
                type=notification_type.value,
            )
            return saved

"""In-memory notification repository for testing."""

from forum.domain.model.notification import Notification
from forum.domain.repository.notification import NotificationRepository
from forum.domain.value import UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: list[Notification] = []

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications.append(notification)
        return notification

    async def find_by_user(self, user_id: UserId) -> list[Notification]:
        """Find notifications addressed to a user, newest first."""
        notifications = [n for n in self._notifications if n.user_id == user_id]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications

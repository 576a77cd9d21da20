"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List

from forum.domain.model.notification import Notification
from forum.domain.value import UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create).

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Notification]:
        """Find notifications addressed to a user, newest first.

        Args:
            user_id: Recipient user ID

        Returns:
            List of notifications
        """
        pass

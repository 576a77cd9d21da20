"""PostgreSQL implementation of Notification repository."""

from typing import List

from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Notification
from forum.domain.repository import NotificationRepository
from forum.domain.value import UserId
from forum.persistence.mappers import row_to_notification, to_dict
from forum.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create)."""
        values = to_dict(notification)
        values["type"] = notification.type.value
        stmt = insert(notifications_table).values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def find_by_user(self, user_id: UserId) -> List[Notification]:
        """Find notifications addressed to a user, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(desc(notifications_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

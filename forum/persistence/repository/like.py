"""PostgreSQL implementation of Like repository."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Like
from forum.domain.repository import LikeRepository
from forum.domain.value import CommentId, UserId
from forum.persistence.mappers import row_to_like, to_dict
from forum.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, user_id: UserId, comment_id: CommentId) -> Optional[Like]:
        """Find a user's like on a comment."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def save(self, like: Like) -> Like:
        """Save a like (create)."""
        stmt = insert(likes_table).values(**to_dict(like))
        await self.session.execute(stmt)
        await self.session.flush()
        return like

    async def delete(self, user_id: UserId, comment_id: CommentId) -> Optional[Like]:
        """Delete a user's like on a comment."""
        stmt = (
            delete(likes_table)
            .where(
                and_(
                    likes_table.c.user_id == user_id,
                    likes_table.c.comment_id == comment_id,
                )
            )
            .returning(likes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_like(row._asdict()) if row else None

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count likes for several comments (batch query)."""
        if not comment_ids:
            return {}

        stmt = (
            select(likes_table.c.comment_id, func.count())
            .where(likes_table.c.comment_id.in_(comment_ids))
            .group_by(likes_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        return {CommentId(comment_id): count for comment_id, count in result.all()}

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[Like]:
        """Find a user's likes on several comments (batch query)."""
        if not comment_ids:
            return []

        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

"""In-memory like repository for testing."""

from collections import Counter
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from forum.domain.model.like import Like
from forum.domain.repository.like import LikeRepository
from forum.domain.value import CommentId, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[Like] = []

    async def find(self, user_id: UserId, comment_id: CommentId) -> Optional[Like]:
        """Find a user's like on a comment."""
        for like in self._likes:
            if like.user_id == user_id and like.comment_id == comment_id:
                return like
        return None

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes the comment
        """
        if await self.find(like.user_id, like.comment_id):
            raise IntegrityError("Duplicate like", None, Exception())

        self._likes.append(like)
        return like

    async def delete(self, user_id: UserId, comment_id: CommentId) -> Optional[Like]:
        """Delete a user's like on a comment."""
        for i, like in enumerate(self._likes):
            if like.user_id == user_id and like.comment_id == comment_id:
                return self._likes.pop(i)
        return None

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count likes for several comments."""
        wanted = set(comment_ids)
        return dict(
            Counter(like.comment_id for like in self._likes if like.comment_id in wanted)
        )

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[Like]:
        """Find a user's likes on several comments."""
        wanted = set(comment_ids)
        return [
            like
            for like in self._likes
            if like.user_id == user_id and like.comment_id in wanted
        ]

"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from forum.domain.model.like import Like
from forum.domain.value import CommentId, UserId


class LikeRepository(ABC):
    """Repository for Like entity."""

    @abstractmethod
    async def find(self, user_id: UserId, comment_id: CommentId) -> Optional[Like]:
        """Find a user's like on a comment.

        Args:
            user_id: The user's ID
            comment_id: The comment's ID

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Args:
            like: The like to save

        Returns:
            The saved like

        Raises:
            IntegrityError: If the user already likes the comment
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, comment_id: CommentId) -> Optional[Like]:
        """Delete a user's like on a comment.

        Returns:
            The deleted like, None if no like existed
        """
        pass

    @abstractmethod
    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count likes for several comments (batch query).

        Args:
            comment_ids: Comment IDs to count likes for

        Returns:
            Mapping of comment ID to like count; comments without likes
            may be missing
        """
        pass

    @abstractmethod
    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[Like]:
        """Find a user's likes on several comments (batch query).

        Args:
            user_id: The user's ID
            comment_ids: Comment IDs to check

        Returns:
            The user's likes on the given comments
        """
        pass

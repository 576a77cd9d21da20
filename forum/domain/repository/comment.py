"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from forum.domain.model.comment import Comment
from forum.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(self, post_id: PostId) -> List[Comment]:
        """Find the comments attached directly to a post.

        Args:
            post_id: The post ID

        Returns:
            Comments without a parent, newest first
        """
        pass

    @abstractmethod
    async def find_children(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find the direct replies to any of the given comments (batch query).

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Replies, oldest first
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count all comments on a post, at any depth.

        Args:
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace a comment's body and refresh its updated_at.

        Args:
            comment_id: The comment ID
            body: New body

        Returns:
            The updated comment, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> Optional[CommentId]:
        """Delete a comment (hard delete).

        Replies, likes and notifications referencing the comment are
        removed with it.

        Args:
            comment_id: The comment ID to delete

        Returns:
            The deleted comment's ID, None if nothing was deleted
        """
        pass

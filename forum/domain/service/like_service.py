"""Like domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import NotFoundError
from forum.domain.model.like import Like
from forum.domain.repository import CommentRepository, LikeRepository
from forum.domain.value import CommentId, UserId

from .base import Service


class LikeService(Service):
    """Domain service for like operations."""

    def __init__(
        self,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            comment_repository: Comment repository
        """
        self.like_repository = like_repository
        self.comment_repository = comment_repository

    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> tuple[Like, bool]:
        """Like a comment, or remove the like if the user already likes it.

        Args:
            comment_id: Comment ID
            user_id: User ID

        Returns:
            The created or removed like, and whether the comment is now liked

        Raises:
            NotFoundError: If the comment doesn't exist
            ValueError: If a concurrent request already created the like
        """
        with logfire.span(
            "like_service.toggle_like", comment_id=str(comment_id), user_id=str(user_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Like on non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            existing = await self.like_repository.find(user_id, comment_id)
            if existing:
                removed = await self.like_repository.delete(user_id, comment_id)
                logfire.info(
                    "Comment unliked", comment_id=str(comment_id), user_id=str(user_id)
                )
                return removed or existing, False

            like = Like(user_id=user_id, comment_id=comment_id)
            try:
                saved = await self.like_repository.save(like)
            except IntegrityError:
                logfire.warn(
                    "Duplicate like attempt",
                    user_id=str(user_id),
                    comment_id=str(comment_id),
                )
                raise ValueError("Already liked this comment")

            logfire.info("Comment liked", comment_id=str(comment_id), user_id=str(user_id))
            return saved, True

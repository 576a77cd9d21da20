"""Edit comment use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.model import Comment
from forum.domain.service import CommentService
from forum.domain.value import CommentId, UserId


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    body: str  # New body (required, cannot be empty)


class CommentResponse(BaseModel):
    """A single comment."""

    comment_id: str
    post_id: str
    author_id: str
    parent_id: str | None
    body: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            body=comment.body,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class EditCommentUseCase(BaseUseCase):
    """Use case for editing a comment's body."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize edit comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: EditCommentRequest) -> CommentResponse:
        """Execute edit comment flow.

        An unchanged body is not written; the stored comment is returned as is.

        Args:
            request: Edit comment request

        Returns:
            The comment after the edit

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If user doesn't own the comment
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        if comment.author_id != user_id:
            raise NotAuthorizedError("comment", request.comment_id, request.user_id)

        if comment.body == request.body:
            logfire.info("Comment body unchanged, skipping write", comment_id=request.comment_id)
            return CommentResponse.from_comment(comment)

        updated = await self.comment_service.update_body(comment_id, request.body)
        if updated is None:
            # Deleted between the read and the write
            raise NotFoundError("Comment", request.comment_id)

        return CommentResponse.from_comment(updated)

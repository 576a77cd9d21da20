"""Like comment use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import LikeService
from forum.domain.value import CommentId, UserId


class LikeCommentRequest(BaseModel):
    """Like comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class LikeCommentResponse(BaseModel):
    """The like that was created or removed."""

    user_id: str
    comment_id: str
    liked: bool  # False when the request removed an existing like


class LikeCommentUseCase(BaseUseCase):
    """Use case for toggling a user's like on a comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize like comment use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute like toggle.

        Args:
            request: Like comment request

        Returns:
            The like record and whether the comment is now liked

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        like, liked = await self.like_service.toggle_like(
            comment_id=CommentId(UUID(request.comment_id)),
            user_id=UserId(UUID(request.user_id)),
        )

        return LikeCommentResponse(
            user_id=str(like.user_id),
            comment_id=str(like.comment_id),
            liked=liked,
        )

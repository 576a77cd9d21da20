"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import NotFoundError
from forum.domain.service import CommentService, NotificationService, PostService
from forum.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    body: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            notification_service: Notification domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.notification_service = notification_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify post exists via post service
        2. Create comment via comment service (validates parent if replying)
        3. Notify the parent comment's or the post's author

        Both writes happen in the request's transaction.

        Args:
            request: Create comment request

        Returns:
            ID of the new comment

        Raises:
            NotFoundError: If post or parent comment not found
            ValidationError: If the parent belongs to another post
            ValueError: If an ID is not a valid UUID
        """
        post_id = PostId(UUID(request.post_id))

        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", request.post_id)

        parent_comment_id = (
            CommentId(UUID(request.parent_id)) if request.parent_id else None
        )
        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=UserId(UUID(request.author_id)),
            body=request.body,
            parent_id=parent_comment_id,
        )

        await self.notification_service.notify_comment_created(comment, post)

        return CreateCommentResponse(comment_id=str(comment.id))

"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import ThreadNode
from forum.domain.service import CommentService
from forum.domain.value import PostId, UserId


class CommentAuthor(BaseModel):
    """Author projection shown next to a comment."""

    id: str
    username: str | None
    name: str
    image: str | None
    email: str | None


class CommentTreeItem(BaseModel):
    """Comment in a thread, with its replies nested under it.

    Serialized with camelCase keys. ``children`` is left unset on comments at
    the depth cutoff, so it is omitted from responses rendered with
    ``exclude_unset``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    body: str
    created_at: datetime
    updated_at: datetime
    user: CommentAuthor
    you_liked_this: bool
    like_count: int
    children: list["CommentTreeItem"] | None = None


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    viewer_id: str | None = None  # Authenticated reader, None when anonymous


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    data: list[CommentTreeItem]
    count: int  # All comments on the post, including ones below the cutoff


def to_tree_item(node: ThreadNode) -> CommentTreeItem:
    """Shape a thread node, and recursively its replies, for the API."""
    fields = dict(
        id=str(node.comment.id),
        body=node.comment.body,
        created_at=node.comment.created_at,
        updated_at=node.comment.updated_at,
        user=CommentAuthor(
            id=str(node.author.id),
            username=node.author.username,
            name=node.author.name,
            image=node.author.image,
            email=node.author.email,
        ),
        you_liked_this=node.liked_by_viewer,
        like_count=node.like_count,
    )
    if node.children is not None:
        fields["children"] = [to_tree_item(child) for child in node.children]
    return CommentTreeItem(**fields)


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading the comment tree of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with post ID and optional viewer

        Returns:
            Threaded comments with per-viewer like state, and the total count
        """
        post_id = PostId(UUID(request.post_id))
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None

        count = await self.comment_service.count_comments(post_id)
        thread = await self.comment_service.get_thread(post_id, viewer_id=viewer_id)

        return GetCommentsResponse(
            data=[to_tree_item(node) for node in thread],
            count=count,
        )

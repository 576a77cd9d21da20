"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from forum.domain.model.comment import Comment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(self, post_id: PostId) -> list[Comment]:
        """Find top-level comments on a post, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_id is None
        ]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    async def find_children(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Find direct replies to any of the given comments, oldest first."""
        wanted = set(parent_ids)
        comments = [c for c in self._comments.values() if c.parent_id in wanted]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post at any depth."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Update the body of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        updated = comment.model_copy(update={"body": body, "updated_at": datetime.now()})
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> Optional[CommentId]:
        """Delete a comment and, like the database cascade, all its replies."""
        if comment_id not in self._comments:
            return None

        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            frontier = [
                c.id for c in self._comments.values() if c.parent_id in frontier
            ]
            doomed.update(frontier)

        for doomed_id in doomed:
            del self._comments[doomed_id]
        return comment_id

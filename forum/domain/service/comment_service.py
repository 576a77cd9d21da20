"""Comment domain service."""

from collections import defaultdict
from datetime import datetime
from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import MAX_THREAD_DEPTH, Comment, ThreadNode, User
from forum.domain.repository import CommentRepository, LikeRepository, UserRepository
from forum.domain.value import CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        user_repository: UserRepository,
        max_thread_depth: int = MAX_THREAD_DEPTH,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            like_repository: Like repository (like counts in threads)
            user_repository: User repository (author projections in threads)
            max_thread_depth: Deepest reply level returned by get_thread
        """
        self.comment_repository = comment_repository
        self.like_repository = like_repository
        self.user_repository = user_repository
        self.max_thread_depth = max_thread_depth

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        body: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            body: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent comment doesn't exist
            ValidationError: If the parent belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError("Parent comment does not belong to this post")

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                body=body,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                is_reply=saved.is_reply,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def update_body(self, comment_id: CommentId, body: str) -> Comment | None:
        """Update the body of a comment.

        Args:
            comment_id: Comment ID
            body: New body

        Returns:
            Updated comment if found, None if the comment doesn't exist
        """
        with logfire.span(
            "comment_service.update_body",
            comment_id=str(comment_id),
            body_length=len(body),
        ):
            updated = await self.comment_repository.update_body(comment_id, body)

            if updated:
                logfire.info(
                    "Comment body updated",
                    comment_id=str(comment_id),
                    post_id=str(updated.post_id),
                    body_length=len(updated.body),
                )
            else:
                logfire.warn(
                    "Comment not found for body update", comment_id=str(comment_id)
                )

            return updated

    async def delete_comment(self, comment_id: CommentId) -> CommentId | None:
        """Hard delete a comment together with its replies.

        Args:
            comment_id: Comment ID

        Returns:
            The deleted comment's ID, None if it didn't exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            deleted = await self.comment_repository.delete(comment_id)
            if deleted:
                logfire.info("Comment deleted", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found for delete", comment_id=str(comment_id))
            return deleted

    async def count_comments(self, post_id: PostId) -> int:
        """Count every comment on a post, including ones below the depth cutoff."""
        return await self.comment_repository.count_by_post(post_id)

    async def get_thread(
        self, post_id: PostId, viewer_id: UserId | None = None
    ) -> list[ThreadNode]:
        """Get the comment tree for a post.

        Comments are fetched one level at a time, starting with top-level
        comments (newest first) and stopping after ``max_thread_depth``
        levels of replies. Replies deeper than that are never queried.
        Authors, like counts and the viewer's likes are loaded in one batch
        for the whole tree.

        Args:
            post_id: Post ID
            viewer_id: User reading the thread (None for anonymous readers)

        Returns:
            Top-level thread nodes with their replies nested under them
        """
        with logfire.span(
            "comment_service.get_thread",
            post_id=str(post_id),
            viewer_id=str(viewer_id) if viewer_id else None,
            max_depth=self.max_thread_depth,
        ):
            levels: list[list[Comment]] = []
            current = await self.comment_repository.find_top_level(post_id)
            while current:
                levels.append(current)
                if len(levels) > self.max_thread_depth:
                    break
                current = await self.comment_repository.find_children(
                    [comment.id for comment in current]
                )

            comments = [comment for level in levels for comment in level]
            if not comments:
                return []

            comment_ids = [comment.id for comment in comments]
            author_ids = list({comment.author_id for comment in comments})
            authors = {
                user.id: user
                for user in await self.user_repository.find_by_ids(author_ids)
            }
            like_counts = await self.like_repository.count_by_comments(comment_ids)

            liked: set[CommentId] = set()
            if viewer_id is not None:
                likes = await self.like_repository.find_by_user_and_comments(
                    viewer_id, comment_ids
                )
                liked = {like.comment_id for like in likes}

            replies: dict[CommentId, list[Comment]] = defaultdict(list)
            for level in levels[1:]:
                for comment in level:
                    replies[comment.parent_id].append(comment)  # type: ignore[index]

            thread = self._build_nodes(
                levels[0], 0, replies, authors, like_counts, liked
            )
            logfire.info(
                "Thread retrieved",
                post_id=str(post_id),
                fetched=len(comments),
                depth=len(levels) - 1,
            )
            return thread

    def _build_nodes(
        self,
        comments: list[Comment],
        depth: int,
        replies: dict[CommentId, list[Comment]],
        authors: dict[UserId, User],
        like_counts: dict[CommentId, int],
        liked: set[CommentId],
    ) -> list[ThreadNode]:
        nodes = []
        for comment in comments:
            author = authors.get(comment.author_id)
            if author is None:
                logfire.warn(
                    "Comment author not found, skipping",
                    comment_id=str(comment.id),
                    author_id=str(comment.author_id),
                )
                continue

            # Nodes at the cutoff have no children key at all
            children = None
            if depth < self.max_thread_depth:
                children = self._build_nodes(
                    replies.get(comment.id, []),
                    depth + 1,
                    replies,
                    authors,
                    like_counts,
                    liked,
                )

            nodes.append(
                ThreadNode(
                    comment=comment,
                    author=author,
                    depth=depth,
                    like_count=like_counts.get(comment.id, 0),
                    liked_by_viewer=comment.id in liked,
                    children=children,
                )
            )
        return nodes

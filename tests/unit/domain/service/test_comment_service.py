"""Unit tests for CommentService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Like
from forum.domain.repository import CommentRepository, LikeRepository, UserRepository
from forum.domain.service import CommentService
from forum.domain.value import CommentId, PostId
from tests.conftest import make_comment, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Top-level comment should be saved without a parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        author = make_user()

        # Act
        result = await comment_service.create_comment(
            post_id=post_id,
            author_id=author.id,
            body="First!",
        )

        # Assert
        assert result.parent_id is None
        assert result.is_reply is False
        assert result.body == "First!"
        assert result.created_at == result.updated_at
        assert await comment_repo.find_by_id(result.id) == result

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """Reply should reference its parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        parent = await comment_repo.save(make_comment(post_id, make_user().id))

        # Act
        result = await comment_service.create_comment(
            post_id=post_id,
            author_id=make_user().id,
            body="A reply",
            parent_id=parent.id,
        )

        # Assert
        assert result.parent_id == parent.id
        assert result.is_reply is True

    @pytest.mark.asyncio
    async def test_create_reply_to_missing_parent_fails(self, unit_env):
        """Replying to a comment that doesn't exist should raise NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                post_id=PostId(uuid4()),
                author_id=make_user().id,
                body="Orphan",
                parent_id=CommentId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_create_reply_to_parent_on_other_post_fails(self, unit_env):
        """Parent must belong to the same post."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_repo.save(make_comment(PostId(uuid4()), make_user().id))

        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                post_id=PostId(uuid4()),
                author_id=make_user().id,
                body="Wrong thread",
                parent_id=parent.id,
            )


class TestUpdateAndDelete:
    """Tests for update_body and delete_comment."""

    @pytest.mark.asyncio
    async def test_update_body(self, unit_env):
        """Updating should change the body and refresh updated_at."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        written = datetime.now() - timedelta(hours=1)
        comment = await comment_repo.save(
            make_comment(PostId(uuid4()), make_user().id, created_at=written)
        )

        updated = await comment_service.update_body(comment.id, "Edited")

        assert updated is not None
        assert updated.body == "Edited"
        assert updated.created_at == written
        assert updated.updated_at > written

    @pytest.mark.asyncio
    async def test_update_missing_comment_returns_none(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.update_body(CommentId(uuid4()), "Edited") is None

    @pytest.mark.asyncio
    async def test_delete_removes_replies(self, unit_env):
        """Deleting a comment should remove its whole reply subtree."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        author_id = make_user().id
        root = await comment_repo.save(make_comment(post_id, author_id))
        reply = await comment_repo.save(
            make_comment(post_id, author_id, parent_id=root.id)
        )
        nested = await comment_repo.save(
            make_comment(post_id, author_id, parent_id=reply.id)
        )
        sibling = await comment_repo.save(make_comment(post_id, author_id))

        deleted = await comment_service.delete_comment(root.id)

        assert deleted == root.id
        assert await comment_repo.find_by_id(root.id) is None
        assert await comment_repo.find_by_id(reply.id) is None
        assert await comment_repo.find_by_id(nested.id) is None
        assert await comment_repo.find_by_id(sibling.id) == sibling
        assert await comment_service.count_comments(post_id) == 1

    @pytest.mark.asyncio
    async def test_delete_missing_comment_returns_none(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.delete_comment(CommentId(uuid4())) is None


class TestGetThread:
    """Tests for get_thread method."""

    @pytest.mark.asyncio
    async def test_empty_post(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.get_thread(PostId(uuid4())) == []

    @pytest.mark.asyncio
    async def test_top_level_newest_first_and_replies_oldest_first(self, unit_env):
        """Top-level comments are newest first; replies are oldest first."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        post_id = PostId(uuid4())
        base = datetime(2024, 1, 1, 12, 0)

        older = await comment_repo.save(make_comment(post_id, author.id, created_at=base))
        newer = await comment_repo.save(
            make_comment(post_id, author.id, created_at=base + timedelta(minutes=5))
        )
        late_reply = await comment_repo.save(
            make_comment(
                post_id,
                author.id,
                parent_id=older.id,
                created_at=base + timedelta(minutes=30),
            )
        )
        early_reply = await comment_repo.save(
            make_comment(
                post_id,
                author.id,
                parent_id=older.id,
                created_at=base + timedelta(minutes=10),
            )
        )

        # Act
        thread = await comment_service.get_thread(post_id)

        # Assert
        assert [node.comment.id for node in thread] == [newer.id, older.id]
        assert thread[0].children == []
        assert [node.comment.id for node in thread[1].children] == [
            early_reply.id,
            late_reply.id,
        ]
        assert all(node.depth == 1 for node in thread[1].children)

    @pytest.mark.asyncio
    async def test_depth_cutoff(self, unit_env):
        """Replies below depth 6 are not returned but are still counted."""
        # Arrange: a single chain eight comments deep (depths 0..7)
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        post_id = PostId(uuid4())

        parent_id = None
        for _ in range(8):
            comment = await comment_repo.save(
                make_comment(post_id, author.id, parent_id=parent_id)
            )
            parent_id = comment.id

        # Act
        thread = await comment_service.get_thread(post_id)
        count = await comment_service.count_comments(post_id)

        # Assert
        node = thread[0]
        for depth in range(1, 7):
            assert node.children is not None
            assert len(node.children) == 1
            node = node.children[0]
            assert node.depth == depth

        assert node.depth == 6
        assert node.children is None
        assert count == 8

    @pytest.mark.asyncio
    async def test_depth_cutoff_follows_configured_limit(self, unit_env):
        """A service built with a smaller limit stops earlier."""
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        comment_service = CommentService(
            comment_repository=comment_repo,
            like_repository=await unit_env.get(LikeRepository),
            user_repository=user_repo,
            max_thread_depth=1,
        )
        author = await user_repo.save(make_user())
        post_id = PostId(uuid4())
        root = await comment_repo.save(make_comment(post_id, author.id))
        reply = await comment_repo.save(
            make_comment(post_id, author.id, parent_id=root.id)
        )
        await comment_repo.save(make_comment(post_id, author.id, parent_id=reply.id))

        thread = await comment_service.get_thread(post_id)

        assert thread[0].children is not None
        assert thread[0].children[0].comment.id == reply.id
        assert thread[0].children[0].children is None

    @pytest.mark.asyncio
    async def test_like_counts_and_viewer_flags(self, unit_env):
        """Nodes carry like counts and whether the viewer liked them."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        viewer = make_user("Viewer")
        other = make_user("Other")
        post_id = PostId(uuid4())

        comment = await comment_repo.save(make_comment(post_id, author.id))
        await like_repo.save(Like(user_id=viewer.id, comment_id=comment.id))
        await like_repo.save(Like(user_id=other.id, comment_id=comment.id))

        # Act
        as_viewer = await comment_service.get_thread(post_id, viewer_id=viewer.id)
        as_author = await comment_service.get_thread(post_id, viewer_id=author.id)
        anonymous = await comment_service.get_thread(post_id)

        # Assert
        assert as_viewer[0].like_count == 2
        assert as_viewer[0].liked_by_viewer is True
        assert as_author[0].liked_by_viewer is False
        assert anonymous[0].liked_by_viewer is False
        assert anonymous[0].like_count == 2

    @pytest.mark.asyncio
    async def test_author_projection_attached(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("Grace Hopper", username="grace"))
        post_id = PostId(uuid4())
        await comment_repo.save(make_comment(post_id, author.id))

        thread = await comment_service.get_thread(post_id)

        assert thread[0].author == author

    @pytest.mark.asyncio
    async def test_comment_with_missing_author_is_skipped(self, unit_env):
        """Comments whose author no longer exists are left out of the tree."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        post_id = PostId(uuid4())
        kept = await comment_repo.save(make_comment(post_id, author.id))
        await comment_repo.save(make_comment(post_id, make_user().id))

        thread = await comment_service.get_thread(post_id)

        assert [node.comment.id for node in thread] == [kept.id]

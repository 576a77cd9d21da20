"""Unit tests for EditCommentUseCase."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from forum.application.usecase.comment import EditCommentRequest, EditCommentUseCase
from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.repository import CommentRepository
from forum.domain.value import PostId
from tests.conftest import make_comment, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestEditCommentUseCase:
    """Tests for EditCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        # Arrange
        use_case = await unit_env.get(EditCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user()
        written = datetime.now() - timedelta(minutes=10)
        comment = await comment_repo.save(
            make_comment(PostId(uuid4()), author.id, body="Typo", created_at=written)
        )

        # Act
        response = await use_case.execute(
            EditCommentRequest(
                comment_id=str(comment.id), user_id=str(author.id), body="Fixed"
            )
        )

        # Assert
        assert response.comment_id == str(comment.id)
        assert response.body == "Fixed"
        assert response.updated_at > written
        stored = await comment_repo.find_by_id(comment.id)
        assert stored is not None
        assert stored.body == "Fixed"

    @pytest.mark.asyncio
    async def test_non_author_cannot_edit(self, unit_env):
        """Edits by anyone but the author are rejected without changes."""
        use_case = await unit_env.get(EditCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(
            make_comment(PostId(uuid4()), make_user().id, body="Original")
        )

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                EditCommentRequest(
                    comment_id=str(comment.id),
                    user_id=str(make_user().id),
                    body="Vandalised",
                )
            )

        assert await comment_repo.find_by_id(comment.id) == comment

    @pytest.mark.asyncio
    async def test_identical_body_is_not_written(self, unit_env):
        """Submitting the same body returns the stored comment untouched."""
        use_case = await unit_env.get(EditCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user()
        written = datetime.now() - timedelta(days=1)
        comment = await comment_repo.save(
            make_comment(PostId(uuid4()), author.id, body="Same", created_at=written)
        )

        response = await use_case.execute(
            EditCommentRequest(
                comment_id=str(comment.id), user_id=str(author.id), body="Same"
            )
        )

        assert response.updated_at == written
        assert await comment_repo.find_by_id(comment.id) == comment

    @pytest.mark.asyncio
    async def test_missing_comment_fails(self, unit_env):
        use_case = await unit_env.get(EditCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                EditCommentRequest(
                    comment_id=str(uuid4()), user_id=str(uuid4()), body="Anything"
                )
            )

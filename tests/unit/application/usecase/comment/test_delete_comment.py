"""Unit tests for DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from forum.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.repository import CommentRepository
from forum.domain.value import PostId
from tests.conftest import make_comment, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_deletes_comment_and_replies(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user()
        post_id = PostId(uuid4())
        comment = await comment_repo.save(make_comment(post_id, author.id))
        await comment_repo.save(
            make_comment(post_id, make_user().id, parent_id=comment.id)
        )

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(comment.id), user_id=str(author.id))
        )

        # Assert
        assert response.comment_id == str(comment.id)
        assert await comment_repo.count_by_post(post_id) == 0

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(PostId(uuid4()), make_user().id))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(
                    comment_id=str(comment.id), user_id=str(make_user().id)
                )
            )

        assert await comment_repo.find_by_id(comment.id) == comment

    @pytest.mark.asyncio
    async def test_missing_comment_fails(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(uuid4()), user_id=str(uuid4()))
            )

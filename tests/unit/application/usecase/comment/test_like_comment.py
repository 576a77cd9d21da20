"""Unit tests for LikeCommentUseCase."""

from uuid import uuid4

import pytest

from forum.application.usecase.comment import LikeCommentRequest, LikeCommentUseCase
from forum.domain.error import NotFoundError
from forum.domain.repository import CommentRepository
from forum.domain.value import PostId
from tests.conftest import make_comment, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLikeCommentUseCase:
    """Tests for LikeCommentUseCase."""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env):
        use_case = await unit_env.get(LikeCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(PostId(uuid4()), make_user().id))
        request = LikeCommentRequest(
            comment_id=str(comment.id), user_id=str(make_user().id)
        )

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert first.liked is True
        assert first.comment_id == str(comment.id)
        assert first.user_id == request.user_id
        assert second.liked is False
        assert second.user_id == request.user_id

    @pytest.mark.asyncio
    async def test_like_missing_comment_fails(self, unit_env):
        use_case = await unit_env.get(LikeCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                LikeCommentRequest(comment_id=str(uuid4()), user_id=str(uuid4()))
            )

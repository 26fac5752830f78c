"""Unit tests for ReactUseCase and WithdrawReactionUseCase."""

import pytest

from forum.application.usecase.reaction import (
    ReactionRequest,
    ReactUseCase,
    WithdrawReactionUseCase,
)
from forum.domain.error import NotFoundError, ValidationError
from forum.domain.repository import CommentRepository, PostRepository, UserRepository
from forum.domain.value import ReactableType, ReactionKind
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(env):
    user_repo = await env.get(UserRepository)
    post_repo = await env.get(PostRepository)
    comment_repo = await env.get(CommentRepository)
    author = await user_repo.save(make_user("author", "Author"))
    reader = await user_repo.save(make_user("reader", "Reader"))
    post = await post_repo.save(make_post(author.id))
    comment = await comment_repo.save(make_comment(post.id, author.id))
    return author, reader, post, comment


class TestReactUseCase:
    """Tests for ReactUseCase."""

    @pytest.mark.asyncio
    async def test_like_post_response_shape(self, unit_env):
        # Arrange
        _, reader, post, _ = await _seed(unit_env)
        use_case = await unit_env.get(ReactUseCase)

        # Act
        response = await use_case.execute(
            ReactionRequest(
                reactable_type=ReactableType.POST,
                reactable_id=str(post.id),
                user_id=str(reader.id),
                kind=ReactionKind.LIKE,
            )
        )

        # Assert
        assert response.likes == [str(reader.id)]
        assert response.dislikes == []
        assert response.author_points == 3

    @pytest.mark.asyncio
    async def test_dislike_comment_under_its_post(self, unit_env):
        # Arrange
        author, reader, post, comment = await _seed(unit_env)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.add_points(author.id, 2)
        use_case = await unit_env.get(ReactUseCase)

        # Act
        response = await use_case.execute(
            ReactionRequest(
                reactable_type=ReactableType.COMMENT,
                reactable_id=str(comment.id),
                user_id=str(reader.id),
                kind=ReactionKind.DISLIKE,
                post_id=str(post.id),
            )
        )

        # Assert
        assert response.dislikes == [str(reader.id)]
        assert response.author_points == 1

    @pytest.mark.asyncio
    async def test_comment_under_wrong_post_not_found(self, unit_env):
        # Arrange
        author, reader, _, comment = await _seed(unit_env)
        post_repo = await unit_env.get(PostRepository)
        other = await post_repo.save(make_post(author.id, title="Other"))
        use_case = await unit_env.get(ReactUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                ReactionRequest(
                    reactable_type=ReactableType.COMMENT,
                    reactable_id=str(comment.id),
                    user_id=str(reader.id),
                    kind=ReactionKind.LIKE,
                    post_id=str(other.id),
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_id_rejected(self, unit_env):
        # Arrange
        _, reader, _, _ = await _seed(unit_env)
        use_case = await unit_env.get(ReactUseCase)

        # Act & Assert
        with pytest.raises(ValidationError, match="Malformed post id"):
            await use_case.execute(
                ReactionRequest(
                    reactable_type=ReactableType.POST,
                    reactable_id="12345",
                    user_id=str(reader.id),
                    kind=ReactionKind.LIKE,
                )
            )


class TestWithdrawReactionUseCase:
    """Tests for WithdrawReactionUseCase."""

    @pytest.mark.asyncio
    async def test_undislike_restores_points(self, unit_env):
        # Arrange
        author, reader, post, _ = await _seed(unit_env)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.add_points(author.id, 5)
        react = await unit_env.get(ReactUseCase)
        withdraw = await unit_env.get(WithdrawReactionUseCase)
        request = ReactionRequest(
            reactable_type=ReactableType.POST,
            reactable_id=str(post.id),
            user_id=str(reader.id),
            kind=ReactionKind.DISLIKE,
        )
        await react.execute(request)

        # Act
        response = await withdraw.execute(request)

        # Assert
        assert response.dislikes == []
        assert response.author_points == 5

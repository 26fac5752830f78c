"""Unit tests for comment use cases."""

from uuid import UUID, uuid4

import pytest

from forum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.repository import PostRepository, ReactionRepository, UserRepository
from forum.domain.service import ReactionService
from forum.domain.value import CommentId, ReactableType
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(env):
    user_repo = await env.get(UserRepository)
    post_repo = await env.get(PostRepository)
    poster = await user_repo.save(make_user("poster", "Poster"))
    commenter = await user_repo.save(make_user("commenter", "Commenter"))
    post = await post_repo.save(make_post(poster.id))
    return poster, commenter, post


async def _comment(env, post, author, body="Nice post"):
    use_case = await env.get(CreateCommentUseCase)
    return await use_case.execute(
        CreateCommentRequest(post_id=str(post.id), author_id=str(author.id), body=body)
    )


class TestCreateComment:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_awards_one_point(self, unit_env):
        # Arrange
        _, commenter, post = await _seed(unit_env)

        # Act
        view = await _comment(unit_env, post, commenter)

        # Assert
        assert view.post_id == str(post.id)
        assert view.author.points == 1

    @pytest.mark.asyncio
    async def test_missing_post_raises(self, unit_env):
        # Arrange
        _, commenter, _ = await _seed(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Post not found"):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(uuid4()), author_id=str(commenter.id), body="Hi"
                )
            )


class TestListComments:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_newest_first_with_total(self, unit_env):
        # Arrange
        _, commenter, post = await _seed(unit_env)
        older = await _comment(unit_env, post, commenter, "first")
        newer = await _comment(unit_env, post, commenter, "second")

        # Act
        result = await (await unit_env.get(ListCommentsUseCase)).execute(
            ListCommentsRequest(post_id=str(post.id))
        )

        # Assert
        assert result.total_comments == 2
        assert [c.comment_id for c in result.comments] == [
            newer.comment_id,
            older.comment_id,
        ]


class TestUpdateComment:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        # Arrange
        _, commenter, post = await _seed(unit_env)
        created = await _comment(unit_env, post, commenter)

        # Act
        view = await (await unit_env.get(UpdateCommentUseCase)).execute(
            UpdateCommentRequest(
                post_id=str(post.id),
                comment_id=created.comment_id,
                user_id=str(commenter.id),
                body="Edited",
            )
        )

        # Assert
        assert view.body == "Edited"

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        # Arrange
        poster, commenter, post = await _seed(unit_env)
        created = await _comment(unit_env, post, commenter)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await (await unit_env.get(UpdateCommentUseCase)).execute(
                UpdateCommentRequest(
                    post_id=str(post.id),
                    comment_id=created.comment_id,
                    user_id=str(poster.id),
                    body="Hijacked",
                )
            )

    @pytest.mark.asyncio
    async def test_comment_on_other_post_not_found(self, unit_env):
        # Arrange
        poster, commenter, post = await _seed(unit_env)
        post_repo = await unit_env.get(PostRepository)
        other_post = await post_repo.save(make_post(poster.id, title="Other"))
        created = await _comment(unit_env, post, commenter)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await (await unit_env.get(UpdateCommentUseCase)).execute(
                UpdateCommentRequest(
                    post_id=str(other_post.id),
                    comment_id=created.comment_id,
                    user_id=str(commenter.id),
                    body="Moved",
                )
            )


class TestDeleteComment:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_reverses_award_and_clears_reactions(self, unit_env):
        # Arrange
        poster, commenter, post = await _seed(unit_env)
        ledger = await unit_env.get(ReactionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        created = await _comment(unit_env, post, commenter)  # 1
        comment_id = CommentId(UUID(created.comment_id))
        await ledger.like(ReactableType.COMMENT, comment_id, poster.id)  # 4

        # Act
        result = await (await unit_env.get(DeleteCommentUseCase)).execute(
            DeleteCommentRequest(
                post_id=str(post.id),
                comment_id=created.comment_id,
                user_id=str(commenter.id),
            )
        )

        # Assert
        assert result.author_points == 3
        assert (
            await reaction_repo.find(poster.id, ReactableType.COMMENT, comment_id)
            is None
        )

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        # Arrange
        poster, commenter, post = await _seed(unit_env)
        created = await _comment(unit_env, post, commenter)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await (await unit_env.get(DeleteCommentUseCase)).execute(
                DeleteCommentRequest(
                    post_id=str(post.id),
                    comment_id=created.comment_id,
                    user_id=str(poster.id),
                )
            )

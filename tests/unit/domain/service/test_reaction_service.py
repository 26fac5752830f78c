"""Unit tests for ReactionService (the point ledger)."""

import asyncio
from uuid import uuid4

import pytest

from forum.domain.error import NotFoundError
from forum.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from forum.domain.service import ReactionService
from forum.domain.value import PostId, ReactableType, UserId
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _seed_post(env, author_points: int = 0):
    """Save an author, a post by them and two other users."""
    user_repo = await env.get(UserRepository)
    post_repo = await env.get(PostRepository)

    author = await user_repo.save(
        make_user("author", "Author", points=author_points)
    )
    user_a = await user_repo.save(make_user("user_a", "User A"))
    user_b = await user_repo.save(make_user("user_b", "User B"))
    post = await post_repo.save(make_post(author.id))
    return author, user_a, user_b, post


async def _points(env, user_id: UserId) -> int:
    user_repo = await env.get(UserRepository)
    user = await user_repo.find_by_id(user_id)
    return user.points


class TestLike:
    """Tests for like."""

    @pytest.mark.asyncio
    async def test_like_adds_user_and_awards_three_points(self, unit_env):
        """Liking a fresh post should add the user and give the author +3."""
        # Arrange
        ledger = await unit_env.get(ReactionService)
        author, user_a, _, post = await _seed_post(unit_env)

        # Act
        result = await ledger.like(ReactableType.POST, post.id, user_a.id)

        # Assert
        assert result.liked_by == {user_a.id}
        assert result.disliked_by == frozenset()
        assert result.author_points == 3
        assert await _points(unit_env, author.id) == 3

    @pytest.mark.asyncio
    async def test_like_is_idempotent(self, unit_env):
        """Liking twice should change nothing the second time."""
        # Arrange
        ledger = await unit_env.get(ReactionService)
        author, user_a, _, post = await _seed_post(unit_env)
        await ledger.like(ReactableType.POST, post.id, user_a.id)

        # Act
        result = await ledger.like(ReactableType.POST, post.id, user_a.id)

        # Assert
        assert result.liked_by == {user_a.id}
        assert result.author_points == 3
        assert await _points(unit_env, author.id) == 3

    @pytest.mark.asyncio
    async def test_like_after_dislike_switches_sides(self, unit_env):
        """Liking a disliked item should drop the dislike (+1) then add the like (+3)."""
        # Arrange
        ledger = await unit_env.get(ReactionService)
        author, user_a, _, post = await _seed_post(unit_env, author_points=5)
        await ledger.dislike(ReactableType.POST, post.id, user_a.id)  # 5 -> 4

        # Act
        result = await ledger.like(ReactableType.POST, post.id, user_a.id)

        # Assert
        assert result.liked_by == {user_a.id}
        assert result.disliked_by == frozenset()
        assert result.author_points == 8
        assert await _points(unit_env, author.id) == 8

    @pytest.mark.asyncio
    async def test_self_like_counts(self, unit_env):
        """Authors may react to their own content."""
        # Arrange
        ledger = await unit_env.get(ReactionService)
        author, _, _, post = await _seed_post(unit_env)

        # Act
        result = await ledger.like(ReactableType.POST, post.id, author.id)

        # Assert
        assert result.liked_by == {author.id}
        assert result.author_points == 3


class TestUnlike:
    """Tests for unlike."""

    @pytest.mark.asyncio
    async def test_like_then_unlike_restores_points(self, unit_env):
        """Round trip should restore both the sets and the author's points."""
        # Arrange
        ledger = await unit_env.get(ReactionService)
        author, user_a, _, post = await _seed_post(unit_env, author_points=10)

        # Act
        await ledger.like(ReactableType.POST, post.id, user_a.id)
        result = await ledger.unlike(ReactableType.POST, post.id, user_a.id)

        # Assert
        assert result.liked_by == frozenset()
        assert result.author_points == 10
        assert await _points(unit_env, author.id) == 10

    @pytest.mark.asyncio
    async def test_unlike_without_like_is_noop(self, unit_env):
        """Unliking an item the user does not like changes nothing."""
        # Arrange
        ledger = await unit_env.get(ReactionService)
        author, user_a, _, post = await _seed_post(unit_env, author_points=4)

        # Act
        result = await ledger.unlike(ReactableType.POST, post.id, user_a.id)

        # Assert
        assert result.liked_by == frozenset()
        assert result.author_points == 4

    @pytest.mark.asyncio
    async def test_unlike_leaves_dislike_alone(self, unit_env):
        """Unlike must not remove a dislike held by the same user."""
        # Arrange
        ledger = await unit_env.get(ReactionService)
        _, user_a, _, post = await _seed_post(unit_env, author_points=4)
        await ledger.dislike(ReactableType.POST, post.id, user_a.id)

        # Act
        result = await ledger.unlike(ReactableType.POST, post.id, user_a.id)

        # Assert
        assert result.disliked_by == {user_a.id}
        assert result.author_points == 3

    @pytest.mark.asyncio
    async def test_unlike_clamps_at_zero(self, unit_env):
        """Removing a like from an author with fewer than 3 points clamps to 0."""
        # Arrange
        ledger = await unit_env.get(ReactionService)
        user_repo = await unit_env.get(UserRepository)
        author, user_a, _, post = await _seed_post(unit_env)
        await ledger.like(ReactableType.POST, post.id, user_a.id)  # 0 -> 3
        await user_repo.add_points(author.id, -2)  # 3 -> 1

        # Act
        result = await ledger.unlike(ReactableType.POST, post.id, user_a.id)

        # Assert
        assert result.author_points == 0


class TestDislike:
    """Tests for dislike and undislike."""

    @pytest.mark.asyncio
    async def test_dislike_after_like_clamps_each_step(self, unit_env):
        """Switching a like to a dislike on a 3-point author ends at 0, not -1."""
        # Arrange
        ledger = await unit_env.get(ReactionService)
        author, user_a, _, post = await _seed_post(unit_env)
        await ledger.like(ReactableType.POST, post.id, user_a.id)  # 0 -> 3

        # Act
        result = await ledger.dislike(ReactableType.POST, post.id, user_a.id)

        # Assert
        assert result.liked_by == frozenset()
        assert result.disliked_by == {user_a.id}
        assert result.author_points == 0
        assert await _points(unit_env, author.id) == 0

    @pytest.mark.asyncio
    async def test_dislike_is_idempotent(self, unit_env):
        """A second dislike by the same user changes nothing."""
        # Arrange
        ledger = await unit_env.get(ReactionService)
        _, user_a, _, post = await _seed_post(unit_env, author_points=5)
        await ledger.dislike(ReactableType.POST, post.id, user_a.id)

        # Act
        result = await ledger.dislike(ReactableType.POST, post.id, user_a.id)

        # Assert
        assert result.disliked_by == {user_a.id}
        assert result.author_points == 4

    @pytest.mark.asyncio
    async def test_dislike_and_undislike_on_comment(self, unit_env):
        """A comment author at 1 point drops to 0 on dislike and returns to 1."""
        # Arrange
        ledger = await unit_env.get(ReactionService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)

        post_author = await user_repo.save(make_user("post_author", "Poster"))
        comment_author = await user_repo.save(make_user("commenter", "Commenter"))
        critic = await user_repo.save(make_user("critic", "Critic"))
        post = await post_repo.save(make_post(post_author.id))
        comment = await comment_repo.save(make_comment(post.id, comment_author.id))

        await ledger.award_creation(ReactableType.COMMENT, comment_author.id)
        assert await _points(unit_env, comment_author.id) == 1

        # Act
        disliked = await ledger.dislike(ReactableType.COMMENT, comment.id, critic.id)
        restored = await ledger.undislike(
            ReactableType.COMMENT, comment.id, critic.id
        )

        # Assert
        assert disliked.author_points == 0
        assert disliked.disliked_by == {critic.id}
        assert restored.author_points == 1
        assert restored.disliked_by == frozenset()


class TestConcurrency:
    """Overlapping ledger calls in one request both count.

    The PostgreSQL version, with separate transactions, is in
    tests/integration/persistence/repository/test_reaction_repository.py.
    """

    @pytest.mark.asyncio
    async def test_concurrent_likes_are_both_recorded(self, unit_env):
        """Two users liking together both land, for +6 total."""
        # Arrange
        ledger = await unit_env.get(ReactionService)
        author, user_a, user_b, post = await _seed_post(unit_env)

        # Act
        await asyncio.gather(
            ledger.like(ReactableType.POST, post.id, user_a.id),
            ledger.like(ReactableType.POST, post.id, user_b.id),
        )

        # Assert
        sets = await ledger.get_reaction_sets(ReactableType.POST, post.id)
        assert sets.liked_by == {user_a.id, user_b.id}
        assert await _points(unit_env, author.id) == 6


class TestMissingParties:
    """Missing items and users raise NotFoundError and change nothing."""

    @pytest.mark.asyncio
    async def test_like_missing_post_raises(self, unit_env):
        # Arrange
        ledger = await unit_env.get(ReactionService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        # Act & Assert
        with pytest.raises(NotFoundError, match="Post not found"):
            await ledger.like(ReactableType.POST, PostId(uuid4()), user.id)

    @pytest.mark.asyncio
    async def test_like_by_unknown_user_raises(self, unit_env):
        # Arrange
        ledger = await unit_env.get(ReactionService)
        author, _, _, post = await _seed_post(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found"):
            await ledger.like(ReactableType.POST, post.id, UserId(uuid4()))

        sets = await ledger.get_reaction_sets(ReactableType.POST, post.id)
        assert sets.liked_by == frozenset()
        assert await _points(unit_env, author.id) == 0

    @pytest.mark.asyncio
    async def test_like_when_author_deleted_raises(self, unit_env):
        # Arrange
        ledger = await unit_env.get(ReactionService)
        user_repo = await unit_env.get(UserRepository)
        author, user_a, _, post = await _seed_post(unit_env)
        await user_repo.delete(author.id)

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found"):
            await ledger.like(ReactableType.POST, post.id, user_a.id)


class TestCreationAward:
    """Tests for award_creation and reverse_creation."""

    @pytest.mark.asyncio
    async def test_post_award_and_reversal(self, unit_env):
        # Arrange
        ledger = await unit_env.get(ReactionService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        # Act
        awarded = await ledger.award_creation(ReactableType.POST, author.id)
        reversed_ = await ledger.reverse_creation(ReactableType.POST, author.id)

        # Assert
        assert awarded == 3
        assert reversed_ == 0

    @pytest.mark.asyncio
    async def test_reversal_clamps_at_zero(self, unit_env):
        # Arrange
        ledger = await unit_env.get(ReactionService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user(points=2))

        # Act
        points = await ledger.reverse_creation(ReactableType.POST, author.id)

        # Assert
        assert points == 0

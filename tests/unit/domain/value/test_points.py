"""Unit tests for the point schedule, clamp rule and rank tiers."""

import pytest

from forum.domain.value import (
    PointSchedule,
    Rank,
    ReactableType,
    ReactionKind,
    clamp_points,
)


class TestPointSchedule:
    """Tests for PointSchedule."""

    def test_creation_awards(self):
        assert PointSchedule.for_creation(ReactableType.POST) == 3
        assert PointSchedule.for_creation(ReactableType.COMMENT) == 1

    def test_deletion_reverses_creation(self):
        assert PointSchedule.for_deletion(ReactableType.POST) == -3
        assert PointSchedule.for_deletion(ReactableType.COMMENT) == -1

    def test_reaction_deltas(self):
        assert PointSchedule.for_added(ReactionKind.LIKE) == 3
        assert PointSchedule.for_removed(ReactionKind.LIKE) == -3
        assert PointSchedule.for_added(ReactionKind.DISLIKE) == -1
        assert PointSchedule.for_removed(ReactionKind.DISLIKE) == 1

    def test_opposite_kind(self):
        assert ReactionKind.LIKE.opposite == ReactionKind.DISLIKE
        assert ReactionKind.DISLIKE.opposite == ReactionKind.LIKE


class TestClamp:
    """Tests for clamp_points."""

    @pytest.mark.parametrize(
        "points,delta,expected",
        [
            (0, 3, 3),
            (3, -3, 0),
            (1, -3, 0),
            (0, -1, 0),
            (10, -1, 9),
        ],
    )
    def test_clamp(self, points, delta, expected):
        assert clamp_points(points, delta) == expected


class TestRank:
    """Tests for Rank.for_points."""

    @pytest.mark.parametrize(
        "points,rank",
        [
            (0, Rank.RABBIT),
            (19, Rank.RABBIT),
            (20, Rank.CAT),
            (49, Rank.CAT),
            (50, Rank.FOX),
            (100, Rank.LLAMA),
            (200, Rank.RHINO),
            (400, Rank.BUFFALO),
            (700, Rank.CROCODILE),
            (999, Rank.CROCODILE),
            (1000, Rank.LION),
            (25000, Rank.LION),
        ],
    )
    def test_thresholds(self, points, rank):
        assert Rank.for_points(points) == rank

"""Reputation point schedule and rank tiers."""

from enum import Enum

from forum.domain.value.types import ReactableType, ReactionKind


class PointSchedule:
    """Fixed point deltas applied to an author's total.

    Negative deltas are clamped at zero by the storage layer, so a reversal
    does not always restore the previous total exactly.
    """

    POST_CREATED = 3
    COMMENT_CREATED = 1
    LIKE = 3
    DISLIKE = -1

    @classmethod
    def for_creation(cls, reactable_type: ReactableType) -> int:
        """Points awarded to the author when an entity is created."""
        if reactable_type == ReactableType.POST:
            return cls.POST_CREATED
        return cls.COMMENT_CREATED

    @classmethod
    def for_deletion(cls, reactable_type: ReactableType) -> int:
        """Points reversed from the author when an entity is deleted."""
        return -cls.for_creation(reactable_type)

    @classmethod
    def for_added(cls, kind: ReactionKind) -> int:
        """Delta when a reaction of ``kind`` is added."""
        return cls.LIKE if kind == ReactionKind.LIKE else cls.DISLIKE

    @classmethod
    def for_removed(cls, kind: ReactionKind) -> int:
        """Delta when a reaction of ``kind`` is removed."""
        return -cls.for_added(kind)


def clamp_points(points: int, delta: int) -> int:
    """Apply ``delta`` with a floor of zero."""
    return max(0, points + delta)


class Rank(str, Enum):
    """Cosmetic rank tier derived from points (rendered as an animal icon)."""

    RABBIT = "rabbit"
    CAT = "cat"
    FOX = "fox"
    LLAMA = "llama"
    RHINO = "rhino"
    BUFFALO = "buffalo"
    CROCODILE = "crocodile"
    LION = "lion"

    @classmethod
    def for_points(cls, points: int) -> "Rank":
        """Return the rank tier for a point total."""
        for upper_bound, rank in _RANK_THRESHOLDS:
            if points < upper_bound:
                return rank
        return cls.LION


# (exclusive upper bound, rank), ascending
_RANK_THRESHOLDS: list[tuple[int, Rank]] = [
    (20, Rank.RABBIT),
    (50, Rank.CAT),
    (100, Rank.FOX),
    (200, Rank.LLAMA),
    (400, Rank.RHINO),
    (700, Rank.BUFFALO),
    (1000, Rank.CROCODILE),
]

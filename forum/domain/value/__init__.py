"""Domain value objects for the forum."""

from forum.domain.value.identifiers import CommentId, PostId, UserId, parse_uuid
from forum.domain.value.points import PointSchedule, Rank, clamp_points
from forum.domain.value.types import DisplayName, Handle, ReactableType, ReactionKind

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "parse_uuid",
    # Types
    "Handle",
    "DisplayName",
    "ReactableType",
    "ReactionKind",
    # Points
    "PointSchedule",
    "Rank",
    "clamp_points",
]

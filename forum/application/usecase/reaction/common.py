"""Shared reaction request/response models."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import CommentService, ReactionResult
from forum.domain.value import (
    CommentId,
    PostId,
    ReactableType,
    ReactionKind,
    parse_uuid,
)


class ReactionRequest(BaseModel):
    """Reaction request.

    ``post_id`` is set when a comment is addressed through its post; the
    comment must then belong to that post.
    """

    reactable_type: ReactableType
    reactable_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    kind: ReactionKind
    post_id: str | None = None


class ReactionResponse(BaseModel):
    """Reaction sets and author points after a ledger operation."""

    reactable_type: ReactableType
    reactable_id: str
    likes: list[str]
    dislikes: list[str]
    author_points: int

    @classmethod
    def from_result(cls, result: ReactionResult) -> "ReactionResponse":
        return cls(
            reactable_type=result.reactable_type,
            reactable_id=str(result.reactable_id),
            likes=sorted(str(user_id) for user_id in result.liked_by),
            dislikes=sorted(str(user_id) for user_id in result.disliked_by),
            author_points=result.author_points,
        )


async def resolve_target(
    request: ReactionRequest, comment_service: CommentService
) -> UUID:
    """Parse the reacted item's ID, checking comment/post membership.

    Raises:
        ValidationError: If an ID is malformed
        NotFoundError: If the comment does not sit on the given post
    """
    reactable_id = parse_uuid(request.reactable_id, request.reactable_type.value)
    if request.reactable_type == ReactableType.COMMENT and request.post_id:
        post_id = PostId(parse_uuid(request.post_id, "post"))
        await comment_service.get_comment_on_post(post_id, CommentId(reactable_id))
    return reactable_id

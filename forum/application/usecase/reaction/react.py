"""React use case (like / dislike)."""

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import CommentService, ReactionService
from forum.domain.value import ReactionKind, UserId, parse_uuid

from .common import ReactionRequest, ReactionResponse, resolve_target


class ReactUseCase(BaseUseCase):
    """Use case for liking or disliking a post or comment.

    Switching sides is implicit: liking a disliked item first removes the
    dislike.
    """

    def __init__(
        self, reaction_service: ReactionService, comment_service: CommentService
    ) -> None:
        """Initialize react use case.

        Args:
            reaction_service: Ledger
            comment_service: Comment domain service, for post membership checks
        """
        self.reaction_service = reaction_service
        self.comment_service = comment_service

    async def execute(self, request: ReactionRequest) -> ReactionResponse:
        """Execute react flow.

        Args:
            request: Reaction request

        Returns:
            Reaction sets and author points

        Raises:
            ValidationError: If an ID is malformed
            NotFoundError: If the item, its author or the acting user is missing
        """
        user_id = UserId(parse_uuid(request.user_id, "user"))
        reactable_id = await resolve_target(request, self.comment_service)

        if request.kind == ReactionKind.LIKE:
            result = await self.reaction_service.like(
                request.reactable_type, reactable_id, user_id
            )
        else:
            result = await self.reaction_service.dislike(
                request.reactable_type, reactable_id, user_id
            )

        return ReactionResponse.from_result(result)

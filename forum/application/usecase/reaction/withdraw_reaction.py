"""Withdraw reaction use case (unlike / undislike)."""

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import CommentService, ReactionService
from forum.domain.value import ReactionKind, UserId, parse_uuid

from .common import ReactionRequest, ReactionResponse, resolve_target


class WithdrawReactionUseCase(BaseUseCase):
    """Use case for taking back a like or a dislike."""

    def __init__(
        self, reaction_service: ReactionService, comment_service: CommentService
    ) -> None:
        """Initialize withdraw reaction use case.

        Args:
            reaction_service: Ledger
            comment_service: Comment domain service, for post membership checks
        """
        self.reaction_service = reaction_service
        self.comment_service = comment_service

    async def execute(self, request: ReactionRequest) -> ReactionResponse:
        """Execute withdraw reaction flow.

        Withdrawing a reaction the user does not hold changes nothing.

        Raises:
            ValidationError: If an ID is malformed
            NotFoundError: If the item, its author or the acting user is missing
        """
        user_id = UserId(parse_uuid(request.user_id, "user"))
        reactable_id = await resolve_target(request, self.comment_service)

        if request.kind == ReactionKind.LIKE:
            result = await self.reaction_service.unlike(
                request.reactable_type, reactable_id, user_id
            )
        else:
            result = await self.reaction_service.undislike(
                request.reactable_type, reactable_id, user_id
            )

        return ReactionResponse.from_result(result)

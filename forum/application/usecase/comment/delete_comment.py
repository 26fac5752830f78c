"""Delete comment use case."""

from pydantic import BaseModel

from forum.domain.error import NotAuthorizedError
from forum.domain.service import CommentService, ReactionService
from forum.domain.value import CommentId, PostId, ReactableType, UserId, parse_uuid


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str
    comment_id: str
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool
    message: str
    author_points: int


class DeleteCommentUseCase:
    """Use case for deleting a comment."""

    def __init__(
        self, comment_service: CommentService, reaction_service: ReactionService
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            reaction_service: Ledger, for clearing reactions and the point reversal
        """
        self.comment_service = comment_service
        self.reaction_service = reaction_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        The comment's reactions go with it and the author loses the comment
        creation award (clamped at zero).

        Raises:
            NotFoundError: If the comment does not exist on the post
            NotAuthorizedError: If the user is not the author
        """
        post_id = PostId(parse_uuid(request.post_id, "post"))
        comment_id = CommentId(parse_uuid(request.comment_id, "comment"))
        user_id = UserId(parse_uuid(request.user_id, "user"))

        comment = await self.comment_service.get_comment_on_post(post_id, comment_id)
        if comment.author_id != user_id:
            raise NotAuthorizedError("comment", request.comment_id, request.user_id)

        await self.reaction_service.clear_reactions(ReactableType.COMMENT, [comment_id])
        await self.comment_service.delete_comment(comment_id)

        points = await self.reaction_service.reverse_creation(
            ReactableType.COMMENT, comment.author_id
        )
        return DeleteCommentResponse(
            success=True, message="Comment deleted", author_points=points
        )

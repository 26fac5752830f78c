"""Update comment use case."""

from pydantic import BaseModel

from forum.domain.error import NotAuthorizedError
from forum.domain.service import CommentService, ReactionService, UserService
from forum.domain.value import CommentId, PostId, ReactableType, UserId, parse_uuid

from .common import CommentView


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    post_id: str
    comment_id: str
    user_id: str  # Current user ID (must be author)
    body: str


class UpdateCommentUseCase:
    """Use case for editing a comment's text."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            reaction_service: Ledger, for reaction sets
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.reaction_service = reaction_service

    async def execute(self, request: UpdateCommentRequest) -> CommentView:
        """Execute update comment flow.

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

        updated = await self.comment_service.update_body(comment, request.body)

        authors = await self.user_service.get_by_ids([updated.author_id])
        sets = await self.reaction_service.get_reaction_sets(
            ReactableType.COMMENT, updated.id
        )
        return CommentView.build(updated, authors.get(updated.author_id), sets)

"""Create comment use case."""

from pydantic import BaseModel

from forum.domain.model import ReactionSets
from forum.domain.service import (
    CommentService,
    PostService,
    ReactionService,
    UserService,
)
from forum.domain.value import PostId, ReactableType, UserId, parse_uuid

from .common import CommentView


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    author_id: str  # User ID from authenticated user
    body: str


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
            reaction_service: Ledger, for the creation award
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.reaction_service = reaction_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Execute create comment flow.

        Raises:
            ValidationError: If an ID is malformed
            NotFoundError: If the post or the author does not exist
        """
        post_id = PostId(parse_uuid(request.post_id, "post"))
        author_id = UserId(parse_uuid(request.author_id, "user"))

        await self.post_service.get_post(post_id)
        author = await self.user_service.get_by_id(author_id)

        comment = await self.comment_service.create_comment(
            post_id=post_id, author_id=author_id, body=request.body
        )

        points = await self.reaction_service.award_creation(
            ReactableType.COMMENT, author_id
        )
        author = author.model_copy(update={"points": points})

        return CommentView.build(comment, author, ReactionSets())

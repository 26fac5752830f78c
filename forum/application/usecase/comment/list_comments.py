"""List comments use case."""

from pydantic import BaseModel, Field

from forum.domain.model import ReactionSets
from forum.domain.service import (
    CommentService,
    PostService,
    ReactionService,
    UserService,
)
from forum.domain.value import PostId, ReactableType, parse_uuid

from .common import CommentView


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: str
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class ListCommentsResponse(BaseModel):
    """One page of a post's comments, newest first."""

    comments: list[CommentView]
    total_comments: int
    page: int
    limit: int


class ListCommentsUseCase:
    """Use case for paging through a post's comments."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> None:
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.reaction_service = reaction_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Raises:
            ValidationError: If the post ID is malformed
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_uuid(request.post_id, "post"))
        await self.post_service.get_post(post_id)

        offset = (request.page - 1) * request.limit
        comments, total = await self.comment_service.list_for_post(
            post_id, limit=request.limit, offset=offset
        )

        authors = await self.user_service.get_by_ids([c.author_id for c in comments])
        sets = await self.reaction_service.get_reaction_sets_for_many(
            ReactableType.COMMENT, [c.id for c in comments]
        )

        return ListCommentsResponse(
            comments=[
                CommentView.build(
                    comment,
                    authors.get(comment.author_id),
                    sets.get(comment.id, ReactionSets()),
                )
                for comment in comments
            ],
            total_comments=total,
            page=request.page,
            limit=request.limit,
        )

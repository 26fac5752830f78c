"""List posts use case."""

import math

from pydantic import BaseModel, Field

from forum.domain.model import ReactionSets
from forum.domain.service import PostService, ReactionService, UserService
from forum.domain.value import ReactableType

from .common import PostView


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class ListPostsResponse(BaseModel):
    """One page of posts, newest first."""

    posts: list[PostView]
    total: int
    page: int
    limit: int
    total_pages: int


class ListPostsUseCase:
    """Use case for the paginated post feed."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            reaction_service: Ledger, for reaction sets
        """
        self.post_service = post_service
        self.user_service = user_service
        self.reaction_service = reaction_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Authors and reaction sets are batch-loaded for the whole page.
        """
        offset = (request.page - 1) * request.limit
        posts, total = await self.post_service.list_posts(
            limit=request.limit, offset=offset
        )

        authors = await self.user_service.get_by_ids([p.author_id for p in posts])
        sets = await self.reaction_service.get_reaction_sets_for_many(
            ReactableType.POST, [p.id for p in posts]
        )

        return ListPostsResponse(
            posts=[
                PostView.build(
                    post, authors.get(post.author_id), sets.get(post.id, ReactionSets())
                )
                for post in posts
            ],
            total=total,
            page=request.page,
            limit=request.limit,
            total_pages=math.ceil(total / request.limit),
        )

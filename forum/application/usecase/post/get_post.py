"""Get post use case."""

from pydantic import BaseModel

from forum.domain.service import PostService, ReactionService, UserService
from forum.domain.value import PostId, ReactableType, parse_uuid

from .common import PostView


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostUseCase:
    """Use case for reading a single post with its reactions."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            reaction_service: Ledger, for reaction sets
        """
        self.post_service = post_service
        self.user_service = user_service
        self.reaction_service = reaction_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Execute get post flow.

        Raises:
            ValidationError: If the post ID is malformed
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_uuid(request.post_id, "post"))
        post = await self.post_service.get_post(post_id)

        authors = await self.user_service.get_by_ids([post.author_id])
        sets = await self.reaction_service.get_reaction_sets(ReactableType.POST, post.id)

        return PostView.build(post, authors.get(post.author_id), sets)

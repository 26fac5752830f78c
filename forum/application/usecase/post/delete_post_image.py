"""Delete post image use case."""

from pydantic import BaseModel

from forum.domain.error import NotAuthorizedError
from forum.domain.service import PostService, ReactionService, UserService
from forum.domain.value import PostId, ReactableType, UserId, parse_uuid

from .common import PostView


class DeletePostImageRequest(BaseModel):
    """Delete post image request."""

    post_id: str
    user_id: str  # Current user ID (must be author)


class DeletePostImageUseCase:
    """Use case for removing a post's image while keeping the post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> None:
        self.post_service = post_service
        self.user_service = user_service
        self.reaction_service = reaction_service

    async def execute(self, request: DeletePostImageRequest) -> PostView:
        """Execute delete post image flow. A post without an image is returned as is.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the user is not the author
        """
        post_id = PostId(parse_uuid(request.post_id, "post"))
        user_id = UserId(parse_uuid(request.user_id, "user"))

        post = await self.post_service.get_post(post_id)
        if post.author_id != user_id:
            raise NotAuthorizedError("post", request.post_id, request.user_id)

        post_image_url = post.image_url
        if post_image_url:
            post = await self.post_service.update_post(post, clear_image=True)
            self.post_service.delete_image_after_commit(post_image_url)

        authors = await self.user_service.get_by_ids([post.author_id])
        sets = await self.reaction_service.get_reaction_sets(ReactableType.POST, post.id)
        return PostView.build(post, authors.get(post.author_id), sets)

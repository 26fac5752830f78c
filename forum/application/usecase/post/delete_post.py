"""Delete post use case."""

import logfire
from pydantic import BaseModel

from forum.domain.error import NotAuthorizedError
from forum.domain.service import CommentService, PostService, ReactionService
from forum.domain.value import PostId, ReactableType, UserId, parse_uuid


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # Current user ID (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    success: bool
    message: str
    author_points: int


class DeletePostUseCase:
    """Use case for deleting a post together with its comments."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        reaction_service: ReactionService,
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            reaction_service: Ledger, for clearing reactions and the point reversal
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.reaction_service = reaction_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Steps:
        1. Check the caller is the author
        2. Remove reactions on the post's comments and on the post
        3. Remove the comments, then the post
        4. Take back the post creation award (clamped at zero)
        5. Remove the image from the media store once all of the above has
           committed

        Only the creation award is reversed; points the author earned from
        reactions stay.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the user is not the author
        """
        post_id = PostId(parse_uuid(request.post_id, "post"))
        user_id = UserId(parse_uuid(request.user_id, "user"))

        with logfire.span("delete_post", post_id=request.post_id):
            post = await self.post_service.get_post(post_id)
            if post.author_id != user_id:
                raise NotAuthorizedError("post", request.post_id, request.user_id)

            comment_ids = await self.comment_service.get_ids_for_post(post_id)
            await self.reaction_service.clear_reactions(
                ReactableType.COMMENT, comment_ids
            )
            await self.reaction_service.clear_reactions(ReactableType.POST, [post_id])
            await self.comment_service.delete_for_post(post_id)
            await self.post_service.delete_post(post_id)

            points = await self.reaction_service.reverse_creation(
                ReactableType.POST, post.author_id
            )

            self.post_service.delete_image_after_commit(post.image_url)

        return DeletePostResponse(
            success=True, message="Post deleted", author_points=points
        )

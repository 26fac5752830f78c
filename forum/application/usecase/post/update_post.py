"""Update post use case."""

import logfire
from pydantic import BaseModel

from forum.domain.error import NotAuthorizedError
from forum.domain.service import PostService, ReactionService, UserService
from forum.domain.value import PostId, ReactableType, UserId, parse_uuid

from .common import ImageUpload, PostView


class UpdatePostRequest(BaseModel):
    """Update post request. Fields left as None are kept."""

    post_id: str
    user_id: str  # Current user ID (must be author)
    title: str | None = None
    body: str | None = None
    image: ImageUpload | None = None


class UpdatePostUseCase:
    """Use case for editing a post's text and replacing its image."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            reaction_service: Ledger, for reaction sets
        """
        self.post_service = post_service
        self.user_service = user_service
        self.reaction_service = reaction_service

    async def execute(self, request: UpdatePostRequest) -> PostView:
        """Execute update post flow.

        A new image replaces the old one, which is deleted from the media
        store once the change is committed. If saving fails, the new upload
        is removed again.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the user is not the author
            ValidationError: If an ID or the image is malformed
        """
        post_id = PostId(parse_uuid(request.post_id, "post"))
        user_id = UserId(parse_uuid(request.user_id, "user"))

        post = await self.post_service.get_post(post_id)
        if post.author_id != user_id:
            raise NotAuthorizedError("post", request.post_id, request.user_id)

        new_image_url = None
        if request.image is not None:
            new_image_url = await self.post_service.upload_image(
                request.image.content,
                request.image.content_type,
                request.image.filename,
            )

        try:
            updated = await self.post_service.update_post(
                post,
                title=request.title,
                body=request.body,
                image_url=new_image_url,
            )
        except Exception:
            logfire.warn(
                "Post update failed, removing uploaded image", url=new_image_url
            )
            await self.post_service.delete_image(new_image_url)
            raise

        if new_image_url:
            self.post_service.delete_image_after_commit(post.image_url)

        authors = await self.user_service.get_by_ids([updated.author_id])
        sets = await self.reaction_service.get_reaction_sets(
            ReactableType.POST, updated.id
        )
        return PostView.build(updated, authors.get(updated.author_id), sets)

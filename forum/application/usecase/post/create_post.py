"""Create post use case."""

import logfire
from pydantic import BaseModel

from forum.domain.model import ReactionSets
from forum.domain.service import PostService, ReactionService, UserService
from forum.domain.value import ReactableType, UserId, parse_uuid

from .common import ImageUpload, PostView


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    title: str
    body: str
    image: ImageUpload | None = None


class CreatePostUseCase:
    """Use case for creating a post, optionally with an image."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            reaction_service: Ledger, for the creation award
        """
        self.post_service = post_service
        self.user_service = user_service
        self.reaction_service = reaction_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Steps:
        1. Check the author exists
        2. Upload the image, if any
        3. Save the post (the uploaded image is removed again if this fails)
        4. Award the author the creation points

        Args:
            request: Create post request

        Returns:
            The new post

        Raises:
            NotFoundError: If the author does not exist
            ValidationError: If the image is not an acceptable image
            MediaStoreError: If the image host fails
        """
        author_id = UserId(parse_uuid(request.author_id, "user"))
        author = await self.user_service.get_by_id(author_id)

        image_url = None
        if request.image is not None:
            image_url = await self.post_service.upload_image(
                request.image.content,
                request.image.content_type,
                request.image.filename,
            )

        try:
            post = await self.post_service.create_post(
                author_id=author_id,
                title=request.title,
                body=request.body,
                image_url=image_url,
            )
        except Exception:
            logfire.warn("Post save failed, removing uploaded image", url=image_url)
            await self.post_service.delete_image(image_url)
            raise

        points = await self.reaction_service.award_creation(
            ReactableType.POST, author_id
        )
        author = author.model_copy(update={"points": points})

        return PostView.build(post, author, ReactionSets())

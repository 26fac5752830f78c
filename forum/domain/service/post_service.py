"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from forum.config import MediaSettings
from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import Post
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, UserId

from .after_commit import AfterCommit
from .base import Service
from .media_store import MediaStore


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        media_store: MediaStore,
        media_settings: MediaSettings,
        after_commit: AfterCommit,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            media_store: Image hosting backend
            media_settings: Upload limits
            after_commit: Queue for media deletes that must wait for commit
        """
        self.post_repository = post_repository
        self.media_store = media_store
        self.media_settings = media_settings
        self.after_commit = after_commit

    async def create_post(
        self,
        author_id: UserId,
        title: str,
        body: str,
        image_url: str | None = None,
    ) -> Post:
        """Create and persist a new post.

        Args:
            author_id: Author's user ID
            title: Post title
            body: Post body
            image_url: Already-uploaded image URL, if any

        Returns:
            Saved post
        """
        with logfire.span("post_service.create_post", author_id=str(author_id)):
            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                author_id=author_id,
                title=title,
                body=body,
                image_url=image_url,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), title=saved.title)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
            return post

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_posts(self, limit: int, offset: int) -> tuple[list[Post], int]:
        """Get one page of posts, newest first, plus the total post count."""
        with logfire.span("post_service.list_posts", limit=limit, offset=offset):
            posts = await self.post_repository.find_page(limit=limit, offset=offset)
            total = await self.post_repository.count()
            logfire.info("Posts listed", count=len(posts), total=total)
            return posts, total

    async def update_post(
        self,
        post: Post,
        title: str | None = None,
        body: str | None = None,
        image_url: str | None = None,
        clear_image: bool = False,
    ) -> Post:
        """Apply field changes to a post and persist it.

        Args:
            post: Current post
            title: New title, or None to keep
            body: New body, or None to keep
            image_url: New image URL, or None to keep
            clear_image: Drop the image reference

        Returns:
            Saved post
        """
        with logfire.span("post_service.update_post", post_id=str(post.id)):
            changes: dict = {"updated_at": datetime.now()}
            if title is not None:
                changes["title"] = title
            if body is not None:
                changes["body"] = body
            if image_url is not None:
                changes["image_url"] = image_url
            elif clear_image:
                changes["image_url"] = None

            # model_copy skips validation, so re-validate the merged fields
            updated = Post.model_validate({**post.model_dump(), **changes})
            saved = await self.post_repository.save(updated)
            logfire.info("Post updated", post_id=str(saved.id))
            return saved

    async def delete_post(self, post_id: PostId) -> bool:
        """Delete a post row.

        Returns:
            True if a post was deleted
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            deleted = await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id), deleted=deleted)
            return deleted

    async def upload_image(
        self, content: bytes, content_type: str | None, filename: str | None
    ) -> str:
        """Validate and upload a post image.

        Args:
            content: Raw bytes
            content_type: MIME type reported by the client
            filename: Original file name

        Returns:
            Public image URL

        Raises:
            ValidationError: If the file is not an image, is empty or is too large
        """
        with logfire.span(
            "post_service.upload_image", content_type=content_type, size=len(content)
        ):
            if not content_type or not content_type.startswith("image/"):
                logfire.warn("Rejected non-image upload", content_type=content_type)
                raise ValidationError("Only image uploads are allowed")
            if not content:
                raise ValidationError("Image file is empty")
            if len(content) > self.media_settings.max_image_bytes:
                raise ValidationError(
                    f"Image exceeds {self.media_settings.max_image_bytes} bytes"
                )

            url = await self.media_store.upload(
                content, content_type, filename or "upload"
            )
            logfire.info("Image uploaded", url=url)
            return url

    async def delete_image(self, url: str | None) -> None:
        """Remove an image from the media store. No-op for None."""
        if not url:
            return
        with logfire.span("post_service.delete_image", url=url):
            await self.media_store.delete(url)
            logfire.info("Image deleted", url=url)

    def delete_image_after_commit(self, url: str | None) -> None:
        """Delete an image once the request's post changes are committed.

        Use for images a committed post referenced; ``delete_image`` is for
        uploads that never made it into a saved post.
        """
        if not url:
            return
        logfire.info("Image delete deferred until commit", url=url)
        self.after_commit.defer(lambda: self.delete_image(url))

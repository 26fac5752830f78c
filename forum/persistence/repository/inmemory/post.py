"""In-memory post repository for testing."""

from typing import Optional

from forum.domain.model.post import Post
from forum.domain.repository.post import PostRepository
from forum.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_page(self, limit: int = 10, offset: int = 0) -> list[Post]:
        """Find posts newest first; ties go to the later insert."""
        ordered = sorted(
            reversed(list(self._posts.values())),
            key=lambda post: post.created_at,
            reverse=True,
        )
        return ordered[offset : offset + limit]

    async def count(self) -> int:
        """Count all posts."""
        return len(self._posts)

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None

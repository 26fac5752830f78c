"""Test configuration and fixtures."""

import os
from datetime import datetime
from uuid import uuid4

import logfire

# Cheap password hashing and an isolated environment for the whole run.
# Must be set before Settings() is first instantiated.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-with-at-least-32-bytes!!")

logfire.configure(send_to_logfire=False, console=False)

from forum.domain.model import Comment, Post, User  # noqa: E402
from forum.domain.value import (  # noqa: E402
    CommentId,
    DisplayName,
    Handle,
    PostId,
    UserId,
)


def make_user(
    handle: str = "alice_b",
    display_name: str = "Alice",
    points: int = 0,
    user_id: UserId | None = None,
) -> User:
    """Helper to build a user for repository seeding.

    The password hash is a placeholder; use AuthService.signup when a test
    needs to log in.
    """
    return User(
        id=user_id or UserId(uuid4()),
        handle=Handle(root=handle),
        display_name=DisplayName(root=display_name),
        password_hash="not-a-real-hash",
        points=points,
        created_at=datetime.now(),
        updated_at=datetime.now(),
    )


def make_post(author_id: UserId, title: str = "Test Post", **kwargs) -> Post:
    """Helper to build a post by the given author."""
    now = datetime.now()
    return Post(
        id=kwargs.pop("post_id", None) or PostId(uuid4()),
        author_id=author_id,
        title=title,
        body=kwargs.pop("body", "Test content"),
        image_url=kwargs.pop("image_url", None),
        created_at=kwargs.pop("created_at", now),
        updated_at=now,
    )


def make_comment(post_id: PostId, author_id: UserId, body: str = "Nice post") -> Comment:
    """Helper to build a comment on a post."""
    now = datetime.now()
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id,
        body=body,
        created_at=now,
        updated_at=now,
    )

"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from forum.domain.model import Comment, Post, Reaction, User
from forum.domain.value import (
    CommentId,
    DisplayName,
    Handle,
    PostId,
    ReactableType,
    ReactionKind,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        display_name=DisplayName(row["display_name"]),
        password_hash=row["password_hash"],
        points=row["points"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "handle": user.handle.root,
        "display_name": user.display_name.root,
        "password_hash": user.password_hash,
        "points": user.points,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        body=row["body"],
        image_url=row.get("image_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        body=row["body"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_reaction(row: Dict[str, Any]) -> Reaction:
    """Convert database row to Reaction domain model."""
    return Reaction(
        user_id=UserId(_uuid(row["user_id"])),
        reactable_type=ReactableType(row["reactable_type"]),
        reactable_id=_uuid(row["reactable_id"]),
        kind=ReactionKind(row["kind"]),
        created_at=row["created_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    """Convert Reaction domain model to database dict.

    Enums are stored by value.
    """
    return {
        "user_id": reaction.user_id,
        "reactable_type": reaction.reactable_type.value,
        "reactable_id": reaction.reactable_id,
        "kind": reaction.kind.value,
        "created_at": reaction.created_at,
    }

"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from forum.application.usecase.comment import (
    CommentView,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from forum.config import PaginationSettings
from forum.domain.service import JWTService
from forum.interface.api.auth import get_access_token

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request for creating or editing a comment."""

    body: str


@router.post(
    "/{post_id}/comments",
    response_model=CommentView,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> CommentView:
    """Comment on a post.

    Requires authentication. Awards the author the comment creation points.

    Args:
        post_id: Post UUID
        request: Comment body
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        token: JWT from Bearer header or cookie

    Returns:
        Created comment
    """
    user_id = jwt_service.authenticate(token)
    return await create_comment_use_case.execute(
        CreateCommentRequest(post_id=post_id, author_id=str(user_id), body=request.body)
    )


@router.get("/{post_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    post_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
) -> ListCommentsResponse:
    """List a post's comments, newest first."""
    page_size = min(limit or pagination.default_limit, pagination.max_limit)
    return await list_comments_use_case.execute(
        ListCommentsRequest(post_id=post_id, page=page, limit=page_size)
    )


@router.put("/{post_id}/comments/{comment_id}", response_model=CommentView)
async def update_comment(
    post_id: str,
    comment_id: str,
    request: CommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> CommentView:
    """Edit a comment. Only the author can edit."""
    user_id = jwt_service.authenticate(token)
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            post_id=post_id,
            comment_id=comment_id,
            user_id=str(user_id),
            body=request.body,
        )
    )


@router.delete(
    "/{post_id}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    post_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> DeleteCommentResponse:
    """Delete a comment and its reactions.

    Only the author can delete. The comment creation points are taken back.
    """
    user_id = jwt_service.authenticate(token)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(
            post_id=post_id, comment_id=comment_id, user_id=str(user_id)
        )
    )

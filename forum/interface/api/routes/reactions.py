"""Reaction routes.

Like and dislike are explicit, idempotent operations: POST sets the
caller's reaction (switching away from the opposite kind), DELETE
withdraws it. Repeating either changes nothing.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from forum.application.usecase.reaction import (
    ReactionRequest,
    ReactionResponse,
    ReactUseCase,
    WithdrawReactionUseCase,
)
from forum.domain.service import JWTService
from forum.domain.value import ReactableType, ReactionKind
from forum.interface.api.auth import get_access_token

router = APIRouter(prefix="/posts", tags=["reactions"], route_class=DishkaRoute)


@router.post("/{post_id}/like", response_model=ReactionResponse)
async def like_post(
    post_id: str,
    react_use_case: FromDishka[ReactUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> ReactionResponse:
    """Like a post.

    Requires authentication.

    Args:
        post_id: Post UUID
        react_use_case: React use case from DI
        jwt_service: JWT service for token verification (injected)
        token: JWT from Bearer header or cookie

    Returns:
        Reaction sets and the author's points

    Example:
        POST /posts/{post_id}/like

        Response:
        {
            "reactable_type": "post",
            "reactable_id": "...",
            "likes": ["<user id>"],
            "dislikes": [],
            "author_points": 4
        }
    """
    user_id = jwt_service.authenticate(token)
    return await react_use_case.execute(
        ReactionRequest(
            reactable_type=ReactableType.POST,
            reactable_id=post_id,
            user_id=str(user_id),
            kind=ReactionKind.LIKE,
        )
    )


@router.delete("/{post_id}/like", response_model=ReactionResponse)
async def unlike_post(
    post_id: str,
    withdraw_reaction_use_case: FromDishka[WithdrawReactionUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> ReactionResponse:
    """Withdraw a like from a post."""
    user_id = jwt_service.authenticate(token)
    return await withdraw_reaction_use_case.execute(
        ReactionRequest(
            reactable_type=ReactableType.POST,
            reactable_id=post_id,
            user_id=str(user_id),
            kind=ReactionKind.LIKE,
        )
    )


@router.post("/{post_id}/dislike", response_model=ReactionResponse)
async def dislike_post(
    post_id: str,
    react_use_case: FromDishka[ReactUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> ReactionResponse:
    """Dislike a post."""
    user_id = jwt_service.authenticate(token)
    return await react_use_case.execute(
        ReactionRequest(
            reactable_type=ReactableType.POST,
            reactable_id=post_id,
            user_id=str(user_id),
            kind=ReactionKind.DISLIKE,
        )
    )


@router.delete("/{post_id}/dislike", response_model=ReactionResponse)
async def undislike_post(
    post_id: str,
    withdraw_reaction_use_case: FromDishka[WithdrawReactionUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> ReactionResponse:
    """Withdraw a dislike from a post."""
    user_id = jwt_service.authenticate(token)
    return await withdraw_reaction_use_case.execute(
        ReactionRequest(
            reactable_type=ReactableType.POST,
            reactable_id=post_id,
            user_id=str(user_id),
            kind=ReactionKind.DISLIKE,
        )
    )


@router.post("/{post_id}/comments/{comment_id}/like", response_model=ReactionResponse)
async def like_comment(
    post_id: str,
    comment_id: str,
    react_use_case: FromDishka[ReactUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> ReactionResponse:
    """Like a comment. The comment must belong to the post."""
    user_id = jwt_service.authenticate(token)
    return await react_use_case.execute(
        ReactionRequest(
            reactable_type=ReactableType.COMMENT,
            reactable_id=comment_id,
            user_id=str(user_id),
            kind=ReactionKind.LIKE,
            post_id=post_id,
        )
    )


@router.delete(
    "/{post_id}/comments/{comment_id}/like", response_model=ReactionResponse
)
async def unlike_comment(
    post_id: str,
    comment_id: str,
    withdraw_reaction_use_case: FromDishka[WithdrawReactionUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> ReactionResponse:
    """Withdraw a like from a comment."""
    user_id = jwt_service.authenticate(token)
    return await withdraw_reaction_use_case.execute(
        ReactionRequest(
            reactable_type=ReactableType.COMMENT,
            reactable_id=comment_id,
            user_id=str(user_id),
            kind=ReactionKind.LIKE,
            post_id=post_id,
        )
    )


@router.post(
    "/{post_id}/comments/{comment_id}/dislike", response_model=ReactionResponse
)
async def dislike_comment(
    post_id: str,
    comment_id: str,
    react_use_case: FromDishka[ReactUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> ReactionResponse:
    """Dislike a comment."""
    user_id = jwt_service.authenticate(token)
    return await react_use_case.execute(
        ReactionRequest(
            reactable_type=ReactableType.COMMENT,
            reactable_id=comment_id,
            user_id=str(user_id),
            kind=ReactionKind.DISLIKE,
            post_id=post_id,
        )
    )


@router.delete(
    "/{post_id}/comments/{comment_id}/dislike", response_model=ReactionResponse
)
async def undislike_comment(
    post_id: str,
    comment_id: str,
    withdraw_reaction_use_case: FromDishka[WithdrawReactionUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> ReactionResponse:
    """Withdraw a dislike from a comment."""
    user_id = jwt_service.authenticate(token)
    return await withdraw_reaction_use_case.execute(
        ReactionRequest(
            reactable_type=ReactableType.COMMENT,
            reactable_id=comment_id,
            user_id=str(user_id),
            kind=ReactionKind.DISLIKE,
            post_id=post_id,
        )
    )

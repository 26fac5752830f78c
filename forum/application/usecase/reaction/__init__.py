"""Reaction use cases."""

from .common import ReactionRequest, ReactionResponse
from .react import ReactUseCase
from .withdraw_reaction import WithdrawReactionUseCase

__all__ = [
    "ReactionRequest",
    "ReactionResponse",
    "ReactUseCase",
    "WithdrawReactionUseCase",
]

"""User use cases."""

from .check_display_name import (
    CheckDisplayNameRequest,
    CheckDisplayNameResponse,
    CheckDisplayNameUseCase,
)
from .delete_account import (
    DeleteAccountRequest,
    DeleteAccountResponse,
    DeleteAccountUseCase,
)
from .get_profile import GetProfileRequest, GetProfileUseCase
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "CheckDisplayNameRequest",
    "CheckDisplayNameResponse",
    "CheckDisplayNameUseCase",
    "DeleteAccountRequest",
    "DeleteAccountResponse",
    "DeleteAccountUseCase",
    "GetProfileRequest",
    "GetProfileUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]

"""
Data Transfer Objects for the identity application layer.

DTOs carry success payloads from the gateway to the interface layer.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RegistrationResult:
    """Output DTO for a successful sign-up.

    Attributes:
        user_id: Provider-assigned user identifier (UserSub).
        message: Human-readable confirmation.
    """

    user_id: Optional[str]
    message: str


@dataclass(frozen=True)
class Acknowledgement:
    """Output DTO for operations that only confirm they happened."""

    message: str


@dataclass(frozen=True)
class SignInResult:
    """Output DTO for a successful sign-in.

    Attributes:
        access_token: Token for calling user-scoped provider APIs.
        refresh_token: Token for obtaining new access tokens.
        id_token: Token carrying the user's identity claims.
        message: Human-readable confirmation.
    """

    access_token: Optional[str]
    refresh_token: Optional[str]
    id_token: Optional[str]
    message: str

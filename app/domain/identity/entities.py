"""
Domain entities for the identity bounded context.

None of these outlive a single request; nothing here is persisted.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from app.domain.identity.errors import IdentityConfigurationError


class IdentityOperation(Enum):
    """Use cases the gateway exposes. Selects the error mapping."""

    REGISTER = "register"
    CONFIRM_REGISTRATION = "confirm_registration"
    RESEND_VERIFICATION_CODE = "resend_verification_code"
    VERIFY_ATTRIBUTE = "verify_attribute"
    FORGOT_PASSWORD = "forgot_password"
    CONFIRM_FORGOT_PASSWORD = "confirm_forgot_password"
    SIGN_IN = "sign_in"


@dataclass(frozen=True)
class RegistrationRequest:
    """Sign-up data submitted by a prospective user."""

    email: str
    password: str
    first_name: str
    last_name: str
    phone_number: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class IdentityProviderConfig:
    """Identifiers of the user pool and app client to call.

    Build through ``create`` so missing identifiers are rejected.
    """

    user_pool_id: str
    client_id: str
    region: str = "us-east-1"

    @classmethod
    def create(
        cls,
        user_pool_id: Optional[str],
        client_id: Optional[str],
        region: str = "us-east-1",
    ) -> "IdentityProviderConfig":
        """Validate and build the provider configuration.

        Raises:
            IdentityConfigurationError: If either identifier is missing
                or blank.
        """
        missing = []
        if not (user_pool_id or "").strip():
            missing.append("COGNITO_USER_POOL_ID")
        if not (client_id or "").strip():
            missing.append("COGNITO_CLIENT_ID")
        if missing:
            raise IdentityConfigurationError(missing)
        return cls(user_pool_id=user_pool_id, client_id=client_id, region=region)


@dataclass(frozen=True)
class ProviderSuccess:
    """Raw response of a successful provider call."""

    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ProviderFailure:
    """Error reported by the provider: its identifier and message."""

    error_id: str
    message: str


ProviderReply = Union[ProviderSuccess, ProviderFailure]

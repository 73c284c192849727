"""
Domain-specific errors for the identity bounded context.

Errors in this context are values, not exceptions: a DomainError is
returned inside a Failure and mapped to an HTTP envelope at the
interface layer. The only exception defined here is the fatal
startup error for a misconfigured provider.
No framework imports allowed.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Fixed set of error kinds callers branch on.

    Values are the public names exposed to clients.
    """

    REGISTRATION = "RegistrationError"
    VERIFICATION = "VerificationError"
    AUTHENTICATION = "AuthenticationError"
    USER_NOT_FOUND = "UserNotFoundError"
    PASSWORD_RESET = "PasswordResetError"
    VERIFY_ATTRIBUTE = "VerifyAttributeError"
    RESEND_OTP = "ResendOTPError"
    INTERNAL = "InternalError"


@dataclass(frozen=True)
class DomainError:
    """A caller-safe error: a kind plus a human-readable message."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class IdentityConfigurationError(Exception):
    """Raised at startup when the identity provider is not configured.

    The application must not be built when this is raised.
    """

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        self.message = (
            "Cognito User Pool ID and Client ID must be configured "
            f"(missing: {', '.join(missing)})"
        )
        super().__init__(self.message)

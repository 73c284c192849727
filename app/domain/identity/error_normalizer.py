"""
Provider error normalization.

Translates the provider's error vocabulary into the fixed set of
domain error kinds. Each operation has its own table of known
identifiers plus a default kind and message template used for
anything it does not recognise. Unknown identifiers never raise.

Identifiers are matched with or without the provider's "Exception"
suffix, so "NotAuthorized" and "NotAuthorizedException" are the same.
"""

from dataclasses import dataclass

from app.domain.identity.entities import IdentityOperation
from app.domain.identity.errors import DomainError, ErrorKind

EXCEPTION_SUFFIX = "Exception"

INVALID_CODE = "Invalid verification code"
EXPIRED_CODE = "Verification code has expired"
USER_NOT_FOUND = "User not found"
TOO_MANY_ATTEMPTS = "Too many attempts. Please try again later."
PASSWORD_REQUIREMENTS = "Password does not meet requirements"


@dataclass(frozen=True)
class ErrorMapping:
    """Known identifiers and the fallback for one operation.

    Attributes:
        default_kind: Kind used for identifiers not in ``known``.
        default_template: Message for unknown identifiers; ``{message}``
            is replaced with the provider's message.
        known: Identifier (without suffix) -> (kind, fixed message).
    """

    default_kind: ErrorKind
    default_template: str
    known: dict[str, tuple[ErrorKind, str]]


ERROR_MAPPINGS: dict[IdentityOperation, ErrorMapping] = {
    IdentityOperation.REGISTER: ErrorMapping(
        default_kind=ErrorKind.REGISTRATION,
        default_template="Registration failed: {message}",
        known={
            "UsernameExists": (ErrorKind.REGISTRATION, "Email address is already registered"),
            "InvalidPassword": (ErrorKind.REGISTRATION, PASSWORD_REQUIREMENTS),
            "InvalidParameter": (ErrorKind.REGISTRATION, "Invalid parameters provided"),
        },
    ),
    IdentityOperation.CONFIRM_REGISTRATION: ErrorMapping(
        default_kind=ErrorKind.VERIFICATION,
        default_template="Verification failed: {message}",
        known={
            "CodeMismatch": (ErrorKind.VERIFICATION, INVALID_CODE),
            "ExpiredCode": (ErrorKind.VERIFICATION, EXPIRED_CODE),
            "UserNotFound": (ErrorKind.VERIFICATION, USER_NOT_FOUND),
        },
    ),
    IdentityOperation.RESEND_VERIFICATION_CODE: ErrorMapping(
        default_kind=ErrorKind.RESEND_OTP,
        default_template="Failed to resend code: {message}",
        known={
            "UserNotFound": (ErrorKind.RESEND_OTP, USER_NOT_FOUND),
            "LimitExceeded": (ErrorKind.RESEND_OTP, TOO_MANY_ATTEMPTS),
        },
    ),
    IdentityOperation.VERIFY_ATTRIBUTE: ErrorMapping(
        default_kind=ErrorKind.VERIFY_ATTRIBUTE,
        default_template="Attribute verification failed: {message}",
        known={
            "CodeMismatch": (ErrorKind.VERIFY_ATTRIBUTE, INVALID_CODE),
            "ExpiredCode": (ErrorKind.VERIFY_ATTRIBUTE, EXPIRED_CODE),
        },
    ),
    IdentityOperation.FORGOT_PASSWORD: ErrorMapping(
        default_kind=ErrorKind.PASSWORD_RESET,
        default_template="Failed to initiate password reset: {message}",
        known={
            "UserNotFound": (ErrorKind.USER_NOT_FOUND, USER_NOT_FOUND),
            "LimitExceeded": (ErrorKind.PASSWORD_RESET, TOO_MANY_ATTEMPTS),
        },
    ),
    IdentityOperation.CONFIRM_FORGOT_PASSWORD: ErrorMapping(
        default_kind=ErrorKind.PASSWORD_RESET,
        default_template="Failed to reset password: {message}",
        known={
            "CodeMismatch": (ErrorKind.PASSWORD_RESET, INVALID_CODE),
            "ExpiredCode": (ErrorKind.PASSWORD_RESET, EXPIRED_CODE),
            "InvalidPassword": (ErrorKind.PASSWORD_RESET, PASSWORD_REQUIREMENTS),
        },
    ),
    IdentityOperation.SIGN_IN: ErrorMapping(
        default_kind=ErrorKind.AUTHENTICATION,
        default_template="Sign-in failed: {message}",
        known={
            "NotAuthorized": (ErrorKind.AUTHENTICATION, "Incorrect username or password"),
            "UserNotConfirmed": (ErrorKind.AUTHENTICATION, "Please verify your email address"),
            "UserNotFound": (ErrorKind.AUTHENTICATION, "No account found with this email"),
            "TooManyRequests": (
                ErrorKind.AUTHENTICATION,
                "Too many sign-in attempts. Please try again later",
            ),
        },
    ),
}


def _strip_suffix(error_id: str) -> str:
    if error_id.endswith(EXCEPTION_SUFFIX) and error_id != EXCEPTION_SUFFIX:
        return error_id[: -len(EXCEPTION_SUFFIX)]
    return error_id


def normalize(
    operation: IdentityOperation,
    upstream_error_id: str,
    upstream_message: str,
) -> DomainError:
    """Map a provider failure to a caller-safe domain error.

    Args:
        operation: The use case that made the failing call.
        upstream_error_id: Provider error identifier, e.g.
            "CodeMismatchException". May be empty.
        upstream_message: Provider error message, interpolated only for
            identifiers without a fixed message.

    Returns:
        The DomainError for this (operation, identifier) pair.
    """
    mapping = ERROR_MAPPINGS[operation]
    known = mapping.known.get(_strip_suffix(upstream_error_id or ""))
    if known is not None:
        kind, message = known
        return DomainError(kind=kind, message=message)

    # Provider message is inserted verbatim, braces included.
    message = mapping.default_template.replace("{message}", upstream_message or "")
    return DomainError(kind=mapping.default_kind, message=message)

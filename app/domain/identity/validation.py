"""
Registration input validation.

Checks the shape of user-supplied fields before any provider call.
Rules run in a fixed order and the first failure is returned.
"""

import re

from app.domain.identity.entities import RegistrationRequest
from app.domain.identity.errors import ErrorKind
from app.domain.identity.result import Result, Success, fail

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\+?[\d\s-]{10,}")
MIN_PASSWORD_LENGTH = 8

INVALID_EMAIL = "Invalid email format"
PASSWORD_TOO_SHORT = "Password must be at least 8 characters long"
NAME_REQUIRED = "First name and last name are required"
INVALID_PHONE = "Invalid phone number format"


def validate_registration(request: RegistrationRequest) -> Result[None]:
    """Validate a registration request.

    Args:
        request: The sign-up data to check.

    Returns:
        Success(None) when every rule passes, otherwise a Failure with a
        RegistrationError describing the first violated rule.
    """
    if not EMAIL_PATTERN.fullmatch(request.email or ""):
        return fail(ErrorKind.REGISTRATION, INVALID_EMAIL)

    if len(request.password or "") < MIN_PASSWORD_LENGTH:
        return fail(ErrorKind.REGISTRATION, PASSWORD_TOO_SHORT)

    if not request.first_name or not request.last_name:
        return fail(ErrorKind.REGISTRATION, NAME_REQUIRED)

    # An empty phone number counts as not provided.
    if request.phone_number and not PHONE_PATTERN.fullmatch(request.phone_number):
        return fail(ErrorKind.REGISTRATION, INVALID_PHONE)

    return Success(None)

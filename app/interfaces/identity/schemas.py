"""
Pydantic schemas for identity API requests and response payloads.

Field names are camelCase on the wire. Request fields default to empty
strings, and a JSON null is read as an empty string: format rules are
enforced by the domain validator and the identity provider so that
callers get domain messages, not framework validation errors.
No business logic belongs here.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

EMAIL_DESCRIPTION = "Email address used as the username"
CODE_DESCRIPTION = "Verification code delivered by the identity provider"


class CamelModel(BaseModel):
    """Base schema using camelCase aliases, accepting either spelling."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestModel(CamelModel):
    """Base schema for request bodies."""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


# ------------------------------------------------------------------
# Requests
# ------------------------------------------------------------------


class RegisterRequest(RequestModel):
    """Request schema for user registration."""

    email: str = Field(default="", description=EMAIL_DESCRIPTION)
    password: str = Field(default="", description="Password, at least 8 characters")
    first_name: str = Field(default="", description="Given name")
    last_name: str = Field(default="", description="Family name")
    phone_number: Optional[str] = Field(
        default=None, description="Phone number, optional leading +, 10+ characters"
    )


class ConfirmRegistrationRequest(RequestModel):
    """Request schema for confirming a registration."""

    email: str = Field(default="", description=EMAIL_DESCRIPTION)
    code: str = Field(default="", description=CODE_DESCRIPTION)


class ResendCodeRequest(RequestModel):
    """Request schema for resending the registration code."""

    email: str = Field(default="", description=EMAIL_DESCRIPTION)


class VerifyAttributeRequest(RequestModel):
    """Request schema for verifying a user attribute."""

    access_token: str = Field(default="", description="Access token of the signed-in user")
    attribute_name: str = Field(default="", description="Attribute to verify, e.g. phone_number")
    code: str = Field(default="", description=CODE_DESCRIPTION)


class ForgotPasswordRequest(RequestModel):
    """Request schema for starting a password reset."""

    email: str = Field(default="", description=EMAIL_DESCRIPTION)


class ConfirmForgotPasswordRequest(RequestModel):
    """Request schema for completing a password reset."""

    email: str = Field(default="", description=EMAIL_DESCRIPTION)
    code: str = Field(default="", description=CODE_DESCRIPTION)
    new_password: str = Field(default="", description="The new password")


class SignInRequest(RequestModel):
    """Request schema for signing in."""

    email: str = Field(default="", description=EMAIL_DESCRIPTION)
    password: str = Field(default="", description="Account password")


# ------------------------------------------------------------------
# Response payloads (the "data" member of a success envelope)
# ------------------------------------------------------------------


class RegistrationData(CamelModel):
    """Payload returned after a successful registration."""

    user_id: Optional[str] = None
    message: str


class AcknowledgementData(CamelModel):
    """Payload returned by operations that only confirm completion."""

    message: str


class SignInData(CamelModel):
    """Payload returned after a successful sign-in."""

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    id_token: Optional[str] = None
    message: str


# ------------------------------------------------------------------
# Envelopes (documentation only; responses are built by app.shared.envelope)
# ------------------------------------------------------------------


class ErrorBody(BaseModel):
    """Error member of a failed envelope."""

    code: str
    message: str
    details: Optional[Any] = None


class ErrorEnvelope(BaseModel):
    """Envelope returned for every failure."""

    success: bool = False
    error: ErrorBody


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    environment: str
    region: str

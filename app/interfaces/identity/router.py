"""
FastAPI router for the identity bounded context.

All routes delegate to the IdentityGateway. No business logic here.
Each route turns the gateway outcome into a response envelope:
success payloads are re-shaped into camelCase schemas, domain errors
go through the centralized error mapping.
"""

from typing import Any, Callable, TypeVar

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from app.application.identity.dtos import (
    Acknowledgement,
    RegistrationResult,
    SignInResult,
)
from app.application.identity.gateway import IdentityGateway
from app.domain.identity.entities import RegistrationRequest
from app.domain.identity.result import Result, Success
from app.interfaces.identity.dependencies import get_identity_gateway
from app.interfaces.identity.schemas import (
    AcknowledgementData,
    ConfirmForgotPasswordRequest,
    ConfirmRegistrationRequest,
    ErrorEnvelope,
    ForgotPasswordRequest,
    RegisterRequest,
    RegistrationData,
    ResendCodeRequest,
    SignInData,
    SignInRequest,
    VerifyAttributeRequest,
)
from app.shared import envelope
from app.shared.errors.handlers import envelope_for_outcome
from app.shared.security.rate_limiting import auth_rate_limit, limiter

T = TypeVar("T")

router = APIRouter(prefix="/auth", tags=["auth"])

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorEnvelope, "description": "Domain error"},
    429: {"model": ErrorEnvelope, "description": "Rate limit exceeded"},
    500: {"model": ErrorEnvelope, "description": "Unexpected error"},
}


def _respond(outcome: Result[T], to_payload: Callable[[T], Any]) -> Response:
    """Render an outcome, re-shaping a success value with ``to_payload``."""
    if isinstance(outcome, Success):
        return envelope.success(to_payload(outcome.value)).to_response()
    return envelope_for_outcome(outcome).to_response()


def _registration(result: RegistrationResult) -> RegistrationData:
    return RegistrationData(user_id=result.user_id, message=result.message)


def _acknowledgement(result: Acknowledgement) -> AcknowledgementData:
    return AcknowledgementData(message=result.message)


def _sign_in(result: SignInResult) -> SignInData:
    return SignInData(
        access_token=result.access_token,
        refresh_token=result.refresh_token,
        id_token=result.id_token,
        message=result.message,
    )


@router.post(
    "/register",
    responses=ERROR_RESPONSES,
    summary="Register a user",
    description="Create an account and send an email verification code.",
)
@limiter.limit(auth_rate_limit)
def register(
    request: Request,
    body: RegisterRequest = RegisterRequest(),
    gateway: IdentityGateway = Depends(get_identity_gateway),
) -> Response:
    """Register a new user."""
    outcome = gateway.register(
        RegistrationRequest(
            email=body.email,
            password=body.password,
            first_name=body.first_name,
            last_name=body.last_name,
            phone_number=body.phone_number,
        )
    )
    return _respond(outcome, _registration)


@router.post(
    "/confirm",
    responses=ERROR_RESPONSES,
    summary="Confirm registration",
    description="Confirm a registration with the emailed verification code.",
)
@limiter.limit(auth_rate_limit)
def confirm_registration(
    request: Request,
    body: ConfirmRegistrationRequest = ConfirmRegistrationRequest(),
    gateway: IdentityGateway = Depends(get_identity_gateway),
) -> Response:
    """Confirm a user's email address."""
    outcome = gateway.confirm_registration(body.email, body.code)
    return _respond(outcome, _acknowledgement)


@router.post(
    "/resend-code",
    responses=ERROR_RESPONSES,
    summary="Resend verification code",
    description="Send a new registration verification code.",
)
@limiter.limit(auth_rate_limit)
def resend_verification_code(
    request: Request,
    body: ResendCodeRequest = ResendCodeRequest(),
    gateway: IdentityGateway = Depends(get_identity_gateway),
) -> Response:
    """Resend the registration verification code."""
    outcome = gateway.resend_verification_code(body.email)
    return _respond(outcome, _acknowledgement)


@router.post(
    "/verify-attribute",
    responses=ERROR_RESPONSES,
    summary="Verify a user attribute",
    description="Verify an attribute such as a phone number for a signed-in user.",
)
@limiter.limit(auth_rate_limit)
def verify_attribute(
    request: Request,
    body: VerifyAttributeRequest = VerifyAttributeRequest(),
    gateway: IdentityGateway = Depends(get_identity_gateway),
) -> Response:
    """Verify a user attribute with its code."""
    outcome = gateway.verify_attribute(body.access_token, body.attribute_name, body.code)
    return _respond(outcome, _acknowledgement)


@router.post(
    "/forgot-password",
    responses=ERROR_RESPONSES,
    summary="Start password reset",
    description="Send a password reset code to the user's email.",
)
@limiter.limit(auth_rate_limit)
def forgot_password(
    request: Request,
    body: ForgotPasswordRequest = ForgotPasswordRequest(),
    gateway: IdentityGateway = Depends(get_identity_gateway),
) -> Response:
    """Initiate the forgot-password flow."""
    outcome = gateway.forgot_password(body.email)
    return _respond(outcome, _acknowledgement)


@router.post(
    "/confirm-forgot-password",
    responses=ERROR_RESPONSES,
    summary="Complete password reset",
    description="Set a new password using the emailed reset code.",
)
@limiter.limit(auth_rate_limit)
def confirm_forgot_password(
    request: Request,
    body: ConfirmForgotPasswordRequest = ConfirmForgotPasswordRequest(),
    gateway: IdentityGateway = Depends(get_identity_gateway),
) -> Response:
    """Complete the forgot-password flow."""
    outcome = gateway.confirm_forgot_password(body.email, body.code, body.new_password)
    return _respond(outcome, _acknowledgement)


@router.post(
    "/sign-in",
    responses=ERROR_RESPONSES,
    summary="Sign in",
    description="Authenticate with email and password and return tokens.",
)
@limiter.limit(auth_rate_limit)
def sign_in(
    request: Request,
    body: SignInRequest = SignInRequest(),
    gateway: IdentityGateway = Depends(get_identity_gateway),
) -> Response:
    """Sign a user in."""
    outcome = gateway.sign_in(body.email, body.password)
    return _respond(outcome, _sign_in)

"""
Identity gateway: one method per credential use case.

Each method issues exactly one provider call and returns a Result.
Provider failures are normalized into domain errors; nothing is
raised for them and nothing is retried. Exceptions that are not
provider failures (network, credentials) propagate to the caller.

Side effects: one provider call per method.
Failure cases: Failure(DomainError) with the operation's error kind.
"""

import logging

from app.application.identity.dtos import (
    Acknowledgement,
    RegistrationResult,
    SignInResult,
)
from app.domain.identity.entities import (
    IdentityOperation,
    IdentityProviderConfig,
    ProviderFailure,
    ProviderReply,
    RegistrationRequest,
)
from app.domain.identity.error_normalizer import normalize
from app.domain.identity.errors import ErrorKind
from app.domain.identity.ports import IdentityProviderPort
from app.domain.identity.result import Failure, Result, Success, fail
from app.domain.identity.validation import validate_registration

logger = logging.getLogger(__name__)

REGISTERED = "User registered successfully. Please check your email for verification."
EMAIL_VERIFIED = "Email verification successful. You can now sign in."
CODE_RESENT = "Verification code has been resent to your email."
RESET_CODE_SENT = "Password reset code has been sent to your email."
PASSWORD_RESET = "Password has been reset successfully."
SIGNED_IN = "Successfully signed in"
AUTHENTICATION_FAILED = "Authentication failed"


class IdentityGateway:
    """Translates credential use cases into identity provider calls.

    Built per request; holds no state besides its collaborators.
    """

    def __init__(
        self,
        provider: IdentityProviderPort,
        config: IdentityProviderConfig,
    ) -> None:
        self._provider = provider
        self._config = config

    def _failure(
        self, operation: IdentityOperation, reply: ProviderFailure
    ) -> Failure:
        error = normalize(operation, reply.error_id, reply.message)
        logger.info(
            "Provider rejected %s: %s -> %s",
            operation.value,
            reply.error_id,
            error.kind.value,
        )
        return Failure(error)

    def register(self, request: RegistrationRequest) -> Result[RegistrationResult]:
        """Validate the request and create the user in the provider.

        Args:
            request: Sign-up data.

        Returns:
            Success(RegistrationResult) or Failure(RegistrationError).
        """
        validation = validate_registration(request)
        if validation.is_failure():
            return validation

        attributes = {"email": request.email, "name": request.full_name}
        if request.phone_number:
            attributes["phone_number"] = request.phone_number

        reply = self._provider.sign_up(
            client_id=self._config.client_id,
            username=request.email,
            password=request.password,
            attributes=attributes,
        )
        if isinstance(reply, ProviderFailure):
            return self._failure(IdentityOperation.REGISTER, reply)

        return Success(
            RegistrationResult(user_id=reply.payload.get("UserSub"), message=REGISTERED)
        )

    def confirm_registration(self, email: str, code: str) -> Result[Acknowledgement]:
        """Confirm a sign-up with the code sent by email."""
        reply = self._provider.confirm_sign_up(
            client_id=self._config.client_id,
            username=email,
            confirmation_code=code,
        )
        return self._acknowledge(IdentityOperation.CONFIRM_REGISTRATION, reply, EMAIL_VERIFIED)

    def resend_verification_code(self, email: str) -> Result[Acknowledgement]:
        """Ask the provider to send a fresh confirmation code."""
        reply = self._provider.resend_confirmation_code(
            client_id=self._config.client_id,
            username=email,
        )
        return self._acknowledge(IdentityOperation.RESEND_VERIFICATION_CODE, reply, CODE_RESENT)

    def verify_attribute(
        self, access_token: str, attribute_name: str, code: str
    ) -> Result[Acknowledgement]:
        """Verify a user attribute such as a phone number.

        Args:
            access_token: Access token of the signed-in user.
            attribute_name: Provider attribute name, e.g. "phone_number".
            code: Verification code delivered for that attribute.
        """
        reply = self._provider.verify_user_attribute(
            access_token=access_token,
            attribute_name=attribute_name,
            code=code,
        )
        return self._acknowledge(
            IdentityOperation.VERIFY_ATTRIBUTE,
            reply,
            f"{attribute_name} verification successful.",
        )

    def forgot_password(self, email: str) -> Result[Acknowledgement]:
        """Start the password reset flow."""
        reply = self._provider.forgot_password(
            client_id=self._config.client_id,
            username=email,
        )
        return self._acknowledge(IdentityOperation.FORGOT_PASSWORD, reply, RESET_CODE_SENT)

    def confirm_forgot_password(
        self, email: str, code: str, new_password: str
    ) -> Result[Acknowledgement]:
        """Set a new password using the reset code."""
        reply = self._provider.confirm_forgot_password(
            client_id=self._config.client_id,
            username=email,
            confirmation_code=code,
            password=new_password,
        )
        return self._acknowledge(IdentityOperation.CONFIRM_FORGOT_PASSWORD, reply, PASSWORD_RESET)

    def sign_in(self, email: str, password: str) -> Result[SignInResult]:
        """Authenticate a user and return their tokens.

        A provider success without an AuthenticationResult block (for
        instance when a challenge is pending) is an AuthenticationError.
        """
        reply = self._provider.initiate_auth(
            client_id=self._config.client_id,
            username=email,
            password=password,
        )
        if isinstance(reply, ProviderFailure):
            return self._failure(IdentityOperation.SIGN_IN, reply)

        auth_result = reply.payload.get("AuthenticationResult")
        if not auth_result:
            logger.info("Sign-in returned no authentication result")
            return fail(ErrorKind.AUTHENTICATION, AUTHENTICATION_FAILED)

        return Success(
            SignInResult(
                access_token=auth_result.get("AccessToken"),
                refresh_token=auth_result.get("RefreshToken"),
                id_token=auth_result.get("IdToken"),
                message=SIGNED_IN,
            )
        )

    def _acknowledge(
        self, operation: IdentityOperation, reply: ProviderReply, message: str
    ) -> Result[Acknowledgement]:
        if isinstance(reply, ProviderFailure):
            return self._failure(operation, reply)
        return Success(Acknowledgement(message=message))

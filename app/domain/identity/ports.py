"""
Port interface (ABC) for the identity bounded context.

The port defines the contract the gateway requires from the identity
provider. Infrastructure adapters implement it; tests substitute a fake
returning scripted replies. The domain never depends on boto3.

Every method returns a ProviderReply. Provider-reported errors come back
as ProviderFailure; anything else (network, credentials) is raised.
"""

from abc import ABC, abstractmethod

from app.domain.identity.entities import ProviderReply


class IdentityProviderPort(ABC):
    """Port for the managed identity provider's user-pool API."""

    @abstractmethod
    def sign_up(
        self,
        client_id: str,
        username: str,
        password: str,
        attributes: dict[str, str],
    ) -> ProviderReply:
        """Create a user. Success payload carries ``UserSub``."""
        raise NotImplementedError

    @abstractmethod
    def confirm_sign_up(
        self, client_id: str, username: str, confirmation_code: str
    ) -> ProviderReply:
        """Confirm a registration with the emailed code."""
        raise NotImplementedError

    @abstractmethod
    def resend_confirmation_code(self, client_id: str, username: str) -> ProviderReply:
        """Send a new registration confirmation code."""
        raise NotImplementedError

    @abstractmethod
    def verify_user_attribute(
        self, access_token: str, attribute_name: str, code: str
    ) -> ProviderReply:
        """Verify an attribute (email, phone_number) of a signed-in user."""
        raise NotImplementedError

    @abstractmethod
    def forgot_password(self, client_id: str, username: str) -> ProviderReply:
        """Start the password reset flow."""
        raise NotImplementedError

    @abstractmethod
    def confirm_forgot_password(
        self,
        client_id: str,
        username: str,
        confirmation_code: str,
        password: str,
    ) -> ProviderReply:
        """Finish the password reset flow with the code and a new password."""
        raise NotImplementedError

    @abstractmethod
    def initiate_auth(
        self,
        client_id: str,
        username: str,
        password: str,
    ) -> ProviderReply:
        """Authenticate with username and password (USER_PASSWORD_AUTH).

        Success payload may carry an ``AuthenticationResult`` block with
        ``AccessToken``, ``RefreshToken`` and ``IdToken``.
        """
        raise NotImplementedError

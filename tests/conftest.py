"""
Shared test configuration.

Environment variables are set before any application module is
imported, so the module-level Settings and app pick them up.
"""

import os

os.environ.setdefault("COGNITO_USER_POOL_ID", "us-east-1_TestPool")
os.environ.setdefault("COGNITO_CLIENT_ID", "test-client-id")
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from typing import Any  # noqa: E402

import pytest  # noqa: E402

from app.domain.identity.entities import (  # noqa: E402
    IdentityProviderConfig,
    ProviderFailure,
    ProviderReply,
    ProviderSuccess,
)
from app.domain.identity.ports import IdentityProviderPort  # noqa: E402


class FakeIdentityProvider(IdentityProviderPort):
    """Provider port returning scripted replies and recording calls.

    Methods without a scripted reply succeed with an empty payload.
    A scripted Exception instance is raised instead of returned.
    """

    def __init__(self, **replies: Any) -> None:
        self.replies = replies
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def _reply(self, name: str, **params: Any) -> ProviderReply:
        self.calls.append((name, params))
        reply = self.replies.get(name, ProviderSuccess())
        if isinstance(reply, Exception):
            raise reply
        return reply

    def sign_up(self, client_id, username, password, attributes):
        return self._reply(
            "sign_up",
            client_id=client_id,
            username=username,
            password=password,
            attributes=attributes,
        )

    def confirm_sign_up(self, client_id, username, confirmation_code):
        return self._reply(
            "confirm_sign_up",
            client_id=client_id,
            username=username,
            confirmation_code=confirmation_code,
        )

    def resend_confirmation_code(self, client_id, username):
        return self._reply("resend_confirmation_code", client_id=client_id, username=username)

    def verify_user_attribute(self, access_token, attribute_name, code):
        return self._reply(
            "verify_user_attribute",
            access_token=access_token,
            attribute_name=attribute_name,
            code=code,
        )

    def forgot_password(self, client_id, username):
        return self._reply("forgot_password", client_id=client_id, username=username)

    def confirm_forgot_password(self, client_id, username, confirmation_code, password):
        return self._reply(
            "confirm_forgot_password",
            client_id=client_id,
            username=username,
            confirmation_code=confirmation_code,
            password=password,
        )

    def initiate_auth(self, client_id, username, password):
        return self._reply(
            "initiate_auth", client_id=client_id, username=username, password=password
        )


def failure(error_id: str, message: str = "provider said no") -> ProviderFailure:
    """Build a scripted provider failure."""
    return ProviderFailure(error_id=error_id, message=message)


@pytest.fixture
def provider_config() -> IdentityProviderConfig:
    return IdentityProviderConfig.create(
        user_pool_id="us-east-1_TestPool", client_id="test-client-id"
    )


@pytest.fixture
def fake_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider()

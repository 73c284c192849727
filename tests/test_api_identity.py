"""
Tests for the identity API endpoints.

Tests FastAPI routes with the provider port replaced by a fake.
Validates request handling, envelopes, error mapping and startup
configuration.
"""

import boto3
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.domain.identity.entities import ProviderSuccess
from app.domain.identity.errors import IdentityConfigurationError
from app.domain.identity.ports import IdentityProviderPort
from app.infrastructure.identity.cognito_adapter import CognitoIdentityProviderAdapter
from app.interfaces.identity.dependencies import get_identity_provider
from app.main import create_app
from app.shared.security.rate_limiting import auth_rate_limit, configure_rate_limiting, limiter
from conftest import FakeIdentityProvider, failure

BASE = "/api/v1/auth"

REGISTRATION = {
    "email": "ada@example.com",
    "password": "s3cretpass",
    "firstName": "Ada",
    "lastName": "Lovelace",
}


def _settings(**overrides) -> Settings:
    fields = {
        "cognito_user_pool_id": "us-east-1_TestPool",
        "cognito_client_id": "test-client-id",
        "environment": "test",
        "rate_limit_enabled": False,
    }
    fields.update(overrides)
    return Settings(**fields)


@pytest.fixture
def provider() -> FakeIdentityProvider:
    return FakeIdentityProvider()


def _client(provider: IdentityProviderPort, **overrides) -> TestClient:
    app = create_app(_settings(**overrides))
    app.dependency_overrides[get_identity_provider] = lambda: provider
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def client(provider: FakeIdentityProvider) -> TestClient:
    return _client(provider)


# ══════════════════════════════════════════════════════════════════════
# Success paths
# ══════════════════════════════════════════════════════════════════════


class TestSuccessfulRequests:
    """Each endpoint returns a success envelope with a camelCase payload."""

    def test_register(self, client, provider) -> None:
        provider.replies["sign_up"] = ProviderSuccess({"UserSub": "sub-123"})

        response = client.post(f"{BASE}/register", json=REGISTRATION)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {
                "userId": "sub-123",
                "message": "User registered successfully. Please check your email for verification.",
            },
        }

    def test_register_forwards_phone_number(self, client, provider) -> None:
        client.post(f"{BASE}/register", json={**REGISTRATION, "phoneNumber": "+15551234567"})
        assert provider.calls[0][1]["attributes"]["phone_number"] == "+15551234567"

    def test_confirm(self, client, provider) -> None:
        response = client.post(f"{BASE}/confirm", json={"email": "ada@example.com", "code": "123456"})
        assert response.status_code == 200
        assert response.json()["data"] == {
            "message": "Email verification successful. You can now sign in."
        }

    def test_resend_code(self, client) -> None:
        response = client.post(f"{BASE}/resend-code", json={"email": "ada@example.com"})
        assert response.json()["data"]["message"] == "Verification code has been resent to your email."

    def test_verify_attribute(self, client, provider) -> None:
        response = client.post(
            f"{BASE}/verify-attribute",
            json={"accessToken": "token", "attributeName": "phone_number", "code": "654321"},
        )
        assert response.json()["data"]["message"] == "phone_number verification successful."
        assert provider.calls[0][1]["access_token"] == "token"

    def test_forgot_password(self, client) -> None:
        response = client.post(f"{BASE}/forgot-password", json={"email": "ada@example.com"})
        assert response.status_code == 200

    def test_confirm_forgot_password(self, client, provider) -> None:
        response = client.post(
            f"{BASE}/confirm-forgot-password",
            json={"email": "ada@example.com", "code": "111222", "newPassword": "n3wpassword"},
        )
        assert response.json()["data"]["message"] == "Password has been reset successfully."
        assert provider.calls[0][1]["password"] == "n3wpassword"

    def test_sign_in(self, client, provider) -> None:
        provider.replies["initiate_auth"] = ProviderSuccess(
            {"AuthenticationResult": {"AccessToken": "a", "RefreshToken": "r", "IdToken": "i"}}
        )

        response = client.post(f"{BASE}/sign-in", json={"email": "ada@example.com", "password": "pw"})

        assert response.status_code == 200
        assert response.json()["data"] == {
            "accessToken": "a",
            "refreshToken": "r",
            "idToken": "i",
            "message": "Successfully signed in",
        }


# ══════════════════════════════════════════════════════════════════════
# Domain errors
# ══════════════════════════════════════════════════════════════════════


class TestDomainErrors:
    """Validation and provider failures become 400 envelopes."""

    def test_register_with_bad_email(self, client, provider) -> None:
        response = client.post(f"{BASE}/register", json={**REGISTRATION, "email": "bad-email"})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": {"code": "REGISTRATION_FAILED", "message": "Invalid email format"},
        }
        assert provider.calls == []

    def test_register_with_missing_fields(self, client) -> None:
        """Absent fields reach the validator as empty strings."""
        response = client.post(f"{BASE}/register", json={})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid email format"

    def test_register_with_null_email(self, client, provider) -> None:
        response = client.post(f"{BASE}/register", json={**REGISTRATION, "email": None})

        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "REGISTRATION_FAILED",
            "message": "Invalid email format",
        }
        assert provider.calls == []

    def test_register_with_null_phone_number(self, client, provider) -> None:
        response = client.post(f"{BASE}/register", json={**REGISTRATION, "phoneNumber": None})
        assert response.status_code == 200
        assert "phone_number" not in provider.calls[0][1]["attributes"]

    def test_null_fields_reach_the_provider_as_empty(self, client, provider) -> None:
        client.post(f"{BASE}/confirm", json={"email": None, "code": None})
        assert provider.calls[0][1]["username"] == ""
        assert provider.calls[0][1]["confirmation_code"] == ""

    def test_sign_in_not_authorized(self, client, provider) -> None:
        provider.replies["initiate_auth"] = failure("NotAuthorizedException")

        response = client.post(f"{BASE}/sign-in", json={"email": "ada@example.com", "password": "pw"})

        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "AUTHENTICATION_FAILED",
            "message": "Incorrect username or password",
        }

    def test_sign_in_without_authentication_result(self, client, provider) -> None:
        provider.replies["initiate_auth"] = ProviderSuccess({"ChallengeName": "SMS_MFA"})
        response = client.post(f"{BASE}/sign-in", json={"email": "ada@example.com", "password": "pw"})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Authentication failed"

    def test_confirm_with_unmapped_error(self, client, provider) -> None:
        provider.replies["confirm_sign_up"] = failure("SomeNewException", "X")
        response = client.post(f"{BASE}/confirm", json={"email": "ada@example.com", "code": "1"})
        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "VERIFICATION_FAILED",
            "message": "Verification failed: X",
        }

    def test_forgot_password_unknown_user(self, client, provider) -> None:
        provider.replies["forgot_password"] = failure("UserNotFoundException")
        response = client.post(f"{BASE}/forgot-password", json={"email": "nobody@example.com"})
        assert response.json()["error"] == {"code": "USER_NOT_FOUND", "message": "User not found"}

    def test_missing_username_rejected_by_real_client(self) -> None:
        """botocore refuses an empty username before sending; still a domain error."""
        cognito = boto3.client(
            "cognito-idp",
            region_name="us-east-1",
            aws_access_key_id="testing",
            aws_secret_access_key="testing",
        )
        client = _client(CognitoIdentityProviderAdapter(client=cognito))

        response = client.post(f"{BASE}/forgot-password", json={})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "PASSWORD_RESET_FAILED"
        assert error["message"].startswith("Failed to initiate password reset: ")


# ══════════════════════════════════════════════════════════════════════
# Unexpected errors
# ══════════════════════════════════════════════════════════════════════


class TestInternalErrors:
    """Non-domain failures become generic 500 envelopes."""

    def test_provider_exception_in_development(self, client, provider) -> None:
        provider.replies["initiate_auth"] = ConnectionError("network down")

        response = client.post(f"{BASE}/sign-in", json={"email": "ada@example.com", "password": "pw"})

        assert response.status_code == 500
        assert response.json()["error"] == {
            "code": "INTERNAL_SERVER_ERROR",
            "message": "An unexpected error occurred",
            "details": {"type": "ConnectionError", "message": "network down"},
        }

    def test_provider_exception_in_production_hides_cause(self, provider) -> None:
        client = _client(provider, environment="production")
        provider.replies["initiate_auth"] = ConnectionError("network down")

        response = client.post(f"{BASE}/sign-in", json={"email": "ada@example.com", "password": "pw"})

        assert response.status_code == 500
        assert response.json()["error"] == {
            "code": "INTERNAL_SERVER_ERROR",
            "message": "An unexpected error occurred",
        }

    def test_malformed_json(self, client, provider) -> None:
        response = client.post(
            f"{BASE}/sign-in",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 500
        assert response.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"
        assert provider.calls == []

    def test_malformed_json_in_production_has_no_details(self, provider) -> None:
        client = _client(provider, environment="production")
        response = client.post(
            f"{BASE}/confirm",
            content=b"[",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 500
        assert "details" not in response.json()["error"]


# ══════════════════════════════════════════════════════════════════════
# Startup, middleware, health
# ══════════════════════════════════════════════════════════════════════


class TestStartup:
    """The app refuses to start without provider identifiers."""

    @pytest.mark.parametrize(
        "overrides",
        [{"cognito_user_pool_id": None}, {"cognito_client_id": ""}],
    )
    def test_missing_configuration_is_fatal(self, overrides) -> None:
        with pytest.raises(IdentityConfigurationError):
            create_app(_settings(**overrides))


class TestMiddleware:
    """Tests for security headers, CORS and health."""

    def test_security_headers_present(self, client) -> None:
        response = client.get("/api/v1/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Cache-Control"] == "no-store"

    def test_cors_preflight(self, client) -> None:
        response = client.options(
            f"{BASE}/sign-in",
            headers={
                "Origin": "https://app.example.com",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_health(self, client) -> None:
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "version": "0.1.0",
            "environment": "test",
            "region": "us-east-1",
        }


class TestRateLimiting:
    """Tests for rate limiting on the credential endpoints."""

    @pytest.fixture(autouse=True)
    def _restore_limiter(self):
        yield
        limiter.reset()
        configure_rate_limiting(_settings())

    def test_rate_limit_returns_429(self, provider) -> None:
        """The eleventh call within a minute is rejected with an envelope."""
        client = _client(provider, rate_limit_enabled=True)
        statuses = [
            client.post(f"{BASE}/forgot-password", json={"email": "ada@example.com"})
            for _ in range(11)
        ]

        assert [r.status_code for r in statuses[:10]] == [200] * 10
        assert statuses[10].status_code == 429
        assert statuses[10].json()["error"]["code"] == "RATE_LIMIT_EXCEEDED"

    def test_auth_limit_comes_from_app_settings(self, provider) -> None:
        client = _client(provider, rate_limit_enabled=True, rate_limit_auth="2/minute")
        assert auth_rate_limit() == "2/minute"

        statuses = [
            client.post(f"{BASE}/resend-code", json={"email": "ada@example.com"}).status_code
            for _ in range(3)
        ]

        assert statuses == [200, 200, 429]

    def test_health_is_not_throttled(self, provider) -> None:
        client = _client(provider, rate_limit_enabled=True, rate_limit_auth="1/minute")
        statuses = [client.get("/api/v1/health").status_code for _ in range(5)]
        assert statuses == [200] * 5

    def test_disabled_limiter_never_throttles(self, provider) -> None:
        client = _client(provider, rate_limit_auth="1/minute")
        statuses = [
            client.post(f"{BASE}/forgot-password", json={"email": "ada@example.com"}).status_code
            for _ in range(3)
        ]
        assert statuses == [200] * 3

"""
Adapter: AWS Cognito user pools.

Implements IdentityProviderPort on top of the boto3 "cognito-idp"
client. Provider errors (botocore ClientError) and request parameters
rejected by botocore before sending (ParamValidationError) become
ProviderFailure; every other exception is left to propagate.
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import ClientError, ParamValidationError

from app.domain.identity.entities import (
    ProviderFailure,
    ProviderReply,
    ProviderSuccess,
)
from app.domain.identity.ports import IdentityProviderPort

logger = logging.getLogger(__name__)

USER_PASSWORD_AUTH = "USER_PASSWORD_AUTH"
SERVICE_NAME = "cognito-idp"
INVALID_PARAMETER = "InvalidParameterException"


def create_cognito_client(region: str) -> Any:
    """Build a boto3 Cognito Identity Provider client for a region."""
    return boto3.client(SERVICE_NAME, region_name=region)


class CognitoIdentityProviderAdapter(IdentityProviderPort):
    """Concrete adapter for Cognito user pools.

    Args:
        client: A boto3 ``cognito-idp`` client. Clients are thread-safe
            and may be shared across requests.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    def _call(self, operation: str, **params: Any) -> ProviderReply:
        try:
            response = getattr(self._client, operation)(**params)
        except ClientError as exc:
            error = exc.response.get("Error", {})
            error_id = error.get("Code", "")
            logger.warning("Cognito %s failed: %s", operation, error_id)
            return ProviderFailure(error_id=error_id, message=error.get("Message", str(exc)))
        except ParamValidationError as exc:
            # Raised client-side, e.g. for an empty username; reported the
            # way Cognito reports an invalid parameter.
            logger.warning("Cognito %s rejected parameters: %s", operation, exc)
            return ProviderFailure(error_id=INVALID_PARAMETER, message=str(exc))
        return ProviderSuccess(payload=response or {})

    def sign_up(
        self,
        client_id: str,
        username: str,
        password: str,
        attributes: dict[str, str],
    ) -> ProviderReply:
        return self._call(
            "sign_up",
            ClientId=client_id,
            Username=username,
            Password=password,
            UserAttributes=[
                {"Name": name, "Value": value} for name, value in attributes.items()
            ],
        )

    def confirm_sign_up(
        self, client_id: str, username: str, confirmation_code: str
    ) -> ProviderReply:
        return self._call(
            "confirm_sign_up",
            ClientId=client_id,
            Username=username,
            ConfirmationCode=confirmation_code,
        )

    def resend_confirmation_code(self, client_id: str, username: str) -> ProviderReply:
        return self._call(
            "resend_confirmation_code",
            ClientId=client_id,
            Username=username,
        )

    def verify_user_attribute(
        self, access_token: str, attribute_name: str, code: str
    ) -> ProviderReply:
        return self._call(
            "verify_user_attribute",
            AccessToken=access_token,
            AttributeName=attribute_name,
            Code=code,
        )

    def forgot_password(self, client_id: str, username: str) -> ProviderReply:
        return self._call(
            "forgot_password",
            ClientId=client_id,
            Username=username,
        )

    def confirm_forgot_password(
        self,
        client_id: str,
        username: str,
        confirmation_code: str,
        password: str,
    ) -> ProviderReply:
        return self._call(
            "confirm_forgot_password",
            ClientId=client_id,
            Username=username,
            ConfirmationCode=confirmation_code,
            Password=password,
        )

    def initiate_auth(self, client_id: str, username: str, password: str) -> ProviderReply:
        return self._call(
            "initiate_auth",
            AuthFlow=USER_PASSWORD_AUTH,
            ClientId=client_id,
            AuthParameters={"USERNAME": username, "PASSWORD": password},
        )

"""
Dependency injection for the identity bounded context.

Provides FastAPI dependency functions that wire the Cognito adapter
and the validated provider configuration into a per-request gateway.
These are the composition root for the identity context.
"""

from functools import lru_cache

from fastapi import Depends, Request

from app.application.identity.gateway import IdentityGateway
from app.domain.identity.entities import IdentityProviderConfig
from app.domain.identity.ports import IdentityProviderPort
from app.infrastructure.identity.cognito_adapter import (
    CognitoIdentityProviderAdapter,
    create_cognito_client,
)


@lru_cache(maxsize=None)
def _cognito_client(region: str):
    """One boto3 client per region for the whole process."""
    return create_cognito_client(region)


def get_provider_config(request: Request) -> IdentityProviderConfig:
    """Return the provider configuration validated by create_app()."""
    return request.app.state.identity_config


def get_identity_provider(
    config: IdentityProviderConfig = Depends(get_provider_config),
) -> IdentityProviderPort:
    """Build the Cognito adapter around the shared boto3 client."""
    return CognitoIdentityProviderAdapter(client=_cognito_client(config.region))


def get_identity_gateway(
    provider: IdentityProviderPort = Depends(get_identity_provider),
    config: IdentityProviderConfig = Depends(get_provider_config),
) -> IdentityGateway:
    """Build a fresh IdentityGateway for the current request."""
    return IdentityGateway(provider=provider, config=config)

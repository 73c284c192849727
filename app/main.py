"""
Application entry point.

Creates the FastAPI application and wires together:
- Provider configuration (validated once, fatal if incomplete)
- Routers (one per bounded context)
- Error handlers (centralized domain-to-envelope mapping)
- Security middleware (headers, CORS, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, settings
from app.domain.identity.entities import IdentityProviderConfig
from app.interfaces.health import router as health_router
from app.interfaces.identity.router import router as identity_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import configure_rate_limiting

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Validates the identity provider configuration, then registers
    routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        app_settings: Settings to use. Defaults to the module settings.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        IdentityConfigurationError: If the user pool id or client id
            is missing. No application is built in that case.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)

    identity_config = IdentityProviderConfig.create(
        user_pool_id=app_settings.cognito_user_pool_id,
        client_id=app_settings.cognito_client_id,
        region=app_settings.aws_region,
    )
    logger.info(
        "Identity provider configured: pool=%s region=%s",
        identity_config.user_pool_id,
        identity_config.region,
    )

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
    )
    app.state.settings = app_settings
    app.state.identity_config = identity_config

    # --- Rate Limiting (process-wide limiter, last configured app wins) ---
    app.state.limiter = configure_rate_limiting(app_settings)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Error Handlers ---
    register_error_handlers(app, expose_details=app_settings.expose_error_details)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(identity_router, prefix="/api/v1")

    return app


app = create_app()

"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        environment: Deployment environment name. Error details are
            only attached to 500 responses outside "production".
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        cognito_user_pool_id: Cognito user pool the gateway talks to.
        cognito_client_id: App client id registered in that user pool.
        aws_region: AWS region hosting the user pool.
        cors_allow_origins: Origins allowed by the CORS middleware.
        rate_limit_enabled: Toggle slowapi rate limiting.
        rate_limit_auth: Rate limit for the credential endpoints.

    The Cognito identifiers are optional here so that settings can be
    loaded without them; their presence is enforced once in create_app().
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Identity Gateway"
    version: str = "0.1.0"
    debug: bool = False
    environment: str = "production"
    log_level: str = "INFO"

    cognito_user_pool_id: Optional[str] = None
    cognito_client_id: Optional[str] = None
    aws_region: str = "us-east-1"

    cors_allow_origins: list[str] = ["*"]
    rate_limit_enabled: bool = True
    rate_limit_auth: str = "10/minute"

    @property
    def expose_error_details(self) -> bool:
        """Whether unexpected error causes may be returned to callers."""
        return self.environment.lower() != "production"


settings = Settings()

"""
Health check router.

Liveness endpoint for load balancers and probes. The app only starts
with a valid provider configuration, so reaching this route means the
gateway is configured. The provider itself is not called.
"""

from fastapi import APIRouter, Request

from app.interfaces.identity.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns status, version, environment and provider region.",
)
def health_check(request: Request) -> HealthResponse:
    app_settings = request.app.state.settings
    return HealthResponse(
        status="ok",
        version=app_settings.version,
        environment=app_settings.environment,
        region=request.app.state.identity_config.region,
    )

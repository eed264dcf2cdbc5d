"""
Liveness endpoint.
"""

from fastapi import APIRouter

from calendar_parser.api.models import HealthResponse

router = APIRouter()


@router.get(
    "/api/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Returns ok while the process is serving. Does not check the upstream API.",
)
@router.get("/health", response_model=HealthResponse, include_in_schema=False)
async def health_check() -> HealthResponse:
    return HealthResponse(ok=True)

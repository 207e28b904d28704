"""Health endpoint."""

from fastapi import APIRouter

from haier_site import __version__
from haier_site.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic liveness check for container monitoring."""
    return HealthResponse(status="ok", version=__version__)

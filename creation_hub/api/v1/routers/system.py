from datetime import datetime

from fastapi import APIRouter

from ....config import settings
from ....models import HealthStatus

router = APIRouter(prefix="/system", tags=["System"])


@router.get("/health", response_model=HealthStatus)
async def health_check():
    """Health check endpoint."""
    return HealthStatus(
        status="ok",
        service="creation-hub-content",
        version=settings.api_version,
        timestamp=datetime.now(),
    )

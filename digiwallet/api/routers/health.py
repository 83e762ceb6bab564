"""Liveness and readiness probes."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from digiwallet import __version__
from digiwallet.core.container import ApplicationContainer
from digiwallet.interfaces.http.deps import get_container

router = APIRouter()


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "service": "digiwallet", "version": __version__}


@router.get("/ready")
async def readiness_check(container: ApplicationContainer = Depends(get_container)):
    if not await container.database.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}

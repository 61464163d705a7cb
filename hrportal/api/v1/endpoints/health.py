from __future__ import annotations

from fastapi import APIRouter, Depends

from hrportal.core.config import settings
from hrportal.core.dependencies import get_hr_api
from hrportal.services.hr_api import HrApiClient

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(api: HrApiClient = Depends(get_hr_api)):  # noqa: B008
    services: dict[str, str] = {}

    if api.initialized:
        ok = await api.check_connection()
        services["hr_api"] = "ok" if ok else "error"
    else:
        services["hr_api"] = "not_configured"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}

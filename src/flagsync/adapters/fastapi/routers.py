"""FastAPI adapter – health routers."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from flagsync.observability.health import HealthRegistry


def FastAPIHealthRouter(
    registry: HealthRegistry,
    path: str = "/health",
    tags: list[str] | None = None,
) -> APIRouter:
    """Return a liveness + readiness health-check router.

    Liveness is at ``{path}/live`` and always answers 200 while the process is
    up; readiness is at ``{path}/ready`` and answers 503 unless every check in
    *registry* passes.
    """
    router = APIRouter(tags=tags or ["ops"])

    @router.get(f"{path}/live")
    async def liveness() -> dict[str, str]:
        return {"status": "ok"}

    @router.get(f"{path}/ready")
    async def readiness() -> Any:
        report = await registry.run_all()
        return JSONResponse(
            status_code=200 if report.overall else 503,
            content={"status": "ok" if report.overall else "degraded", **report.to_dict()},
        )

    return router


__all__ = ["FastAPIHealthRouter"]

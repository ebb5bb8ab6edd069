"""Greeting and health check endpoints."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from portfolio_api.errors.exceptions import StoreError

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def greeting():
    """Plain-text greeting, doubles as the legacy liveness probe."""
    return "Hello from Portfolio API!"


@router.get("/health/live")
async def liveness():
    """Liveness probe: always returns 200 if the process is running."""
    return {"status": "alive"}


@router.get("/health/ready")
async def readiness(request: Request):
    """Readiness probe: checks that the document store answers a ping."""
    checks: dict[str, str] = {}
    overall_ok = True

    try:
        await request.app.state.project_repo.ping()
        checks["database"] = "ok"
    except StoreError as exc:
        checks["database"] = f"error: {exc.message}"
        overall_ok = False

    status_code = 200 if overall_ok else 503
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "ready" if overall_ok else "not_ready",
            "checks": checks,
        },
    )

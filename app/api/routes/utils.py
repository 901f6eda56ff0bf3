from datetime import datetime, timezone

from fastapi import APIRouter, Request

from app.schemas import HealthOut

router = APIRouter(tags=["utils"])


@router.get("/health", response_model=HealthOut)
async def health(request: Request) -> HealthOut:
    """
    Liveness check. Static payload, no DB I/O, so it answers even when the
    pool is exhausted or the database is down. There is no readiness endpoint.
    """
    settings = request.app.state.settings
    return HealthOut(
        status="ok",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )

"""Health check route."""
import asyncio
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from musicare.config import settings
from musicare.database import async_session
from musicare.schemas.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Report which backend serves requests and whether the database answers."""
    now = datetime.now(timezone.utc)
    if settings.use_mock_store:
        return HealthResponse(
            status="ok", mode="mock", has_database=False, database_connected=False, timestamp=now
        )

    try:
        async with async_session() as db:
            await asyncio.wait_for(db.execute(text("SELECT 1")), timeout=settings.DB_TIMEOUT_SECONDS)
    except Exception as e:
        body = HealthResponse(
            status="error",
            mode="database",
            has_database=bool(settings.DATABASE_URL),
            database_connected=False,
            timestamp=now,
            db_error=str(e) or type(e).__name__,
        )
        return JSONResponse(status_code=500, content=body.model_dump(mode="json", by_alias=True))

    return HealthResponse(
        status="ok", mode="database", has_database=True, database_connected=True, timestamp=now
    )

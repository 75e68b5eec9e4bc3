"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from musicare.config import settings
from musicare.database import dispose_engine, get_engine
from musicare.errors import AppError
from musicare.models import Base
from musicare.services.stores import MockStore

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Pick the backend: a fresh in-memory store, or create tables on the database."""
    if settings.use_mock_store:
        app.state.mock_store = MockStore()
        logger.info("No database configured, serving from the in-memory mock store")
    elif settings.DATABASE_URL:
        try:
            async with get_engine().begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables ready")
        except (SQLAlchemyError, OSError) as e:
            # requests answer 500 until the database is reachable
            logger.error(f"Could not prepare database tables: {e}")
    else:
        logger.error("STORE_MODE=database but DATABASE_URL is missing; data requests will fail")

    yield

    # Cleanup
    await dispose_engine()


app = FastAPI(
    title="Musicare API",
    version="1.0.0",
    description="File board and people CRUD backend.",
    lifespan=lifespan,
)


@app.middleware("http")
async def http_boundary(request: Request, call_next):
    """Answer preflights, catch anything unhandled, and put CORS headers on every response."""
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    else:
        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}")
            body = {"error": "Internal server error"}
            if settings.DEBUG:
                body["details"] = str(e)
            response = JSONResponse(status_code=500, content=body)
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}", exc_info=exc.__cause__)
    body = exc.to_body()
    if settings.DEBUG and exc.__cause__ is not None and "details" not in body:
        body["details"] = str(exc.__cause__)
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return JSONResponse(status_code=400, content={"error": "Invalid request", "details": problems})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    is_api = request.url.path.startswith("/api")
    if exc.status_code == 404 and not is_api and (STATIC_DIR / "index.html").exists():
        return FileResponse(STATIC_DIR / "index.html")

    if exc.status_code == 404:
        message = "API endpoint not found"
    elif exc.status_code == 405:
        message = "Method not allowed"
    else:
        message = str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": message})


# Register routers
from musicare.routes.files import router as files_router
from musicare.routes.people import router as people_router
from musicare.routes.health import router as health_router
app.include_router(files_router)
app.include_router(people_router)
app.include_router(health_router)

# Browser client; must come after the API routers so /api paths match first
if STATIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("musicare.main:app", host="0.0.0.0", port=settings.API_PORT)

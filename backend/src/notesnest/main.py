# Main application entry point
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import auth_router, health_router, notes_router, tenants_router
from .config import get_settings
from .core.exceptions import NotesNestError
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import ErrorResponse
from .database import AsyncSessionLocal, create_tables
from .seed import seed_demo_data

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting NotesNest application",
        extra={"version": settings.app_version, "environment": settings.environment},
    )

    # tests run against their own in-memory database
    if os.getenv("NOTESNEST_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB setup due to NOTESNEST_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

        if settings.seed_demo_data:
            async with AsyncSessionLocal() as session:
                await seed_demo_data(session)

    yield

    logger.info("Shutting down NotesNest application")


app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant notes API with free/pro plans",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["Content-Type", "Authorization"],
)


def _error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    body = ErrorResponse(error=code, message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.exception_handler(NotesNestError)
async def notesnest_error_handler(request: Request, exc: NotesNestError):
    if exc.status_code >= 500:
        logger.error(f"{exc.code}: {exc.message}", exc_info=exc)
        return _error_response(exc.status_code, exc.code, "Server error")
    return _error_response(exc.status_code, exc.code, exc.message, exc.details)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()
    ]
    return _error_response(400, "ValidationError", "Invalid request", errors)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    codes = {401: "Unauthenticated", 403: "Forbidden", 404: "NotFound"}
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return _error_response(exc.status_code, codes.get(exc.status_code, f"HTTP_{exc.status_code}"), message)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled error",
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path},
    )
    return _error_response(500, "InternalError", "Server error")


app.include_router(auth_router)
app.include_router(notes_router, prefix="/api")
app.include_router(tenants_router)
app.include_router(health_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("notesnest.main:app", host=settings.host, port=settings.port, reload=settings.reload)

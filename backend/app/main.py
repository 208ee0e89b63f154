"""
EssenceLuxe - Backend API
Products and orders REST service backed by PostgreSQL
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import orders, products
from app.core.config import Settings, get_settings
from app.core.database import Database
from app.core.errors import AppError, ErrorKind
from app.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _describe_validation_error(errors: list) -> str:
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"Invalid request: {field} {first.get('msg', '')}".strip()


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as {"error": ..., "kind": ...}"""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        details = jsonable_encoder(exc.errors())
        return JSONResponse(
            status_code=400,
            content={
                "error": _describe_validation_error(details),
                "kind": ErrorKind.INVALID_INPUT.value,
                "details": details,
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "kind": ErrorKind.INTERNAL.value},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application

    The Database is created from settings here and opened/closed by the
    lifespan, so building an app never touches the network.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    db = Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db.open()
        try:
            yield
        finally:
            db.close()

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routers
    app.include_router(products.router, prefix="/api/products", tags=["Products"])
    app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])

    @app.get("/")
    def root():
        """Service identity and version"""
        return {"status": settings.API_TITLE, "version": settings.API_VERSION}

    @app.get("/health")
    def health(request: Request):
        """Health check endpoint - tests database connectivity"""
        database: Database = request.app.state.db

        db_status = "connected"
        db_latency_ms = None
        db_error = None
        try:
            db_latency_ms = database.ping()
        except Exception as e:
            logger.warning(f"Health check could not reach the database: {e}")
            db_status = "disconnected"
            db_error = str(e)

        return {
            "status": "healthy" if db_status == "connected" else "degraded",
            "version": settings.API_VERSION,
            "database": {
                "status": db_status,
                "latency_ms": db_latency_ms,
                "error": db_error,
            },
        }

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn"""
    settings = get_settings()
    logger.info(f"Server listening on port {settings.PORT}")
    uvicorn.run(app, host=settings.API_HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()

"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from life_mapper.api.middleware import RequestIDMiddleware, MetricsMiddleware
from life_mapper.api.v1 import advisor, calendar, finance, planning, profile, records, relationship, reports, wellbeing
from life_mapper.domain.exceptions import InvalidRecordError, RecordNotFoundError, StorageError
from life_mapper.infrastructure.database.session import init_db
from life_mapper.infrastructure.observability.logging import setup_logging
from life_mapper.infrastructure.observability.metrics import storage_failures_counter
from life_mapper.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def register_exception_handlers(app: FastAPI) -> None:
    """Translate domain exceptions raised below the routes into HTTP errors"""

    @app.exception_handler(RecordNotFoundError)
    async def not_found_handler(request: Request, exc: RecordNotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(InvalidRecordError)
    async def invalid_record_handler(request: Request, exc: InvalidRecordError):
        logging.warning(f"Invalid records: {exc}", extra={"request_id": getattr(request.state, "request_id", None)})
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        storage_failures_counter.inc()
        logging.error(f"Storage error: {exc}", extra={"request_id": getattr(request.state, "request_id", None)})
        return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Life Mapper",
        description="Personal finance and life tracking service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(profile.router, prefix="/v1", tags=["profile"])
    app.include_router(records.router, prefix="/v1", tags=["records"])
    app.include_router(finance.router, prefix="/v1", tags=["finance"])
    app.include_router(reports.router, prefix="/v1", tags=["reports"])
    app.include_router(relationship.router, prefix="/v1", tags=["relationship"])
    app.include_router(wellbeing.router, prefix="/v1", tags=["wellbeing"])
    app.include_router(planning.router, prefix="/v1", tags=["planning"])
    app.include_router(advisor.router, prefix="/v1", tags=["advisor"])
    app.include_router(calendar.router, prefix="/v1", tags=["calendar"])

    return app


app = create_app()

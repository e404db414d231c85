"""
Main FastAPI application entry point for the RetailMetrics mock API.

This module creates and configures the FastAPI application with its
routes, middleware, exception handlers and the startup generation pass.
"""

import logging
import os
import tempfile
import traceback
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from . import __version__
from .api.models import ErrorResponse, HealthCheckResponse, ValidationErrorResponse
from .api.router import router as data_router
from .config.models import MockDataConfig
from .config.settings import load_config_with_fallback
from .generators import initialize_mock_data, resolve_seed
from .shared.data_store import MockDataStore
from .shared.dependencies import get_config
from .shared.exceptions import RetailMetricsException
from .shared.logging_config import configure_structured_logging
from .shared.metrics import record_request

logger = logging.getLogger(__name__)

APP_NAME = "RetailMetrics Mock API"
APP_VERSION = __version__
APP_DESCRIPTION = """
**RetailMetrics Mock API** serves synthetic FashionForward retail data for
the analytics dashboard.

All data is generated once at startup, held in memory and served read-only.
Filter query parameters are accepted but not applied.
"""

API_PREFIX = "/api"

# Metric labels for the dashboard routes, keyed by endpoint name
ROUTE_LABELS = {route.name: API_PREFIX + route.path for route in data_router.routes}


def _error_content(error_response: ErrorResponse | ValidationErrorResponse) -> dict:
    return error_response.model_dump(mode="json")


def create_app(
    config: MockDataConfig | None = None, data_store: MockDataStore | None = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Configuration; loaded from file/environment when omitted
        data_store: Pre-built data store. When omitted, data is generated
            during application startup.

    Returns:
        Configured FastAPI application
    """
    config = (config or load_config_with_fallback()).with_allowed_origins_from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Generate the dataset before serving and release it on shutdown."""
        configure_structured_logging(level=config.server.log_level)
        logger.info(f"Starting {APP_NAME} v{APP_VERSION}")

        if app.state.data_store is None:
            # Generation failures propagate and abort startup
            app.state.data_store = initialize_mock_data(config)

        logger.info(
            f"Serving {len(app.state.data_store.stores)} stores "
            f"(seed={app.state.data_store.seed})"
        )
        logger.info("Application startup completed")

        yield

        logger.info("Application shutdown completed")

    app = FastAPI(
        title=APP_NAME,
        version=APP_VERSION,
        description=APP_DESCRIPTION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        license_info={
            "name": "MIT License",
            "url": "https://opensource.org/licenses/MIT",
        },
    )
    app.state.config = config
    app.state.data_store = data_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)
    _register_middleware(app)
    _register_core_routes(app)

    app.include_router(data_router, prefix=API_PREFIX, tags=["Dashboard Data"])

    return app


# ================================
# EXCEPTION HANDLERS
# ================================


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent error format."""
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url} failed: {exc.detail}")

        error_response = ErrorResponse(
            error=f"HTTP_{exc.status_code}",
            message=str(exc.detail),
            timestamp=datetime.now(UTC),
        )
        return JSONResponse(
            status_code=exc.status_code, content=_error_content(error_response)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        """Handle request validation errors with detailed field information."""
        logger.warning(f"Validation error for {request.method} {request.url}")

        field_errors = []
        for error in exc.errors():
            field_errors.append(
                {
                    "field": " -> ".join(str(loc) for loc in error["loc"]),
                    "message": error["msg"],
                    "type": error["type"],
                }
            )

        error_response = ValidationErrorResponse(
            error="VALIDATION_ERROR",
            message="Request validation failed",
            field_errors=field_errors,
            timestamp=datetime.now(UTC),
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_content(error_response),
        )

    @app.exception_handler(RetailMetricsException)
    async def retail_metrics_exception_handler(
        request: Request, exc: RetailMetricsException
    ):
        """Handle data store errors raised while serving a request."""
        logger.error(f"{request.method} {request.url} failed: {exc}")

        error_response = ErrorResponse(
            error="SERVICE_UNAVAILABLE",
            message=str(exc),
            details={"exception_type": type(exc).__name__},
            timestamp=datetime.now(UTC),
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=_error_content(error_response),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"Unhandled exception: {exc}")
        logger.error(traceback.format_exc())

        error_response = ErrorResponse(
            error="INTERNAL_SERVER_ERROR",
            message="An unexpected error occurred",
            details={"exception_type": type(exc).__name__},
            timestamp=datetime.now(UTC),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_content(error_response),
        )


# ================================
# MIDDLEWARE
# ================================


def _register_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log and count all requests and responses."""
        start_time = datetime.now(UTC)
        client = request.client.host if request.client else "unknown"

        logger.info(f"{request.method} {request.url} - Client: {client}")

        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            # Unhandled errors are rendered as 500 further out; count them here
            duration = (datetime.now(UTC) - start_time).total_seconds()
            record_request(
                request.method, _endpoint_label(request), status_code, duration
            )
            logger.info(
                f"{request.method} {request.url} - "
                f"Status: {status_code} - "
                f"Duration: {duration:.3f}s"
            )

        return response


def _endpoint_label(request: Request) -> str:
    """Route template of the matched route, including the router prefix."""
    route = request.scope.get("route")
    if route is None:
        return "unmatched"
    return ROUTE_LABELS.get(route.name, route.path)


# ================================
# CORE ROUTES
# ================================


def _register_core_routes(app: FastAPI) -> None:
    @app.get(
        "/api",
        summary="Root endpoint",
        description="Welcome message and basic API information",
    )
    async def root():
        """Root endpoint with welcome message."""
        return {
            "message": f"Welcome to {APP_NAME}",
            "version": APP_VERSION,
            "docs_url": "/docs",
            "health_url": "/health",
            "timestamp": datetime.now(UTC),
        }

    @app.get(
        "/health",
        response_model=HealthCheckResponse,
        summary="Health check",
        description="Health of the configuration and the in-memory data store",
    )
    async def health_check(
        request: Request, config: MockDataConfig = Depends(get_config)
    ):
        """Health check endpoint."""
        checks = {
            "configuration": {
                "status": "healthy",
                "port": config.server.port,
                "store_count": config.generation.store_count,
            }
        }
        overall_status = "healthy"

        data_store = request.app.state.data_store
        if data_store is None:
            checks["data_store"] = {
                "status": "unhealthy",
                "message": "Mock data has not been generated",
            }
            overall_status = "unhealthy"
        else:
            checks["data_store"] = {
                "status": "healthy",
                "seed": data_store.seed,
                "generated_at": data_store.generated_at,
                "record_counts": data_store.record_counts(),
            }

        return HealthCheckResponse(
            status=overall_status,
            timestamp=datetime.now(UTC),
            version=APP_VERSION,
            checks=checks,
        )

    @app.get(
        "/version",
        summary="Application version",
        description="Get current application version",
    )
    async def get_version():
        """Get application version information."""
        return {
            "name": APP_NAME,
            "version": APP_VERSION,
            "timestamp": datetime.now(UTC),
        }

    @app.get(
        "/metrics",
        summary="Prometheus metrics",
        description="Prometheus metrics endpoint for request and generation stats",
        tags=["Monitoring"],
    )
    async def prometheus_metrics():
        """Prometheus metrics in exposition format."""
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


# ================================
# SERVER
# ================================


def _export_config_for_reload(config: MockDataConfig) -> Path:
    """
    Hand the resolved configuration to reload workers.

    Workers build the app through the ``create_app`` factory with no
    arguments, so CLI overrides only reach them through
    RETAIL_METRICS_CONFIG_FILE.
    """
    fd, name = tempfile.mkstemp(prefix="retail-metrics-", suffix=".json")
    os.close(fd)
    config_path = Path(name)
    config.to_file(config_path)
    os.environ["RETAIL_METRICS_CONFIG_FILE"] = str(config_path)
    logger.info(f"Reload workers will read configuration from {config_path}")
    return config_path


def run_server(config: MockDataConfig | None = None) -> None:
    """Run the API server with uvicorn."""
    # Import here to avoid hard dependency during module import in test envs
    import uvicorn

    config = config or load_config_with_fallback()

    if config.server.reload:
        if config.generation.seed is None:
            # Pin the seed so every reload serves the same dataset
            generation = config.generation.model_copy(
                update={"seed": resolve_seed(None)}
            )
            config = config.model_copy(update={"generation": generation})

        config_path = _export_config_for_reload(config)
        try:
            uvicorn.run(
                "retail_metrics.main:create_app",
                factory=True,
                host=config.server.host,
                port=config.server.port,
                reload=True,
                log_level=config.server.log_level.lower(),
            )
        finally:
            config_path.unlink(missing_ok=True)
        return

    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level.lower(),
    )


if __name__ == "__main__":
    run_server()

"""
Employee Directory — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() assembles middleware, exception handlers and routers;
       the module-level `app` is what uvicorn serves
       (uvicorn employee_api.main:app).

Lifecycle:
    Startup:
    1. Configure logging
    2. Create missing tables (embedded database, db_create_tables=true)

    Shutdown:
    1. Dispose database engine (close all pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from employee_api import __version__
from employee_api.config import settings
from employee_api.database import create_tables, dispose_engine
from employee_api.exceptions import (
    DuplicateEmployeeError,
    EmployeeDirectoryError,
    NotFoundError,
)
from employee_api.middleware.logging import RequestLoggingMiddleware
from employee_api.middleware.request_id import RequestIDMiddleware, request_id_var
from employee_api.routes import employees, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure root logging once for the whole process.

    Format: 2024-01-15T12:00:00 [INFO] employee_api.access: GET /api/employees 200 ...
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Employee Directory %s starting up...", __version__)

    if settings.db_create_tables:
        await create_tables()
        logger.info("Database schema ready")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Employee Directory shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to HTTP responses.

    Handler table:
        NotFoundError           → 404 not_found
        DuplicateEmployeeError  → 409 duplicate_employee
        EmployeeDirectoryError  → 500 server_error
        SQLAlchemyError         → 500 server_error (details logged, never returned)

    Anything else is caught by RequestIDMiddleware → 500 internal_server_error,
    so the fallback body still carries the request id.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(DuplicateEmployeeError)
    async def handle_duplicate(request: Request, exc: DuplicateEmployeeError):
        rid = request_id_var.get("")
        logger.warning("[%s] Duplicate employee rejected: %s", rid, exc.email)
        return JSONResponse(
            status_code=409,
            content={
                "error": "duplicate_employee",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(EmployeeDirectoryError)
    async def handle_app_error(request: Request, exc: EmployeeDirectoryError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError):
        """Store failure passed up unchanged by the service; the SQL stays in the log."""
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s", rid, str(exc), exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Build a fully configured FastAPI instance.

    Tests call this for a fresh app per fixture so dependency_overrides never
    leak between tests.
    """
    app = FastAPI(
        title="Employee Directory API",
        description="Create and look up employee records.",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(employees.router)
    app.include_router(health.router)

    return app


app = create_app()

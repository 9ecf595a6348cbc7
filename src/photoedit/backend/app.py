"""FastAPI application factory and configuration"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .database import create_engine, create_session_factory, create_db_and_tables
from .logging import setup_logging
from .exception import PhotoEditorException
from .schema.response import ErrorResponse
from .api import rpc_router, system_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings, configure_logging: bool = True) -> FastAPI:
    """Create and configure FastAPI application instance

    This is the application factory function that initializes logging,
    creates the FastAPI app, configures the database and middleware,
    registers exception handlers, and includes routers.

    Args:
        settings: Loaded configuration
        configure_logging: Install file/console log handlers under the
            instance directory

    Returns:
        Configured FastAPI application instance
    """
    if configure_logging:
        setup_logging(settings.instance_path, debug=settings.debug)

    # ==================== Database Configuration ====================

    engine = create_engine(settings.resolved_database_url, echo=settings.debug)
    async_session_factory = create_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create tables on startup, dispose the engine on shutdown"""
        await create_db_and_tables(engine)
        logger.info(f"{settings.app_name} ready")
        yield
        await engine.dispose()
        logger.info("Database engine disposed")

    app = FastAPI(
        title=settings.app_name,
        description="Browser photo editing backed by AI-assisted operations",
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Store in app state for dependency injection
    app.state.engine = engine
    app.state.async_session_factory = async_session_factory
    app.state.settings = settings

    # ==================== CORS Configuration ====================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # ==================== Exception Handlers ====================

    @app.exception_handler(PhotoEditorException)
    async def photoedit_exception_handler(request: Request, exc: PhotoEditorException) -> JSONResponse:
        """Handle all business exceptions

        Returns:
            JSONResponse with ErrorResponse format (HTTP 200, success=false)
        """
        error = {"code": exc.code}
        resource_id = getattr(exc, "resource_id", None)
        if resource_id is not None:
            error["resource_id"] = resource_id

        return JSONResponse(
            status_code=200,  # Business errors return 200 with success=false
            content=ErrorResponse(message=exc.message, error=error).model_dump()
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle Pydantic validation errors

        Catches FastAPI's automatic request validation (out-of-range
        parameters, missing fields, type mismatches).
        """
        return JSONResponse(
            status_code=200,  # Validation errors also return 200 with success=false
            content=ErrorResponse(
                message="Invalid input format",
                error={
                    "code": "VALIDATION_ERROR",
                    "details": jsonable_encoder(exc.errors())
                }
            ).model_dump()
        )

    # ==================== Router Registration ====================

    app.include_router(rpc_router, prefix="/api")
    app.include_router(system_router, prefix="/api")

    return app

"""
FastAPI application initialization for the Meeting Join Bot.
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.config import Settings
from app.core.exceptions import JoinBotException
from app.core.logging import get_logger, setup_logging
from app.api.v1.router import api_router
from app.domain.services import MeetingJoinService

logger = get_logger("main")


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": message}``."""

    @app.exception_handler(JoinBotException)
    async def join_bot_exception_handler(request: Request, exc: JoinBotException) -> JSONResponse:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(f"Malformed request to {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.url.path}")
        return JSONResponse(status_code=500, content={"error": str(exc)})


def create_app(
    settings: Optional[Settings] = None,
    join_service: Optional[MeetingJoinService] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration; read from the environment when omitted
        join_service: Service override, mainly for tests

    Returns:
        Configured FastAPI application
    """
    settings = settings or Settings()
    setup_logging(settings.log_level, enable_file_logging=settings.log_to_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        description="Joins video meetings with a headless browser on request",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        debug=settings.debug,
    )

    app.state.settings = settings
    app.state.join_service = join_service or MeetingJoinService(settings)

    register_exception_handlers(app)
    app.include_router(api_router)

    logger.info(f"{settings.project_name} v{settings.version} ready")
    return app

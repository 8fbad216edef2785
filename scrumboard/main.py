"""Application factory and entry point for the SCRUM board API."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from scrumboard.api.v1 import boards, health, tasks
from scrumboard.config import Settings, settings as default_settings
from scrumboard.database import build_engine, build_session_factory, init_schema
from scrumboard.exceptions import ImportValidationError, ScrumBoardError, StorageError
from scrumboard.logging_config import configure_logging
from scrumboard.models import Board
from scrumboard.services.boards import ensure_default_board

logger = logging.getLogger(__name__)


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ScrumBoardError)
    async def scrumboard_error_handler(request: Request, exc: ScrumBoardError):
        if isinstance(exc, StorageError):
            logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc.message)
        body = {"detail": exc.message}
        if isinstance(exc, ImportValidationError):
            body["fields"] = exc.fields
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": StorageError().message},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Something went wrong!"},
        )


def create_app(
    app_settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
    seed_default_board: bool = True,
) -> FastAPI:
    """Build the API around an explicitly owned database engine.

    The engine is created here (or injected by the caller), the schema and
    default board are set up at startup, and the engine is disposed at shutdown.
    """
    app_settings = app_settings or default_settings
    engine = engine or build_engine(app_settings.database_url)
    session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s %s (%s)", app_settings.APP_NAME, app_settings.APP_VERSION, app_settings.ENVIRONMENT)
        logger.info("Database location: %s", engine.url.render_as_string(hide_password=True))
        init_schema(engine)
        with session_factory() as db:
            if seed_default_board:
                ensure_default_board(db)
            logger.info("Database ready. Found %d boards", db.query(Board).count())
        yield
        engine.dispose()
        logger.info("Database connection closed")

    app = FastAPI(title=app_settings.APP_NAME, version=app_settings.APP_VERSION, lifespan=lifespan)
    app.state.settings = app_settings
    app.state.engine = engine
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    prefix = app_settings.API_PREFIX
    app.include_router(health.router, prefix=prefix, tags=["health"])
    app.include_router(boards.router, prefix=f"{prefix}/boards", tags=["boards"])
    app.include_router(tasks.router, prefix=f"{prefix}/tasks", tags=["tasks"])
    return app


def run() -> None:
    configure_logging(default_settings)
    uvicorn.run(
        create_app(default_settings),
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()

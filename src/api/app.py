from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.adapter.database import Database
from src.adapter.services.session_toucher import BackgroundSessionToucher
from .error import ClientError, ServerError, normalize_error, status_code_for
import logging

logger = logging.getLogger(__name__)


def _render(exc: Exception) -> JSONResponse:
    error = normalize_error(exc)
    return JSONResponse(status_code=status_code_for(exc), content=error.to_dict())


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.base_error.to_dict()}")
    return _render(exc)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.kind}: {exc.base_error.message}")
    return _render(exc)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    logger.warning(f"Request validation failed on {request.url.path}: {exc.errors()}")
    return _render(exc)


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    return _render(exc)


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _render(exc)


def create_app(ApplicationConfig) -> FastAPI:
    ApplicationConfig.validate()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(ApplicationConfig.database_url(), echo=ApplicationConfig.DB_ECHO)
        await database.ensure_indexes()
        app.state.database = database
        app.state.session_toucher = BackgroundSessionToucher(database.session_factory)
        logger.info(f"Serving with database {ApplicationConfig.DB_NAME}")
        try:
            yield
        finally:
            await app.state.session_toucher.drain()
            await database.dispose()

    app = FastAPI(title="Content API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["*"],
    )

    from src.api.routes import admin_auth, entities, health_check, pages, places

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(admin_auth.router, tags=["Admin"])
    app.include_router(pages.router, tags=["Pages"])
    app.include_router(entities.router, tags=["Entities"])
    app.include_router(places.router, tags=["Places"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app

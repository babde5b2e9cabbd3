import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from sup_api.core.config import get_settings
from sup_api.core.errors import ApiError, InternalError
from sup_api.core.logging_config import setup_logging
from sup_api.db.create_tables import create_all
from sup_api.routers import accounts as accounts_router
from sup_api.routers import messages as messages_router

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers for a JSON-only API."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("Content-Security-Policy", "default-src 'none'; frame-ancestors 'none'")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


async def _api_error_handler(request: Request, exc: ApiError):
    headers = {"WWW-Authenticate": "Basic"} if exc.status_code == 401 else None
    return JSONResponse({"message": exc.message}, status_code=exc.status_code, headers=headers)


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    headers = dict(exc.headers or {})
    if exc.status_code == 401:
        headers["WWW-Authenticate"] = "Basic"
    return JSONResponse({"message": exc.detail}, status_code=exc.status_code, headers=headers or None)


async def _store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    error = InternalError()
    return JSONResponse({"message": error.message}, status_code=error.status_code)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    create_all()
    yield


def create_app() -> FastAPI:
    """Build the app; compatible with uvicorn/gunicorn factories."""
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="sup API", lifespan=_lifespan)
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(SQLAlchemyError, _store_error_handler)

    app.include_router(accounts_router.router)
    app.include_router(messages_router.router)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()

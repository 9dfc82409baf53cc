"""Application factory: builds the FastAPI app, its store, middleware and error handlers."""

import logging
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from app.api import router as api_router
from app.core.config import Settings, get_settings
from app.core.database import build_engine, build_session_factory, init_store
from app.core.errors import register_exception_handlers
from app.core.headers import DOCS_URL, REDOC_URL, apply_security_headers

logger = logging.getLogger(__name__)


async def security_headers_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    response = await call_next(request)
    return apply_security_headers(response, request.url.path)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application from an explicit Settings instance.

    Creates the store (schema plus seed users) once; every request then reads
    settings and the session factory from app.state.
    """
    settings = settings or get_settings()
    is_dev = settings.APP_ENV == "dev"

    engine = build_engine(settings)
    session_factory = build_session_factory(engine)
    init_store(engine, session_factory, settings)

    app = FastAPI(
        title="Hardened Users API",
        version="0.1.0",
        docs_url=DOCS_URL if is_dev else None,
        redoc_url=REDOC_URL if is_dev else None,
        openapi_url="/openapi.json" if is_dev else None,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if is_dev else [],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Authorization", "Content-Type"],
    )
    app.middleware("http")(security_headers_middleware)
    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Hardened Users API"}

    if settings.uses_placeholder_token:
        logger.warning("ADMIN_TOKEN is not set; using the placeholder value. Set ADMIN_TOKEN before deploying.")

    return app


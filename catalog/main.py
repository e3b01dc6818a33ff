"""ASGI entry point: ``uvicorn catalog.main:app``.

create_app() only wires things together: lifespan (cache, invalidator,
engine), exception handlers, middleware and the /api/v1 router. Settings are
read inside create_app() so tests can set env before the first call.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.v1 import api_router
from catalog.core.config import get_settings
from catalog.core.exception_handlers import register_exception_handlers
from catalog.core.lifespan import create_lifespan
from catalog.middleware import RequestIDMiddleware, TimeoutMiddleware

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """Build the catalog application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    register_exception_handlers(app)

    # Last added runs outermost: timeout wraps request id wraps CORS.
    origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[settings.request_id_header],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    app.include_router(api_router, prefix=API_PREFIX)
    return app


app = create_app()

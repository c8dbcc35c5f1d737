"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See task_api.core.lifespan and
task_api.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from task_api.api.v1 import api_router
from task_api.core.config import get_settings
from task_api.core.exception_handlers import register_exception_handlers
from task_api.core.lifespan import create_lifespan
from task_api.middleware import RequestIDMiddleware
from task_api.shared.telemetry.telemetry import configure_telemetry


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    # Middleware: last added = outermost. CORS sits inside the request ID wrapper.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["*"],
        max_age=settings.cors_max_age,
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix=settings.api_prefix)

    # Instrumentation adds middleware, so it must happen before the app starts.
    telemetry = configure_telemetry(settings)
    if telemetry is not None:
        telemetry.instrument_fastapi(app)

    return app


app = create_app()

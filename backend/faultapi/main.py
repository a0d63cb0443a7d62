"""Fault API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly: health first, then one router per resource
    - Global error handlers map EmulatorError → structured JSON responses
    - One FaultInjector per app, shared by every resource service
    - Injector and services live on app.state (no module-level mutable state)

Design Decisions:
    - create_app() factory so tests can build apps with other fault sets;
      the module-level `app` is what uvicorn serves
    - Services built in the factory, not the lifespan: they exist even when the
      ASGI server (or test transport) never runs startup events
    - Lifespan only configures logging
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from faultapi.api.error_handlers import register_error_handlers
from faultapi.api.routes import health
from faultapi.api.routes.resources import build_resource_router
from faultapi.config import Settings, get_settings
from faultapi.core.fault_injector import FaultInjector
from faultapi.infrastructure.observability import setup_logging
from faultapi.schemas.resource import ResourceCatalog, load_catalog
from faultapi.services.resource_service import build_services

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, catalog: ResourceCatalog | None = None,
) -> FastAPI:
    """Build the API for the given settings and resource catalog."""
    settings = settings or get_settings()
    catalog = catalog or load_catalog(settings.resources_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            "Fault API started",
            extra={"issue": ",".join(sorted(
                i.value for i in app.state.injector.enabled_issues
            ))},
        )
        yield
        logger.info("Fault API shutting down")

    app = FastAPI(
        title="Fault API", version=health.SERVICE_VERSION, lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    injector = FaultInjector(settings.enabled_issues)
    services = build_services(catalog, injector)
    app.state.injector = injector
    app.state.services = services

    app.include_router(health.router)
    for service in services.values():
        app.include_router(build_resource_router(service))

    register_error_handlers(app)
    return app


app = create_app()

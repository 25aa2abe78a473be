"""FastAPI application — main entry point."""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from barberhub.application.services.dashboard_service import get_current_date
from barberhub.config import get_settings
from barberhub.core.exceptions import AppError, global_exception_handler
from barberhub.core.logging import configure_logging
from barberhub.core.middleware import setup_middleware
from barberhub.infrastructure.store import BarbershopStore, build_store

# Import routers
from barberhub.interfaces.api.appointments import router as appointments_router
from barberhub.interfaces.api.barbers import router as barbers_router
from barberhub.interfaces.api.clients import router as clients_router
from barberhub.interfaces.api.dashboard import router as dashboard_router
from barberhub.interfaces.api.products import router as products_router
from barberhub.interfaces.api.sales import router as sales_router
from barberhub.interfaces.api.services import router as services_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info(
        "Starting BarberHub...",
        env=settings.ENVIRONMENT,
        **app.state.store.counts(),
    )
    yield
    logger.info("BarberHub stopped")


def create_app(store: Optional[BarbershopStore] = None) -> FastAPI:
    """Build the application around ``store``.

    Without a store, a new one is created and seeded with the demo data
    when ``SEED_DEMO_DATA`` is on.
    """
    app = FastAPI(
        title="BarberHub — Gestão de Barbearia",
        description="API Backend — barbeiros, serviços, clientes, agendamentos, produtos e vendas",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )

    if store is None:
        store = build_store(seed=settings.SEED_DEMO_DATA, today=get_current_date())
    app.state.store = store

    # Correlation ID and request logging
    setup_middleware(app)

    # AppError is routed through the exception middleware; the bare
    # Exception handler only covers what escapes everything else.
    app.add_exception_handler(AppError, global_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(dashboard_router)
    app.include_router(barbers_router)
    app.include_router(services_router)
    app.include_router(clients_router)
    app.include_router(appointments_router)
    app.include_router(products_router)
    app.include_router(sales_router)

    @app.get("/")
    def root():
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()

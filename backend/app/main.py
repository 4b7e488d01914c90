"""Invoice Dashboard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DashboardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store and invalidator built on startup from explicit settings, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event
    - Missing STORE_URL / STORE_KEY fail here, before the app serves anything
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import customers, dashboard, health, invoices
from app.config import get_settings
from app.infrastructure.database import create_session_manager
from app.infrastructure.invalidation import LoggingInvalidator
from app.infrastructure.invoice_store import SqlInvoiceStore
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = create_session_manager(
        settings.store_dsn,
        pool_size=settings.store_pool_size,
        max_overflow=settings.store_max_overflow,
    )
    app.state.store = SqlInvoiceStore(db)
    app.state.invalidator = LoggingInvalidator()
    logger.info("Invoice Dashboard API started")
    yield
    await db.dispose()
    logger.info("Invoice Dashboard API shutting down")


app = FastAPI(
    title="Invoice Dashboard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(dashboard.router)
app.include_router(invoices.router)
app.include_router(customers.router)

register_error_handlers(app)

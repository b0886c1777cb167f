"""Ignite API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map IgniteError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Ledger built, restored and seeded on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Restore before seed: a valid snapshot wins, demo fixtures only fill an empty ledger
    - Database is optional: snapshot_enabled=false runs purely in memory
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import ignite.infrastructure.database as db_module
from ignite.api.dependencies import get_snapshot_repository
from ignite.api.error_handlers import register_error_handlers
from ignite.api.routes import activity, events, health, participants, share, sparks
from ignite.config import get_settings
from ignite.core.errors import DatabaseError
from ignite.infrastructure.database import init_db
from ignite.infrastructure.observability import setup_logging
from ignite.services.demo_seed import seed_demo_data
from ignite.services.ignite_ledger import init_ledger
from ignite.services.ledger_persistence import persist_snapshot, restore_latest

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    ledger = init_ledger(settings.to_policy())

    if settings.snapshot_enabled:
        manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        try:
            await manager.create_tables()
        except DatabaseError as e:
            logger.error(f"Snapshot table setup failed: {e.message}")
    repository = get_snapshot_repository(settings)
    await restore_latest(ledger, repository)

    if settings.seed_demo_data and seed_demo_data(ledger):
        await persist_snapshot(ledger, repository)

    logger.info("Ignite API started")
    yield
    logger.info("Ignite API shutting down")
    await share.close_sms_client()
    if db_module.db_manager is not None:
        await db_module.db_manager.dispose()


app = FastAPI(title="Ignite API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(participants.router)
app.include_router(sparks.router)
app.include_router(activity.router)
app.include_router(events.router)
app.include_router(share.router)

"""Exercise Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExerciseTrackerError → {"error": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module thin
    - Static assets mounted AFTER API routes so /api/* takes precedence
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from exercise_tracker import __version__
from exercise_tracker.api.error_handlers import register_error_handlers
from exercise_tracker.api.routes import exercises, health, index, users
from exercise_tracker.config import get_settings
from exercise_tracker.infrastructure.database import close_db, init_db
from exercise_tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_all()
    logger.info("Exercise Tracker API started")
    yield
    await close_db()
    logger.info("Exercise Tracker API shut down")


app = FastAPI(
    title="Exercise Tracker API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(index.router)
app.include_router(health.router)
app.include_router(users.router)
app.include_router(exercises.router)

app.mount("/public", StaticFiles(directory=index.PUBLIC_DIR), name="public")


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured host/port."""
    import uvicorn

    uvicorn.run(
        "exercise_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )

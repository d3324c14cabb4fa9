"""FastAPI application entry point."""

import asyncio
import logging
from contextlib import asynccontextmanager

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from showscout.api.routes import health, shows
from showscout.config import settings
from showscout.services.pipeline import ShowPipeline
from showscout.tasks.refresh_job import run_refresh

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: one pipeline (and cache) per process
    pipeline = ShowPipeline()
    app.state.pipeline = pipeline

    scheduler = AsyncIOScheduler()
    scheduler.add_job(
        run_refresh,
        trigger=IntervalTrigger(minutes=settings.refresh_interval_minutes),
        args=[pipeline],
        id="show_refresh",
        name="Refresh West End show list",
        replace_existing=True,
    )
    scheduler.start()
    logger.info(
        f"Scheduler started: show refresh every {settings.refresh_interval_minutes} minutes"
    )

    # Warm the cache in the background
    asyncio.create_task(run_refresh(pipeline))
    logger.info("Startup refresh triggered in background")

    yield

    # Shutdown: stop the scheduler gracefully
    scheduler.shutdown(wait=False)
    logger.info("Scheduler shut down")


# Create FastAPI app
app = FastAPI(
    title="ShowScout API",
    description="Current West End shows from London Theatre and Wikipedia",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(shows.router, prefix="/api", tags=["shows"])

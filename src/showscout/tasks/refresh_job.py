"""Scheduled job that rebuilds the cached show list."""

import logging

from showscout.services.pipeline import ShowPipeline

logger = logging.getLogger(__name__)


async def run_refresh(pipeline: ShowPipeline) -> None:
    """Re-scrape both sources and replace the cached result.

    Called from the scheduler and at startup, outside any request context.
    """
    logger.info("Starting scheduled show refresh")

    try:
        result = await pipeline.refresh()
    except Exception as e:
        logger.error(f"Scheduled show refresh failed: {e}", exc_info=True)
        return

    if result.is_empty:
        logger.warning("Scheduled show refresh found no shows")
        return

    logger.info(f"Scheduled show refresh complete: {len(result.shows)} shows")

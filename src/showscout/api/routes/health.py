"""Health check endpoint."""

from fastapi import APIRouter, Depends

from showscout.dependencies import get_pipeline
from showscout.services.pipeline import CACHE_KEY, ShowPipeline

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check(pipeline: ShowPipeline = Depends(get_pipeline)) -> dict[str, str]:
    """
    Health check endpoint.

    Returns:
        Status message plus whether the show list is currently cached
    """
    cache_state = "warm" if CACHE_KEY in pipeline.cache else "cold"
    return {"status": "ok", "cache": cache_state}

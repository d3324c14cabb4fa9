"""Shared FastAPI dependencies."""

from fastapi import Request

from showscout.services.pipeline import ShowPipeline


def get_pipeline(request: Request) -> ShowPipeline:
    """
    Dependency for FastAPI to provide the application's show pipeline.

    The pipeline (and the cache it owns) is created once in the app lifespan
    and stored on app.state; one is created lazily if the lifespan did not run.
    """
    pipeline = getattr(request.app.state, "pipeline", None)
    if pipeline is None:
        pipeline = ShowPipeline()
        request.app.state.pipeline = pipeline
    return pipeline

"""
ArticleDesk Backend — Health Check Route
==========================================

What:  Health check endpoint for monitoring and container probes.
How:   Reports the app version, the number of stored articles, and uptime.
       The store is in-process, so reaching it means the service is healthy.
"""

import logging
import time

from fastapi import APIRouter, Depends

from app import __version__
from app.schemas.article import HealthResponse
from app.store import ArticleStore, get_article_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    store: ArticleStore = Depends(get_article_store),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        articles=await store.count(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )

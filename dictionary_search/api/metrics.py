"""Metrics and monitoring API endpoints."""

import psutil

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])

# Import the global search engine instance
from ..engine_instance import search_engine


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get query metrics",
    description="Get query counters and process memory usage for the search engine"
)
async def get_metrics() -> MetricsResponse:
    """
    Get query metrics for the search engine.
    
    Counters cover every search since startup; memory is the resident
    set size of this process.
    """
    try:
        stats = search_engine.get_stats()
        
        memory_usage_mb = psutil.Process().memory_info().rss / (1024 * 1024)
        
        return MetricsResponse(
            total_queries=stats["total_queries"],
            source_matches=stats["source_matches"],
            translation_matches=stats["translation_matches"],
            no_matches=stats["no_matches"],
            average_response_time_ms=stats["average_execution_time_ms"],
            cache_hit_rate=stats["cache_hit_rate"],
            corpus_size=stats["repository_stats"]["total_words"],
            memory_usage_mb=memory_usage_mb
        )
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get metrics: {str(e)}"
        )


@router.post(
    "/metrics/reset",
    summary="Reset metrics",
    description="Reset query counters and drop cached result pages"
)
async def reset_metrics() -> JSONResponse:
    """Reset query counters and the result cache."""
    search_engine.reset_stats()
    
    return JSONResponse(
        status_code=200,
        content={"message": "Metrics reset successfully"}
    )

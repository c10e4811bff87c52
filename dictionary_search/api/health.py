"""Health check API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..models.response import HealthResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global instances
from ..engine_instance import search_engine, word_repository

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the dictionary search service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the dictionary search service.
    
    The word store is healthy once a corpus is loaded; the engine is
    probed by projecting one stored word.
    """
    try:
        uptime = time.time() - app_start_time
        
        dependencies = {
            "word_repository": "healthy",
            "search_engine": "healthy"
        }
        
        if word_repository.get_stats()["last_updated"] is None:
            dependencies["word_repository"] = "unhealthy"
            dependencies["search_engine"] = "degraded"
        else:
            try:
                words = await word_repository.fetch_all()
                search_engine.projector.project(words[:1])
            except Exception:
                dependencies["search_engine"] = "unhealthy"
        
        if all(status == "healthy" for status in dependencies.values()):
            status = "healthy"
        elif any(status == "unhealthy" for status in dependencies.values()):
            status = "unhealthy"
        else:
            status = "degraded"
        
        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            dependencies=dependencies
        )
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check() -> JSONResponse:
    """Ready once the word corpus has been loaded."""
    repository_stats = word_repository.get_stats()

    if repository_stats["last_updated"] is None:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": "Word corpus has not been loaded",
                "timestamp": datetime.utcnow().isoformat()
            }
        )

    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "timestamp": datetime.utcnow().isoformat(),
            "repository_stats": repository_stats
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Check if the service is alive and responding."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )

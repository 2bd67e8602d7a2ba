"""
Health Check Router

Provides Kubernetes-compatible health check endpoints:
- /health: Simple health for load balancers
- /health/live: Liveness probe (process alive)
- /health/ready: Readiness probe (worker running, store usable)
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from hostcrawl.workers.manager import worker_manager

# Router for /api/v1 prefix
router = APIRouter()

# Router for root-level health endpoints
root_router = APIRouter()


# --- Root-level endpoints (Kubernetes probes) ---


@root_router.get("/health")
async def health():
    """Simple health check for load balancers."""
    return {"status": "ok"}


@root_router.get("/health/live")
async def liveness():
    """Kubernetes liveness probe - is the process running?"""
    return {"status": "ok"}


@root_router.get("/health/ready")
async def readiness():
    """Kubernetes readiness probe - can crawl requests be served?"""
    checks = {
        "worker": "ok" if worker_manager.is_running else "unhealthy",
        "url_store": "unhealthy" if worker_manager.url_store.is_poisoned else "ok",
    }

    all_healthy = all(v == "ok" for v in checks.values())
    status = "ok" if all_healthy else "unhealthy"

    return JSONResponse(
        status_code=200 if all_healthy else 503,
        content={"status": status, "checks": checks},
    )


# --- /api/v1 endpoints ---


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}

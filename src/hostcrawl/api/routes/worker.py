"""
Worker Control API Router

Handles worker start/stop/status endpoints.
"""

from fastapi import APIRouter, HTTPException
from hostcrawl.models.worker import (
    WorkerStatus,
    WorkerStopRequest,
    WorkerStartResponse,
    WorkerStopResponse,
)
from hostcrawl.workers.manager import worker_manager

router = APIRouter()


@router.post("/start", response_model=WorkerStartResponse)
async def start_worker():
    """Start the background intake worker"""
    if worker_manager.is_running:
        raise HTTPException(status_code=400, detail="Worker is already running")

    try:
        await worker_manager.start()
        return WorkerStartResponse(status="started", message="Intake worker started")
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to start worker: {str(e)}")


@router.post("/stop", response_model=WorkerStopResponse)
async def stop_worker(request: WorkerStopRequest = WorkerStopRequest()):
    """Stop the background intake worker"""
    if not worker_manager.is_running:
        raise HTTPException(status_code=400, detail="Worker is not running")

    try:
        await worker_manager.stop(graceful=request.graceful)
        message = f"Worker stopped {'gracefully' if request.graceful else 'forcefully'}"
        return WorkerStopResponse(status="stopped", message=message)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to stop worker: {str(e)}")


@router.get("/status", response_model=WorkerStatus)
async def get_worker_status():
    """Get current worker status"""
    return await worker_manager.get_status()

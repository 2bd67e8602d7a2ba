"""
Worker Control Models

Pydantic models for worker management endpoints.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Literal


class WorkerStopRequest(BaseModel):
    """Request to stop worker"""

    graceful: bool = Field(
        default=True,
        description="If True, wait for the worker task to finish cancelling",
    )


class WorkerStartResponse(BaseModel):
    """Response after starting worker"""

    status: str = Field(default="started")
    message: str = Field(default="Intake worker started")


class WorkerStopResponse(BaseModel):
    """Response after stopping worker"""

    status: str = Field(default="stopped")
    message: str


class WorkerStatus(BaseModel):
    """Worker status information"""

    status: Literal["running", "stopped"] = Field(
        ..., description="Current worker status"
    )
    started_at: datetime | None = Field(
        default=None, description="Timestamp when worker was started (None if stopped)"
    )
    uptime_seconds: float | None = Field(
        default=None, ge=0, description="Worker uptime in seconds (None if stopped)"
    )
    current_url: str | None = Field(
        default=None, description="Seed URL of the crawl in progress"
    )
    pending_requests: int = Field(
        default=0, ge=0, description="Crawl requests waiting in the intake queue"
    )
    requests_processed: int = Field(
        default=0, ge=0, description="Crawl requests completed since process start"
    )

"""Pydantic models for API responses."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel


class ClockStatus(BaseModel):
    """State of the open clock view."""

    view_id: str
    sweep_seconds: bool
    tick_interval_seconds: float
    absolute: Dict[str, float]  # hand -> unbounded rotation
    target: Dict[str, float]  # hand -> angle in [0, 360)


class OpenResponse(BaseModel):
    """Response after opening a clock view."""

    status: str = "ok"
    view_id: str
    display_text: str


class JobsResponse(BaseModel):
    """Response listing scheduled jobs."""

    jobs: Dict[str, str]  # job_name -> next_run_time


class SuccessResponse(BaseModel):
    """Generic success response."""

    status: str = "ok"
    message: Optional[str] = None

"""FastAPI routes for the analogue clock."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

from fastapi import APIRouter, HTTPException, Response

from ..core.config import get_config
from ..core.logging import get_logger
from ..display.raster import render_png
from ..views.clock_view import CLOCK_VIEW_TYPE, AnalogueClockView
from .models import ClockStatus, JobsResponse, OpenResponse, SuccessResponse

if TYPE_CHECKING:
    from ..core.scheduler import ClockScheduler
    from ..views.manager import ViewManager

logger = get_logger("api.routes")

router = APIRouter(prefix="/api")

# These will be set during app startup
_view_manager: "ViewManager" = None
_scheduler: "ClockScheduler" = None
_reload_callback: Optional[Callable[[], None]] = None


def init_routes(
    view_manager: "ViewManager",
    scheduler: "ClockScheduler",
    reload_callback: Optional[Callable[[], None]] = None,
) -> None:
    """Initialize route dependencies."""
    global _view_manager, _scheduler, _reload_callback
    _view_manager = view_manager
    _scheduler = scheduler
    _reload_callback = reload_callback


def current_clock_view() -> Optional[AnalogueClockView]:
    """The most recently opened clock view, if any."""
    views = _view_manager.get_views_of_type(CLOCK_VIEW_TYPE)
    return views[-1] if views else None


def _require_clock_view() -> AnalogueClockView:
    view = current_clock_view()
    if view is None or not view.attached:
        raise HTTPException(404, "No analogue clock view is open")
    return view


@router.get("/clock", response_model=ClockStatus)
async def get_clock():
    """Current absolute and target hand angles."""
    view = _require_clock_view()
    target = view.last_target
    return ClockStatus(
        view_id=view.view_id,
        sweep_seconds=view.clock.sweep_seconds,
        tick_interval_seconds=view.clock.tick_interval_seconds,
        absolute={hand.value: deg for hand, deg in view.absolute_angles().items()},
        target={hand.value: deg for hand, deg in target.as_dict().items()}
        if target
        else {},
    )


@router.get("/clock/face.svg")
async def get_face_svg():
    """Current face as SVG markup."""
    view = _require_clock_view()
    return Response(content=view.render_svg(), media_type="image/svg+xml")


@router.get("/clock/face.png")
async def get_face_png():
    """Raster snapshot of the current face."""
    view = _require_clock_view()
    png = render_png(view.absolute_angles(), view.clock, view.face)
    return Response(content=png, media_type="image/png")


@router.post("/clock/open", response_model=OpenResponse)
async def open_clock():
    """Open the clock view, replacing any open one."""
    view = _view_manager.activate_view(CLOCK_VIEW_TYPE)
    logger.info(f"Clock view opened via API: {view.view_id}")
    return OpenResponse(view_id=view.view_id, display_text=view.display_text)


@router.post("/clock/close", response_model=SuccessResponse)
async def close_clock():
    """Close every open clock view."""
    closed = _view_manager.detach_views_of_type(CLOCK_VIEW_TYPE)
    return SuccessResponse(status="ok", message=f"Closed {closed} view(s)")


@router.get("/jobs", response_model=JobsResponse)
async def list_jobs():
    """List all scheduled jobs."""
    return JobsResponse(jobs=_scheduler.list_jobs())


@router.post("/reload-config", response_model=SuccessResponse)
async def api_reload_config():
    """Hot-reload configuration from disk."""
    try:
        if _reload_callback:
            _reload_callback()
        config = get_config()
        logger.info("Configuration reloaded via API")
        return SuccessResponse(
            status="ok",
            message=f"Configuration reloaded (sweep_seconds={config.clock.sweep_seconds})",
        )
    except Exception as e:
        logger.error(f"Config reload failed: {e}")
        raise HTTPException(500, f"Config reload failed: {e}")

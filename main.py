# main.py
"""Analogue Clock - SVG clock face served over HTTP."""

import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse

# Load environment variables before importing config
load_dotenv()

from analogue_clock.core.config import AppConfig, load_config, reload_config, set_config
from analogue_clock.core.logging import setup_logging, get_logger
from analogue_clock.core.scheduler import ClockScheduler
from analogue_clock.display.svg_face import render_page
from analogue_clock.views.clock_view import CLOCK_VIEW_TYPE
from analogue_clock.views.manager import ViewManager
from analogue_clock.api.routes import router as api_router, init_routes, current_clock_view

logger = get_logger("main")

CONFIG_PATH = Path(os.environ.get("ANALOGUE_CLOCK_CONFIG", "config.yaml"))

# Global instances
scheduler = ClockScheduler()
view_manager = ViewManager()


def _apply_config(config: AppConfig) -> None:
    """Push config into logging and into views opened from now on."""
    setup_logging(
        level=config.logging.level,
        log_file=Path(config.logging.file) if config.logging.file else None,
    )
    view_manager.configure(
        scheduler=scheduler,
        clock=config.clock,
        face=config.face,
    )


def _reload() -> None:
    """Reload config and reopen the clock so new settings take effect."""
    config = reload_config(CONFIG_PATH)
    _apply_config(config)
    if view_manager.get_views_of_type(CLOCK_VIEW_TYPE):
        view_manager.activate_view(CLOCK_VIEW_TYPE)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic."""
    try:
        config = load_config(CONFIG_PATH)
    except Exception as e:
        logger.error(f"Failed to load config: {e}")
        config = AppConfig()
        set_config(config)

    _apply_config(config)
    logger.info("Analogue Clock starting...")

    init_routes(view_manager, scheduler, reload_callback=_reload)

    await scheduler.start()
    view_manager.activate_view(CLOCK_VIEW_TYPE)

    logger.info("Analogue Clock ready")

    yield

    # Close views before the scheduler so every tick job is removed first
    view_manager.detach_all()
    await scheduler.stop()
    logger.info("Analogue Clock stopped")


app = FastAPI(title="Analogue Clock", lifespan=lifespan)

app.include_router(api_router)


@app.get("/", response_class=HTMLResponse)
async def index():
    """Serve the clock page."""
    view = current_clock_view()
    if view is None or not view.attached:
        raise HTTPException(404, "No analogue clock view is open")
    return render_page(view.render_svg(), view.clock.tick_interval_seconds)

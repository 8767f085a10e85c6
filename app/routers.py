from typing import Annotated
from fastapi import APIRouter, Query
import logging

from app.config import settings
from app.schemas import EventBatch, GridRenderRequest, GridResponse, IngestResponse
from app.services import assemble
from app.services.grid_response_service import build_grid_response
from app.services.layout_types import GridModel
from app.services.render_coordinator import get_render_coordinator
from app.services.scheduler_service import render_scheduler
from app.utils.event_coercion import coerce_events
from app.utils.timezone import EPOCH_MAX, EPOCH_MIN, epoch_to_iso, utc_now_epoch


logger = logging.getLogger(__name__)

main_router = APIRouter()

@main_router.get("/")
async def root() -> dict:
    """Root endpoint with service information"""
    next_run = render_scheduler.get_next_run_time()

    return {
        "service": "EPG Grid Service",
        "version": "0.1.0",
        "next_scheduled_render": next_run.isoformat() if next_run else None,
        "endpoints": {
            "events": "/events - Deliver a new EPG event batch (POST)",
            "grid": "/grid - Get the current grid layout",
            "render": "/grid/render - Lay out an event batch without storing it (POST)",
            "health": "/health - Health check"
        }
    }


@main_router.get("/health")
async def health_check() -> dict:
    """Health check endpoint"""
    next_run = render_scheduler.get_next_run_time()
    last_render = get_render_coordinator().last_render
    return {
        "status": "ok",
        "scheduler_running": render_scheduler.is_running(),
        "next_render": next_run.isoformat() if next_run else None,
        "last_render": epoch_to_iso(last_render) if last_render is not None else None
    }


@main_router.post("/events", response_model=IngestResponse)
async def ingest_events(batch: EventBatch) -> IngestResponse:
    """
    Deliver a new EPG event batch

    Replaces the current batch and re-renders the grid immediately.
    """
    coordinator = get_render_coordinator()
    logger.info(f"Received EPG batch with {len(batch.epg)} records")
    result = coordinator.ingest(batch.epg)

    return IngestResponse(
        received=len(batch.epg),
        accepted=len(coordinator.events),
        channels=len(result.rows) if isinstance(result, GridModel) else 0,
        render=build_grid_response(
            result, coordinator.layout, scroll_margin=settings.epg_initial_scroll_margin
        )
    )


@main_router.get("/grid", response_model=GridResponse)
async def get_grid(
    now: Annotated[int | None, Query(ge=EPOCH_MIN, le=EPOCH_MAX, description="Current time override in epoch seconds")] = None,
    viewport_width: Annotated[float | None, Query(gt=0, description="Visible grid width in pixels")] = None
) -> GridResponse:
    """
    Get the current grid layout

    Re-renders when the throttle interval has passed since the last render.
    """
    coordinator = get_render_coordinator()
    result = coordinator.render(now=now)
    return build_grid_response(
        result,
        coordinator.layout,
        viewport_width=viewport_width,
        scroll_margin=settings.epg_initial_scroll_margin
    )


@main_router.post("/grid/render", response_model=GridResponse)
async def render_grid(request: GridRenderRequest) -> GridResponse:
    """
    Lay out an event batch without touching the stored grid

    Args:
        request: Raw events plus optional current time and layout overrides

    Returns:
        Grid layout for the given events
    """
    layout = settings.layout_config(
        px_per_minute=request.px_per_minute,
        card_gap=request.card_gap,
        min_event_width=request.min_event_width,
        display_timezone=request.timezone,
    )
    now = request.now if request.now is not None else utc_now_epoch()
    result = assemble(coerce_events(request.epg), now, layout)

    return build_grid_response(
        result,
        layout,
        viewport_width=request.viewport_width,
        scroll_margin=settings.epg_initial_scroll_margin
    )

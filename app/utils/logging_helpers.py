"""
Structured logging helpers for consistent log formatting.

Provides utilities for structured, clean logging without excessive decorative separators.
"""
import logging

from app.services.layout_types import EmptyData, GridModel


def log_render_summary(
    logger: logging.Logger,
    result: GridModel | EmptyData,
    duration_ms: float
) -> None:
    """
    Log the outcome of one render pass.

    Args:
        logger: Logger instance
        result: Grid model or empty-data signal
        duration_ms: Time spent laying out the grid
    """
    if isinstance(result, EmptyData):
        logger.info(f"Render produced no grid (no EPG data) in {duration_ms:.1f}ms")
        return

    logger.info(
        f"Render summary - Channels: {len(result.rows)}, Events: {result.event_count}, "
        f"Width: {result.grid_width:.0f}px, Duration: {duration_ms:.1f}ms"
    )


def log_ingest_summary(
    logger: logging.Logger,
    received: int,
    accepted: int
) -> None:
    """
    Log event ingestion summary.

    Args:
        logger: Logger instance
        received: Number of raw records delivered by the host
        accepted: Number of records turned into events
    """
    logger.info(f"Ingest summary - Received: {received}, Accepted: {accepted}")

import logging
from datetime import datetime
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from app.config import settings
from app.services.render_coordinator import get_render_coordinator


logger = logging.getLogger(__name__)

class RenderScheduler:
    """Scheduler for periodic grid re-renders so the now marker advances"""

    def __init__(self):
        self.scheduler: AsyncIOScheduler | None = None

    async def _render_job(self) -> None:
        """Background job that re-renders the grid with the current time"""
        logger.debug("Scheduled grid render triggered")
        try:
            get_render_coordinator().render(force=True)
        except Exception as e:
            logger.error(f"Exception in scheduled render: {e}", exc_info=True)

    def start(self) -> None:
        """Start the scheduler with the render job"""
        if self.scheduler and self.scheduler.running:
            logger.warning("Scheduler already running")
            return

        self.scheduler = AsyncIOScheduler(timezone='UTC')
        self.scheduler.add_job(
            self._render_job,
            trigger=IntervalTrigger(seconds=settings.render_interval_sec),
            id='grid_render',
            max_instances=1,
            coalesce=True,
            misfire_grace_time=settings.render_misfire_grace_sec
        )

        self.scheduler.start()
        next_time = self.get_next_run_time()
        logger.info(
            "Scheduler started. Next render: %s",
            next_time.isoformat() if next_time else "unknown"
        )

    def shutdown(self) -> None:
        """Shutdown the scheduler"""
        if self.scheduler and self.scheduler.running:
            self.scheduler.shutdown()
            logger.info("Scheduler stopped")
            self.scheduler = None

    def is_running(self) -> bool:
        return bool(self.scheduler and self.scheduler.running)

    def get_next_run_time(self) -> datetime | None:
        """Get next scheduled render time"""
        if not self.scheduler:
            return None
        job = self.scheduler.get_job('grid_render')
        return job.next_run_time if job else None


render_scheduler = RenderScheduler()

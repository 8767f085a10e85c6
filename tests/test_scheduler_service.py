"""
Scheduler tests: the periodic render job and the scheduler lifecycle.
"""
import asyncio

from app.services.layout_types import GridModel
from app.services.render_coordinator import get_render_coordinator
from app.services.scheduler_service import RenderScheduler


RAW_BATCH = [
    {"channelUuid": "a", "channelNumber": 1, "channelName": "One", "start": 1000, "stop": 1600, "title": "A1"},
    {"channelUuid": "b", "channelNumber": 2, "channelName": "Two", "start": 1200, "stop": 1800, "title": "B1"},
]


class TestRenderJob:
    """Tests for RenderScheduler._render_job"""

    def test_job_advances_last_render(self):
        """The job re-renders the stored batch at the current wall-clock time."""
        coordinator = get_render_coordinator()
        coordinator.ingest(RAW_BATCH, now=1000)

        asyncio.run(RenderScheduler()._render_job())

        assert coordinator.last_render > 1000
        assert isinstance(coordinator.latest, GridModel)
        assert coordinator.latest.now == coordinator.last_render
        assert [row.channel_id for row in coordinator.latest.rows] == ["a", "b"]

    def test_job_without_batch(self):
        asyncio.run(RenderScheduler()._render_job())

        assert not get_render_coordinator().latest
        assert get_render_coordinator().last_render is not None


class TestLifecycle:
    """Tests for start/shutdown"""

    def test_not_running_before_start(self):
        scheduler = RenderScheduler()

        assert scheduler.is_running() is False
        assert scheduler.get_next_run_time() is None

    def test_start_and_shutdown(self):
        scheduler = RenderScheduler()

        async def cycle():
            scheduler.start()
            state = (scheduler.is_running(), scheduler.get_next_run_time())
            scheduler.shutdown()
            return state

        running, next_run = asyncio.run(cycle())

        assert running is True
        assert next_run is not None
        assert scheduler.is_running() is False
        assert scheduler.get_next_run_time() is None

    def test_second_start_keeps_scheduler(self):
        scheduler = RenderScheduler()

        async def cycle():
            scheduler.start()
            first = scheduler.scheduler
            scheduler.start()
            same = scheduler.scheduler is first
            scheduler.shutdown()
            return same

        assert asyncio.run(cycle()) is True

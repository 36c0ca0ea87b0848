"""Background poller that runs a file import flow on a fixed delay."""

import asyncio
import contextlib

import structlog

from importing.flow import FileImportFlow

logger = structlog.get_logger(__name__)


class DirectoryPoller:
    def __init__(self, flow: FileImportFlow, interval: float) -> None:
        self.flow = flow
        self.interval = interval
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        if self._task:
            return
        self._task = asyncio.create_task(self.run())
        logger.info("Directory poller started", source=str(self.flow.settings.source_dir), interval=self.interval)

    async def stop(self) -> None:
        if not self._task:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Directory poller stopped")

    async def run(self) -> None:
        while True:
            await self.poll_once()
            await asyncio.sleep(self.interval)

    async def poll_once(self) -> list:
        # Blocking file and database work stays off the event loop
        try:
            return await asyncio.to_thread(self.flow.poll)
        except Exception:
            logger.exception("Directory poll failed", source=str(self.flow.settings.source_dir))
            return []

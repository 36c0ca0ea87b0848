"""Process runner for the shop services.

Runs side by side:
- the Protean Engine, which feeds broker messages to subscribers
  (processed order statuses → live client channel). The engine drives its
  own event loop, so it runs on a worker thread.
- the uvicorn web server with the HTTP API and the status WebSocket
- the directory poller for file imports, when SOURCE_DIRECTORY_PATH and
  IMPORT_LINE_MAPPER are configured

The status subscriber reaches WebSocket clients through the in-process
client channel, which hands each message over to the web server's loop.

Usage:
    python src/server.py                  # engine + web + poller
    python src/server.py --no-web         # engine + poller only
    python src/server.py --port 9000
"""

import argparse
import asyncio

import structlog
import uvicorn
from protean.server.engine import Engine

from importing import DirectoryPoller, FileImportFlow, ImportSettings, load_line_mapper
from ordering.utils.logging import configure_logging

logger = structlog.get_logger(__name__)


def _build_poller(domain):
    settings = ImportSettings.from_env()
    if settings is None:
        logger.info("File import disabled: SOURCE_DIRECTORY_PATH is not set")
        return None
    if not settings.line_mapper:
        logger.warning("File import disabled: IMPORT_LINE_MAPPER is not set", source=str(settings.source_dir))
        return None

    flow = FileImportFlow(domain, settings, load_line_mapper(settings.line_mapper))
    return DirectoryPoller(flow, settings.poll_interval)


def _stop_engine(engine):
    if engine.shutting_down or engine.loop.is_closed():
        return
    asyncio.run_coroutine_threadsafe(engine.shutdown(), engine.loop)


async def run(domain, host, port, web=True):
    engine = Engine(domain)
    tasks = [asyncio.create_task(asyncio.to_thread(engine.run), name="engine")]
    if web:
        from app import app

        server = uvicorn.Server(uvicorn.Config(app, host=host, port=port, log_config=None))
        tasks.append(asyncio.create_task(server.serve(), name="web"))

    poller = _build_poller(domain)
    if poller is not None:
        await poller.start()

    try:
        # Whichever side stops first takes the other one down with it
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            task.result()
    finally:
        _stop_engine(engine)
        for task in tasks:
            task.cancel()
        if poller is not None:
            await poller.stop()


def main():
    parser = argparse.ArgumentParser(description="Shop service runner")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--no-web", action="store_true", help="Run without the HTTP server")
    args = parser.parse_args()

    configure_logging()

    # Importing the app initializes the domain
    from app import ordering

    asyncio.run(run(ordering, args.host, args.port, web=not args.no_web))


if __name__ == "__main__":
    main()

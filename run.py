"""Unified entry point for the users and people services.

This script launches both FastAPI apps concurrently, each on its own
port.  It is intended to be executed from the project root, for
example under Docker, where you only specify a single Python file to
run.

Host and ports are read from ``HOST``, ``PORT`` (users service,
default 8080) and ``PEOPLE_PORT`` (people service, default 8888).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from registry_api.app.core.config import settings
from registry_api.app.main import people_app, users_app


async def serve(app, port: int) -> None:
    """Serve ``app`` with Uvicorn on ``settings.host:port``."""
    config = Config(app=app, host=settings.host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


async def main() -> None:
    """Run both services concurrently; stop both if either fails."""
    tasks = [
        asyncio.create_task(serve(users_app, settings.port)),
        asyncio.create_task(serve(people_app, settings.people_port)),
    ]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

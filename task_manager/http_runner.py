"""HTTP runner for the task manager app."""

import argparse
import logging

import uvicorn

from .config import Settings

logger = logging.getLogger(__name__)


def run_http_server(app, port: int, host: str = "0.0.0.0", log_level: str = "info"):
    """Serve an ASGI app with uvicorn.

    Args:
        app: The ASGI application
        port: Port to listen on
        host: Host to bind to (default 0.0.0.0)
        log_level: uvicorn log level
    """
    logger.info(f"Starting task manager on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=log_level)


def create_arg_parser(settings: Settings) -> argparse.ArgumentParser:
    """Create the CLI argument parser, with defaults taken from settings.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Task Manager - SQLite-backed task list with a web UI"
    )
    parser.add_argument(
        "--db",
        default=settings.db_path,
        help=f"SQLite database path (default: {settings.db_path})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to run on (default: {settings.port})",
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})",
    )
    parser.add_argument(
        "--reset-db",
        action="store_true",
        help="Delete the database file and recreate the schema before starting",
    )
    return parser

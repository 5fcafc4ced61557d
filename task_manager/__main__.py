"""Entry point for running the task manager."""

import logging
from dataclasses import replace

from .config import get_settings
from .db import TaskDatabase, reset_database
from .http_runner import create_arg_parser, run_http_server
from .service import TaskService
from .web import create_app

logger = logging.getLogger(__name__)


def main(argv=None):
    settings = get_settings()
    args = create_arg_parser(settings).parse_args(argv)
    settings = replace(settings, db_path=args.db, host=args.host, port=args.port)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    store = reset_database(settings.db_path) if args.reset_db else TaskDatabase(settings.db_path)
    logger.info("Database: %s (%d tasks)", settings.db_path, store.count_tasks())

    app = create_app(TaskService(store), settings)
    run_http_server(app, port=settings.port, host=settings.host, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

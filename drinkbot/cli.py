"""Command line entry for the drink order bot."""

from __future__ import annotations

import logging
import sys

import uvicorn

from drinkbot.api.main import create_app
from drinkbot.core.config import get_settings
from drinkbot.core.exceptions import ConfigurationError

logger = logging.getLogger("drinkbot")


def run_server() -> None:
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        logging.basicConfig(level=logging.ERROR)
        logger.critical("Refusing to start: %s", exc)
        sys.exit(1)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


def main() -> None:
    run_server()


if __name__ == "__main__":
    main()

import logging

import uvicorn

from noteful.config import load_settings
from noteful.utils.request_log import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Starting Noteful API on %s:%s", settings.host, settings.port)
    uvicorn.run("noteful.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

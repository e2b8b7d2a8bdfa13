"""Process entry point: resolve settings once and serve the API with uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from app.core.config import Settings, get_settings
from app.main import create_app

logger = logging.getLogger(__name__)


def run(settings: Settings) -> None:
    application = create_app(settings)
    display_host = "localhost" if settings.host in {"0.0.0.0", "::"} else settings.host
    logger.info("Starting server on %s:%s in %s mode", settings.host, settings.port, settings.mode)
    logger.info(
        "Swagger UI available at: http://%s:%s%s/index.html",
        display_host,
        settings.port,
        settings.docs_path.rstrip("/"),
    )
    uvicorn.run(
        application,
        host=settings.host,
        port=settings.port,
        log_level=logging.getLevelName(settings.logging_level).lower(),
        access_log=False,
    )


def main() -> None:
    run(get_settings())


if __name__ == "__main__":
    main()

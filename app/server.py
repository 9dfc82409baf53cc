"""
CLI entrypoint that serves the API with uvicorn:

  python -m app.server

Listens on HOST:PORT (defaults 127.0.0.1:3000); see app.core.config for all settings.
"""

import logging
import sys

import uvicorn
from dotenv import load_dotenv

from app.core.config import get_settings
from app.factory import create_app

logger = logging.getLogger(__name__)


def main() -> int:
    """Configure logging, build the app from settings and serve it until interrupted."""
    load_dotenv()
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    try:
        app = create_app(settings)
    except Exception as e:
        logger.exception("Startup failed: %s", e)
        return 1
    logger.info("Hardened API listening on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())

import uvicorn

from .logging_config import setup_logging
from .settings import get_settings


def main() -> None:
    settings = get_settings()
    logger = setup_logging(settings.log_level)
    logger.info("SmartLoad API starting on port %d...", settings.port)
    # uvicorn handles SIGINT/SIGTERM and drains in-flight requests
    uvicorn.run("smartload.app:app", host=settings.host, port=settings.port,
                log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

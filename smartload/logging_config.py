import logging
import sys


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Log to stdout with timestamps, levels and module names.
    Safe to call more than once; basicConfig only installs the first handler.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # uvicorn's own access log duplicates the request middleware line
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return logging.getLogger("smartload")

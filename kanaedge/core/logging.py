import logging
import sys

from kanaedge.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging():
    """Send everything to stdout at LOG_LEVEL; safe to call more than once."""
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))
    root.addHandler(handler)
    # AccessLogMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

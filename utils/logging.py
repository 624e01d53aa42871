import logging
import sys
from typing import Union

from context import request_id

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"


class RequestIdFilter(logging.Filter):
    """Stamp the current request id (or "-") on every record"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id.get() or "-"
        return True


def configure_logging(level: Union[int, str] = "INFO") -> logging.Logger:
    """
    Send all logs to stdout with the request id in each line

    Args:
        level: logging level name or number

    Returns:
        The "feed" logger
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    logging.basicConfig(level=level, handlers=[handler], force=True)
    return logging.getLogger("feed")

"""Logging configuration for the application.

Records are written to stdout with the id of the request they were emitted
in (or "-" outside a request).
"""

import logging
import sys

from task_api.core.config import get_settings
from task_api.shared.context import get_request_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"


class RequestIdLogFilter(logging.Filter):
    """Attach request_id to every record passing through the handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True


def setup_logging() -> None:
    """Configure the root logger once per process.

    Level is DEBUG when settings.debug is True, otherwise INFO. Repeated
    calls (one per app startup) leave an existing stdout handler in place.
    """
    settings = get_settings()
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    if any(isinstance(f, RequestIdLogFilter) for h in root.handlers for f in h.filters):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdLogFilter())
    root.addHandler(handler)

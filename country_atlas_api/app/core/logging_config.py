"""
Logging setup for the Country Atlas API.

``setup_logging`` is called once by ``create_app``.  It sends all
records to the console, and to ``LOG_FILE`` when one is configured.
Request lines come from ``RequestLoggingMiddleware``, so uvicorn's own
access log is lowered to WARNING to avoid logging each request twice.
"""

import logging
import time
from pathlib import Path
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console/file handlers to the root logger.

    Does nothing if the root logger already has handlers, e.g. when
    pytest's capture or a second ``create_app`` call got there first.
    Unknown level names fall back to INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger(__name__).debug(
        "Logging configured at %s%s", level.upper(), f", file {logfile}" if logfile else ""
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every API request."""

    def __init__(self, app, path_prefix: str = "/api") -> None:
        super().__init__(app)
        self.path_prefix = path_prefix
        self.logger = logging.getLogger("country_atlas_api.requests")

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        response: Response = await call_next(request)
        if request.url.path.startswith(self.path_prefix):
            duration_ms = (time.perf_counter() - start) * 1000
            self.logger.info(
                "%s %s %s in %.0fms",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
            )
        return response

# src/techhub/core/logging/builder.py
"""
Logging builder: create and apply a dictConfig logging configuration and optionally
move the actual log IO behind a QueueListener running in a background thread.

Settings knobs used:
 - LOG_LEVEL, LOG_FORMAT, LOG_TO_STDOUT, LOG_DIR, LOG_MAX_BYTES, LOG_BACKUP_COUNT, ENV
 - LOG_USE_QUEUE: producers only enqueue records; a QueueListener writes them
 - LOG_QUEUE_MAX_SIZE: bound of the queue (0 -> unbounded)

Active handlers:
| LOG_TO_STDOUT | LOG_DIR | handlers                     |
| ------------- | ------- | ---------------------------- |
| true          | any     | console + error_console      |
| false         | unset   | console + error_console      |
| false         | set     | console + file + error_file  |
"""

from __future__ import annotations

from pathlib import Path
import logging
import logging.config
import queue as _queue
from typing import Optional
from logging.handlers import QueueHandler, QueueListener

from techhub.config.settings import Settings
from .formatters import JsonFormatter, ColorFormatter
from .filters import RequestIdFilter, RedactFilter
from .handlers import (
    get_console_handler,
    get_file_handler,
    get_error_file_handler,
    get_error_console_handler,
)

_QUEUE_LISTENER: Optional[QueueListener] = None


def _file_logging_enabled(settings: Settings) -> bool:
    return (not settings.LOG_TO_STDOUT) and bool(settings.LOG_DIR)


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping:
      - formatters: "standard" (ColorFormatter in text mode) and "json"
      - filters: "request_id", "redact"
      - handlers: console, plus file/error_file or error_console
      - loggers: root, uvicorn.error, uvicorn.access
    """
    formatters = {
        "standard": {
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s",
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": getattr(settings, "APP_NAME", "techhub-api"),
        },
    }

    filters = {
        "request_id": {"()": RequestIdFilter},
        "redact": {"()": RedactFilter},
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}
    if _file_logging_enabled(settings):
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)
    else:
        handlers["error_console"] = get_error_console_handler(settings)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": list(handlers.keys()),
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            "uvicorn.error": {
                "level": settings.LOG_LEVEL,
                "handlers": list(handlers.keys()),
                "propagate": False,
            },
            # RequestIDMiddleware already logs one line per request
            "uvicorn.access": {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """
    Initialize logging from settings.

    Steps:
      1. Create LOG_DIR when file logging is on.
      2. Apply dictConfig(make_dict_config(settings)).
      3. With LOG_USE_QUEUE, detach the real handlers from the root logger, hand
         them to a QueueListener and attach a QueueHandler instead. The producer
         side filters (request id, redaction) are stamped on the QueueHandler so
         they run in the producing context, where the request contextvar is set.
    """
    global _QUEUE_LISTENER

    # A previous queue listener would otherwise keep writing to stale handlers.
    stop_queue_logging()

    if _file_logging_enabled(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))
    logging.getLogger().addFilter(RequestIdFilter())

    if settings.LOG_USE_QUEUE:
        _QUEUE_LISTENER = _route_through_queue(settings.LOG_QUEUE_MAX_SIZE)


def _route_through_queue(max_size: int) -> Optional[QueueListener]:
    """
    Hand the handlers installed by dictConfig to a started QueueListener and make
    every logger that used them enqueue instead.
    """
    root = logging.getLogger()
    sinks = list(root.handlers)
    if not sinks:
        return None

    # dictConfig shares handler instances with named loggers (uvicorn.error)
    producers = [root]
    for candidate in logging.Logger.manager.loggerDict.values():
        if isinstance(candidate, logging.Logger) and any(h in sinks for h in candidate.handlers):
            producers.append(candidate)

    log_queue: _queue.Queue = _queue.Queue(max(max_size, 0))
    enqueue = QueueHandler(log_queue)
    enqueue.addFilter(RequestIdFilter())
    enqueue.addFilter(RedactFilter())

    for producer in producers:
        for h in [h for h in producer.handlers if h in sinks]:
            producer.removeHandler(h)
        producer.addHandler(enqueue)

    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()
    return listener


def stop_queue_logging() -> None:
    """Flush and stop the background QueueListener, if one is running."""
    global _QUEUE_LISTENER
    listener = _QUEUE_LISTENER
    if listener is None:
        return
    try:
        listener.stop()
    finally:
        _QUEUE_LISTENER = None

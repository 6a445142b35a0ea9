"""Structured logging helpers for the documentation converter.

Library modules obtain a :class:`LoggerAdapter` from :func:`get_logger`; the
underlying logger carries a ``NullHandler`` so importing the package never
configures output. Applications (the CLI) call :func:`setup_logging` once.

Examples
--------
>>> from xmldoc.logging import get_logger
>>> logger = get_logger(__name__)
>>> logger.debug("Fragment rendered", extra={"operation": "render", "status": "success"})
"""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import MutableMapping

__all__ = [
    "JsonFormatter",
    "LoggerAdapter",
    "get_logger",
    "setup_logging",
    "with_fields",
]

type LogValue = Any

_STANDARD_ATTRIBUTES = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


class JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    The payload always carries ``ts``, ``level``, ``name`` and ``message``;
    any JSON-friendly ``extra`` fields attached to the record are appended.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` as JSON.

        Parameters
        ----------
        record : logging.LogRecord
            Log record to format.

        Returns
        -------
        str
            JSON-encoded log entry.
        """
        data: dict[str, object] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S") + "Z",
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if (
                key not in _STANDARD_ATTRIBUTES
                and key not in data
                and not key.startswith("_")
                and value is not None
                and isinstance(value, (str, int, float, bool, list, dict))
            ):
                data[key] = value
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


class LoggerAdapter(logging.LoggerAdapter[logging.Logger]):
    """Logger adapter that injects bound and default structured fields.

    Fields bound at construction are merged into each call's ``extra`` without
    overriding per-call values. ``operation`` defaults to ``"unknown"`` and
    ``status`` is inferred from the level when absent.
    """

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        if self.extra:
            for key, value in self.extra.items():
                extra.setdefault(key, value)
        extra.setdefault("operation", "unknown")
        kwargs["extra"] = extra
        return msg, kwargs

    def log(self, level: int, msg: object, *args: object, **kwargs: Any) -> None:
        extra = dict(kwargs.get("extra") or {})
        if "status" not in extra:
            if level >= logging.ERROR:
                extra["status"] = "error"
            elif level >= logging.WARNING:
                extra["status"] = "warning"
            else:
                extra["status"] = "success"
        kwargs["extra"] = extra
        super().log(level, msg, *args, **kwargs)


def get_logger(name: str) -> LoggerAdapter:
    """Return a structured logger adapter for ``name``.

    Parameters
    ----------
    name : str
        Logger name (typically ``__name__``).

    Returns
    -------
    LoggerAdapter
        Adapter over a logger that has at least a ``NullHandler`` attached.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return LoggerAdapter(logger, {})


def with_fields(logger: logging.Logger | LoggerAdapter, **fields: LogValue) -> LoggerAdapter:
    """Return an adapter that binds ``fields`` to every log call.

    Parameters
    ----------
    logger : logging.Logger | LoggerAdapter
        Base logger, possibly already wrapped.
    **fields : LogValue
        Structured fields to inject.

    Returns
    -------
    LoggerAdapter
        Adapter with the merged bound fields.
    """
    if isinstance(logger, LoggerAdapter):
        bound: dict[str, LogValue] = dict(logger.extra or {})
        bound.update(fields)
        return LoggerAdapter(logger.logger, bound)
    return LoggerAdapter(logger, fields)


def setup_logging(level: int | str = logging.INFO, stream: Any = None) -> None:
    """Configure the root logger with :class:`JsonFormatter`.

    Parameters
    ----------
    level : int | str, optional
        Threshold level, numeric or by name. Defaults to ``logging.INFO``.
    stream : Any, optional
        Destination stream. Defaults to ``sys.stderr`` so command output on
        stdout stays clean.
    """
    if isinstance(level, str):
        level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)


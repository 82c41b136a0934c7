"""
Logging configuration for the command-line usage of the client.

The library itself only logs via the per-module loggers and never configures
the logging system on import: this is the job of the applications using it.
The CLI does this via :func:`configure` with the options from the command line.
"""
import enum
import logging
from typing import Any, MutableMapping, Optional, Union

import pythonjsonlogger.json

# The lowest level of every severity, in ascending order; the last one catches the rest.
SEVERITIES = [
    (logging.DEBUG, 'debug'),
    (logging.INFO, 'info'),
    (logging.WARNING, 'warn'),
    (logging.ERROR, 'error'),
]
FATAL_SEVERITY = 'fatal'

# The libraries that are too noisy at the debug level unless explicitly debugging.
NOISY_LOGGERS = ['asyncio', 'aiohttp']


class LogFormat(enum.Enum):
    """ Log formats, as specified on CLI. """
    PLAIN = '%(message)s'
    FULL = '[%(asctime)s] %(name)-20.20s [%(levelname)-8.8s] %(message)s'
    JSON = enum.auto()


def get_severity(levelno: int) -> str:
    for threshold, severity in SEVERITIES:
        if levelno <= threshold:
            return severity
    return FATAL_SEVERITY


class JsonFormatter(pythonjsonlogger.json.JsonFormatter):
    """
    JSON lines with the timestamp & severity, as the log collectors expect them.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault('timestamp', True)
        super().__init__(*args, **kwargs)

    def add_fields(
            self,
            log_record: MutableMapping[str, object],
            record: logging.LogRecord,
            message_dict: MutableMapping[str, object],
    ) -> None:
        super().add_fields(log_record, record, message_dict)  # type: ignore[arg-type]
        log_record.setdefault('severity', get_severity(record.levelno))


def configure(
        debug: Optional[bool] = None,
        verbose: Optional[bool] = None,
        quiet: Optional[bool] = None,
        log_format: Union[LogFormat, str] = LogFormat.FULL,
) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(make_formatter(log_format=log_format))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug or verbose else logging.WARNING if quiet else logging.INFO)

    # Only the client's own debug messages are shown unless debugging.
    for name in NOISY_LOGGERS:
        noisy = logging.getLogger(name)
        noisy.propagate = bool(debug)
        if not debug:
            noisy.handlers[:] = [logging.NullHandler()]


def make_formatter(
        log_format: Union[LogFormat, str] = LogFormat.FULL,
) -> logging.Formatter:
    if log_format is LogFormat.JSON:
        return JsonFormatter()
    elif isinstance(log_format, LogFormat):
        return logging.Formatter(log_format.value)
    elif isinstance(log_format, str):
        return logging.Formatter(log_format)
    else:
        raise ValueError(f"Unsupported log format: {log_format!r}")

"""Logger module."""

import logging
import os
import sys

import colorlog

loggers: dict[str, logging.Logger] = {}

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class _BelowErrorFilter(logging.Filter):
    """Pass only records below ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.ERROR


def _make_formatter(*, log_color: bool) -> logging.Formatter:
    if not log_color:
        return logging.Formatter(LOG_FORMAT)
    return colorlog.ColoredFormatter(
        "%(log_color)s " + LOG_FORMAT,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
    )


def _make_handlers(log_handler: str, *, log_color: bool) -> list[logging.Handler]:
    stream_handler = colorlog.StreamHandler if log_color else logging.StreamHandler

    if log_handler == "stdout":
        return [stream_handler(sys.stdout)]
    if log_handler == "stderr":
        return [stream_handler(sys.stderr)]
    if log_handler == "split":
        out = stream_handler(sys.stdout)
        out.addFilter(_BelowErrorFilter())
        err = stream_handler(sys.stderr)
        err.setLevel(logging.ERROR)
        return [out, err]

    err_msg = f"Invalid handler: {log_handler}"
    raise ValueError(err_msg)


def get_logger(
    name: str,
    log_handler: str = "split",
    log_level: str | None = None,
    log_color: bool = False,
) -> logging.Logger:
    """Get logger.

    Args:
        name: The name of the logger.
        log_handler: The log handler type ('stdout', 'stderr' or 'split').
            'split' sends records below ERROR to stdout and the rest to stderr.
        log_level: The logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR',
            'CRITICAL'). Defaults to the LOG_LEVEL environment variable, or INFO.
        log_color: Whether to use colored output.

    Returns:
        logging.Logger: Configured logger instance.

    Raises:
        ValueError: If invalid handler or log level is provided.
    """
    if name in loggers:
        return loggers[name]

    if log_level is None:
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    if log_level not in LOG_LEVELS:
        err_msg = f"Invalid log level: {log_level}"
        raise ValueError(err_msg)

    level = LOG_LEVELS[log_level]
    handlers = _make_handlers(log_handler, log_color=log_color)

    logger = logging.getLogger(name) if not log_color else colorlog.getLogger(name)
    logger.setLevel(level)

    formatter = _make_formatter(log_color=log_color)
    for handler in handlers:
        # Keep a stricter level set by _make_handlers (stderr side of 'split')
        handler.setLevel(max(level, handler.level))
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    loggers[name] = logger
    return logger

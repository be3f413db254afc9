"""Logging facade for torrentview.

Wraps the ``torrentview`` standard library logger and adds a ``SUCCESS``
level between INFO and WARNING.
"""

import logging
from urllib.parse import urlsplit, urlunsplit

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

_LOGGER_NAME = "torrentview"
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Global logger instance
_logger_instance: logging.Logger | None = None


def init_logger(level: int | str = logging.INFO) -> logging.Logger:
    """Initialize the global torrentview logger.

    Args:
        level: Logging level, either a number or a level name such as "DEBUG".

    Returns:
        The configured logger.
    """
    global _logger_instance

    log = logging.getLogger(_LOGGER_NAME)
    log.setLevel(level.upper() if isinstance(level, str) else level)

    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        log.addHandler(handler)

    _logger_instance = log
    return log


def get_logger() -> logging.Logger:
    """Get the torrentview logger.

    Falls back to the unconfigured named logger when init_logger() has not
    been called, so library users can attach their own handlers.
    """
    if _logger_instance is None:
        return logging.getLogger(_LOGGER_NAME)
    return _logger_instance


def debug(msg: str, *args) -> None:
    get_logger().debug(msg, *args)


def info(msg: str, *args) -> None:
    get_logger().info(msg, *args)


def success(msg: str, *args) -> None:
    get_logger().log(SUCCESS, msg, *args)


def warning(msg: str, *args) -> None:
    get_logger().warning(msg, *args)


def error(msg: str, *args) -> None:
    get_logger().error(msg, *args)


def exception(msg: str, *args) -> None:
    get_logger().exception(msg, *args)


def redact_url_password(url: str) -> str:
    """Replace the password part of a URL with asterisks.

    Args:
        url: URL that may carry credentials, e.g. a notification URL.

    Returns:
        The URL with its password masked, or the URL unchanged when it has none.
    """
    parsed = urlsplit(url)
    if not parsed.password:
        return url

    netloc = parsed.netloc.replace(f":{parsed.password}@", ":****@", 1)
    return urlunsplit(parsed._replace(netloc=netloc))

"""
Utility module.

This module provides logging configuration and utility functions for debugging.
Main features include library-wide logging configuration, debug log recording
and wire payload dumps.
"""

import inspect
import json
import logging
import os
import sys
import traceback
from typing import Any, Union

from . import constants

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "webdriver_bridge"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a stdout handler to the ``webdriver_bridge`` logger.

    The root logger is left alone. Calling it again replaces the handler
    installed by the previous call instead of stacking a second one.

    Args:
        level: Level name, defaults to constants.LOG_LEVEL (at most INFO on CI)

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        if getattr(handler, "_webdriver_bridge", False):
            package_logger.removeHandler(handler)

    is_ci = os.environ.get("CI", "false").lower() == "true"
    log_level = getattr(logging, (level or constants.LOG_LEVEL).upper(), logging.INFO)
    if is_ci:
        log_level = min(log_level, logging.INFO)

    fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    if is_ci:
        fmt = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    handler._webdriver_bridge = True  # type: ignore[attr-defined]

    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    package_logger.debug("webdriver_bridge log level: %s", logging.getLevelName(log_level))
    return package_logger


def add_debug_log(
    msg: Union[str, dict, list, Exception],
    group: str | None = None,
    level: str = "DEBUG",
) -> None:
    """
    Record a debug log message using the standard logger.

    Args:
        msg: Log message (string, dict, list, or exception)
        group: Log group name (uses caller function name if not specified)
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR")
    """

    # Get caller function name
    if group is None:
        frame = None
        try:
            frame = inspect.currentframe()
            if frame and frame.f_back:
                group = frame.f_back.f_code.co_name
            else:
                group = "Unknown"
        except (AttributeError, ValueError):
            group = "Unknown"
        finally:
            del frame

    if isinstance(msg, (dict, list)):
        try:
            message = json.dumps(msg, ensure_ascii=False, indent=2)
        except TypeError:
            message = str(msg)
    elif isinstance(msg, Exception):
        message = f"Error: {msg}\n{traceback.format_exc()}"
    else:
        message = str(msg)

    log_level_int = getattr(logging, level.upper(), logging.DEBUG)
    logger.log(log_level_int, "[%s] %s", group, message)


def log_operation_error(
    operation_type: str,
    error_msg: str,
    details: dict[str, Any] | None = None,
) -> None:
    """
    Log failed bridge commands. Always logs at INFO level or higher regardless of log level.

    Args:
        operation_type: Command name ("find_element", "element_click", etc.)
        error_msg: Error message
        details: Error details (url params, path, etc.)
    """
    details_str = ""
    if details:
        try:
            details_list = [f"{k}={v}" for k, v in details.items()]
            details_str = f" ({', '.join(details_list)})"
        except (TypeError, ValueError):
            details_str = f" ({details})"

    logger.info("Operation error - %s: %s%s", operation_type, error_msg, details_str)


def log_json_debug(
    name: str, data: dict[Any, Any] | list[Any] | None, level: str = "DEBUG"
) -> None:
    """
    Log a JSON payload sent to or received from the remote end.

    Args:
        name: Log group name
        data: JSON-serializable dict or list
        level: Log level string ("DEBUG", "INFO", etc.)
    """
    log_level = getattr(logging, level.upper(), logging.DEBUG)
    if not logger.isEnabledFor(log_level):
        return
    try:
        json_str = json.dumps(data, ensure_ascii=False, indent=2, default=str)
    except (TypeError, ValueError) as e:
        logger.log(log_level, "[%s] JSON serialization error: %s", name, e)
        return
    logger.log(log_level, "[%s] JSON Data:\n%s", name, json_str)

"""exceptions

Common exception classes used by the WebDriver bridge.

Defines a common base exception `WebDriverBridgeError` and
subclasses for caller mistakes, session problems, operations the
W3C protocol does not offer, and errors reported by the remote server.
"""

from __future__ import annotations

from typing import Any


class WebDriverBridgeError(Exception):
    """Base exception for the entire library."""


class BridgeArgumentError(WebDriverBridgeError, ValueError):
    """Invalid caller input: unknown option, unmatched path parameter, etc."""


class UnknownCommandError(BridgeArgumentError):
    """The symbolic command has no descriptor in the command tables."""

    def __init__(self, command: Any):
        super().__init__(f"unknown command: {command!r}")
        self.command = command


class WebDriverError(WebDriverBridgeError):
    """Session or protocol level failure."""


class UnsupportedOperationError(WebDriverError):
    """The operation has no W3C equivalent."""


class TransportClosedError(WebDriverBridgeError, IOError):
    """The HTTP transport was used after it had been closed."""


# ---------------------------------------------------------------------------
# Errors reported by the remote end
# ---------------------------------------------------------------------------


class ServerError(WebDriverError):
    """Error payload returned by the remote server.

    The server's ``error`` code, message and stacktrace are kept as-is.
    """

    def __init__(
        self,
        message: str,
        error: str | None = None,
        stacktrace: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.error = error
        self.stacktrace = stacktrace
        self.status_code = status_code


class NoSuchElementError(ServerError):
    """no such element"""


class StaleElementReferenceError(ServerError):
    """stale element reference"""


class ElementNotInteractableError(ServerError):
    """element not interactable"""


class NoSuchWindowError(ServerError):
    """no such window"""


class NoSuchFrameError(ServerError):
    """no such frame"""


class NoSuchAlertError(ServerError):
    """no such alert"""


class JavascriptError(ServerError):
    """javascript error"""


class ScriptTimeoutError(ServerError):
    """script timeout"""


class InvalidSessionIdError(ServerError):
    """invalid session id"""


class InvalidArgumentError(ServerError):
    """invalid argument"""


ERROR_CODES: dict[str, type[ServerError]] = {
    "no such element": NoSuchElementError,
    "stale element reference": StaleElementReferenceError,
    "element not interactable": ElementNotInteractableError,
    "no such window": NoSuchWindowError,
    "no such frame": NoSuchFrameError,
    "no such alert": NoSuchAlertError,
    "javascript error": JavascriptError,
    "script timeout": ScriptTimeoutError,
    "invalid session id": InvalidSessionIdError,
    "invalid argument": InvalidArgumentError,
}


def error_for_code(code: str | None) -> type[ServerError]:
    """Return the exception class for a W3C error code (``ServerError`` if unknown)"""
    if code is None:
        return ServerError
    return ERROR_CODES.get(code, ServerError)

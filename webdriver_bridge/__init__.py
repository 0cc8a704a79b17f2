"""webdriver_bridge

Bridge between symbolic browser automation commands and a remote server
speaking the W3C WebDriver wire protocol.
"""

from .exceptions import (BridgeArgumentError, ServerError,
                         TransportClosedError, UnknownCommandError,
                         UnsupportedOperationError, WebDriverBridgeError,
                         WebDriverError)
from .remote import (Capabilities, DefaultHttpClient, Element, Response,
                     W3CBridge)

__version__ = "0.1.0"

__all__: list[str] = [
    "W3CBridge",
    "Capabilities",
    "DefaultHttpClient",
    "Element",
    "Response",
    "WebDriverBridgeError",
    "BridgeArgumentError",
    "UnknownCommandError",
    "WebDriverError",
    "UnsupportedOperationError",
    "TransportClosedError",
    "ServerError",
]

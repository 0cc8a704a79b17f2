"""remote package

Client side of the W3C WebDriver wire protocol.
This package includes the following modules:
- commands: Command tables (verb and path template per command)
- path: Path template resolution
- locators: Locator strategy translation and CSS escaping
- element: Element handles and the reference codec
- capabilities: Capability sets and presets
- transport: HTTP transport interface and the ``requests`` implementation
- atoms: Bundled JavaScript atoms
- bridge: The execution engine tying the above together
"""

from .bridge import CURRENT_WINDOW, W3CBridge
from .capabilities import Capabilities
from .commands import LEGACY_COMMANDS, W3C_COMMANDS, Command, lookup
from .element import Element, ElementCodec
from .geometry import Dimension, Point
from .locators import Locator, convert_locator, escape_css
from .path import resolve_path
from .transport import DefaultHttpClient, HttpClient, Response

__all__: list[str] = [
    "W3CBridge",
    "CURRENT_WINDOW",
    "Capabilities",
    "Command",
    "LEGACY_COMMANDS",
    "W3C_COMMANDS",
    "lookup",
    "Element",
    "ElementCodec",
    "Dimension",
    "Point",
    "Locator",
    "convert_locator",
    "escape_css",
    "resolve_path",
    "DefaultHttpClient",
    "HttpClient",
    "Response",
]

"""remote.locators

Locator strategy translation.

W3C servers only accept ``css selector``, ``link text``,
``partial link text``, ``tag name`` and ``xpath``. ``class name``, ``id``
and ``name`` lookups are rewritten into equivalent CSS selectors, and
``tag name`` is sent as a CSS selector as well.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from .. import constants
from ..exceptions import BridgeArgumentError

# Keyword aliases accepted by find_element(**kwargs) style lookups
FINDERS: dict[str, str] = {
    "class": "class name",
    "class_name": "class name",
    "css": "css selector",
    "id": "id",
    "link": "link text",
    "link_text": "link text",
    "name": "name",
    "partial_link_text": "partial link text",
    "tag_name": "tag name",
    "xpath": "xpath",
}

_ESCAPE_CSS_RE = re.compile(r"""(['"\\#.:;,!?+<>=~*^$|%&@`{}\-\[\]()])""")


class Locator(NamedTuple):
    """Locator strategy and value"""

    how: str
    what: str


def escape_css(value: str) -> str:
    """Escape characters that are not valid in a CSS identifier.

    Every reserved punctuation character gets a backslash prefix. A leading
    decimal digit is then replaced by ``\\<30 + digit> `` (decimal, followed
    by a space). Note this is not the hexadecimal escape the CSS syntax
    defines (``\\3X ``); the decimal form is kept as-is for compatibility.

    See https://mathiasbynens.be/notes/css-escapes
    """
    escaped = _ESCAPE_CSS_RE.sub(r"\\\1", value)
    if escaped and escaped[0] in "0123456789":
        escaped = f"\\{constants.UNICODE_CODE_POINT + int(escaped[0])} {escaped[1:]}"
    return escaped


def convert_locator(how: str, what: str) -> Locator:
    """Rewrite strategies that are not wire-legal under W3C"""
    if how == "class name":
        return Locator("css selector", f".{escape_css(what)}")
    if how == "id":
        return Locator("css selector", f"#{escape_css(what)}")
    if how == "name":
        return Locator("css selector", f"*[name='{escape_css(what)}']")
    if how == "tag name":
        return Locator("css selector", what)
    return Locator(how, what)


def extract_locator(*args: str, **kwargs: str) -> Locator:
    """Build a Locator from ``(how, what)`` or a single keyword argument

    ``extract_locator("css selector", "a")`` and ``extract_locator(css="a")``
    are equivalent.
    """
    if len(args) == 2 and not kwargs:
        how, what = args
    elif not args and len(kwargs) == 1:
        key, what = next(iter(kwargs.items()))
        if key not in FINDERS:
            raise BridgeArgumentError(f"cannot find elements with {key!r}")
        how = FINDERS[key]
    else:
        raise BridgeArgumentError(
            f"wrong number of arguments ({args!r}, {kwargs!r}), expected (how, what) or one keyword"
        )
    return Locator(how, what)


__all__: list[str] = [
    "FINDERS",
    "Locator",
    "escape_css",
    "convert_locator",
    "extract_locator",
]

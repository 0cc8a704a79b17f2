"""remote.commands

Command tables mapping a symbolic command name to its HTTP verb and
URL path template.

``W3C_COMMANDS`` holds the W3C WebDriver endpoints. ``LEGACY_COMMANDS``
is the protocol-agnostic table shared with the legacy JSON wire bridge;
the W3C bridge resolves ``status`` and ``is_element_displayed`` from it
because their wire shape did not change between protocol versions.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple

from ..exceptions import UnknownCommandError


class Command(NamedTuple):
    """Immutable command descriptor"""

    name: str
    verb: str
    path: str


def _table(entries: dict[str, tuple[str, str]]) -> Mapping[str, Command]:
    return MappingProxyType(
        {name: Command(name, verb, path) for name, (verb, path) in entries.items()}
    )


# ---------------------------------------------------------------------------
# Legacy (JSON wire protocol) table, only the entries the W3C bridge shares
# ---------------------------------------------------------------------------

LEGACY_COMMANDS: Mapping[str, Command] = _table(
    {
        "status": ("get", "/status"),
        "is_element_displayed": (
            "get",
            "/session/:session_id/element/:id/displayed",
        ),
    }
)

# ---------------------------------------------------------------------------
# W3C table
# ---------------------------------------------------------------------------

W3C_COMMANDS: Mapping[str, Command] = _table(
    {
        # session handling
        "new_session": ("post", "/session"),
        "delete_session": ("delete", "/session/:session_id"),
        # basic driver
        "get": ("post", "/session/:session_id/url"),
        "get_current_url": ("get", "/session/:session_id/url"),
        "back": ("post", "/session/:session_id/back"),
        "forward": ("post", "/session/:session_id/forward"),
        "refresh": ("post", "/session/:session_id/refresh"),
        "get_title": ("get", "/session/:session_id/title"),
        # window and frame handling
        "get_window_handle": ("get", "/session/:session_id/window"),
        "close_window": ("delete", "/session/:session_id/window"),
        "switch_to_window": ("post", "/session/:session_id/window"),
        "get_window_handles": ("get", "/session/:session_id/window/handles"),
        "fullscreen_window": ("post", "/session/:session_id/window/fullscreen"),
        "maximize_window": ("post", "/session/:session_id/window/maximize"),
        "set_window_size": ("post", "/session/:session_id/window/size"),
        "get_window_size": ("get", "/session/:session_id/window/size"),
        "set_window_position": ("post", "/session/:session_id/window/position"),
        "get_window_position": ("get", "/session/:session_id/window/position"),
        "switch_to_frame": ("post", "/session/:session_id/frame"),
        "switch_to_parent_frame": ("post", "/session/:session_id/frame/parent"),
        # element
        "find_element": ("post", "/session/:session_id/element"),
        "find_elements": ("post", "/session/:session_id/elements"),
        "find_child_element": ("post", "/session/:session_id/element/:id/element"),
        "find_child_elements": (
            "post",
            "/session/:session_id/element/:id/elements",
        ),
        "get_active_element": ("get", "/session/:session_id/element/active"),
        "is_element_selected": ("get", "/session/:session_id/element/:id/selected"),
        "get_element_attribute": (
            "get",
            "/session/:session_id/element/:id/attribute/:name",
        ),
        "get_element_property": (
            "get",
            "/session/:session_id/element/:id/property/:name",
        ),
        "get_element_css_value": (
            "get",
            "/session/:session_id/element/:id/css/:property_name",
        ),
        "get_element_text": ("get", "/session/:session_id/element/:id/text"),
        "get_element_tag_name": ("get", "/session/:session_id/element/:id/name"),
        "get_element_rect": ("get", "/session/:session_id/element/:id/rect"),
        "is_element_enabled": ("get", "/session/:session_id/element/:id/enabled"),
        # document handling
        "get_page_source": ("get", "/session/:session_id/source"),
        "execute_script": ("post", "/session/:session_id/execute/sync"),
        "execute_async_script": ("post", "/session/:session_id/execute/async"),
        # cookies
        "get_all_cookies": ("get", "/session/:session_id/cookie"),
        "get_cookie": ("get", "/session/:session_id/cookie/:name"),
        "add_cookie": ("post", "/session/:session_id/cookie"),
        "delete_cookie": ("delete", "/session/:session_id/cookie/:name"),
        "delete_all_cookies": ("delete", "/session/:session_id/cookie"),
        # timeouts
        "set_timeout": ("post", "/session/:session_id/timeouts"),
        # actions
        "actions": ("post", "/session/:session_id/actions"),
        "release_actions": ("delete", "/session/:session_id/actions"),
        # element operations
        "element_click": ("post", "/session/:session_id/element/:id/click"),
        "element_tap": ("post", "/session/:session_id/element/:id/tap"),
        "element_clear": ("post", "/session/:session_id/element/:id/clear"),
        "element_send_keys": ("post", "/session/:session_id/element/:id/value"),
        # alerts
        "dismiss_alert": ("post", "/session/:session_id/alert/dismiss"),
        "accept_alert": ("post", "/session/:session_id/alert/accept"),
        "get_alert_text": ("get", "/session/:session_id/alert/text"),
        "send_alert_text": ("post", "/session/:session_id/alert/text"),
        # screenshot
        "take_screenshot": ("get", "/session/:session_id/screenshot"),
        "take_element_screenshot": (
            "get",
            "/session/:session_id/element/:id/screenshot",
        ),
    }
)

# Commands whose wire shape is shared with the legacy protocol
SHARED_COMMANDS: frozenset[str] = frozenset({"status", "is_element_displayed"})


def lookup(command: str) -> Command:
    """Return the descriptor for ``command``

    Raises:
        UnknownCommandError: the command is in neither table
    """
    table = LEGACY_COMMANDS if command in SHARED_COMMANDS else W3C_COMMANDS
    try:
        return table[command]
    except (KeyError, TypeError):
        raise UnknownCommandError(command) from None


__all__: list[str] = [
    "Command",
    "LEGACY_COMMANDS",
    "W3C_COMMANDS",
    "SHARED_COMMANDS",
    "lookup",
]

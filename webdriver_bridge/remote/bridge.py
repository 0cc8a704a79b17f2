"""remote.bridge

Low level bridge to a W3C WebDriver server, through which the rest of an
automation API works.

A bridge owns one transport and one remote session. Construction creates
the session; ``quit`` deletes it and releases the transport. Every command
goes through ``execute``: the symbolic command is resolved to a verb and a
path, the path placeholders are filled, the request is sent and the
``value`` of the response payload is returned.

Calls are synchronous and a bridge must not be shared by unsynchronized
callers.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from .. import constants
from ..exceptions import (BridgeArgumentError, TransportClosedError,
                          UnsupportedOperationError, WebDriverError)
from ..utils import add_debug_log, log_operation_error
from .atoms import Atoms
from .capabilities import Capabilities, coerce_capabilities
from .commands import Command, lookup
from .element import Element, ElementCodec
from .geometry import Dimension, Point
from .locators import convert_locator, extract_locator
from .path import resolve_path
from .transport import DefaultHttpClient, HttpClient

logger = logging.getLogger(__name__)

CURRENT_WINDOW = "current"

_PAGE_SOURCE_SCRIPT = (
    "var source = document.documentElement.outerHTML;"
    "if (!source) { source = new XMLSerializer().serializeToString(document); }"
    "return source;"
)

_SUBMIT_SCRIPT = (
    "var e = arguments[0].ownerDocument.createEvent('Event');"
    "e.initEvent('submit', true, true);"
    "if (arguments[0].dispatchEvent(e)) { arguments[0].submit() }"
)


def _payload_of(response: Any) -> Any:
    return getattr(response, "payload", response)


class W3CBridge:
    """Bridge speaking the W3C dialect of the WebDriver wire protocol

    Keyword options:
        url: base URL of the remote server
            (default ``WEBDRIVER_URL`` or ``http://localhost:<port>/wd/hub/``)
        port: port used to build the default URL (default 4444)
        http_client: transport implementing ``call(verb, path, body)``
        desired_capabilities: ``Capabilities``, a dict, or a preset name
        marionette: vendor flag copied into the capabilities when not None
    """

    # Errors ignored while quitting: the transport is already gone
    QUIT_ERRORS: tuple[type[BaseException], ...] = (TransportClosedError,)

    def __init__(self, **opts: Any):
        opts = dict(opts)

        port = opts.pop("port", None) or constants.DEFAULT_PORT
        http_client: HttpClient | None = opts.pop("http_client", None)
        desired = opts.pop("desired_capabilities", None)
        url = opts.pop("url", None) or constants.get_default_server_url(port)
        marionette = opts.pop("marionette", None)

        if opts:
            plural = "s" if len(opts) != 1 else ""
            raise BridgeArgumentError(f"unknown option{plural}: {opts!r}")

        if http_client is None:
            http_client = DefaultHttpClient()
        if desired is None:
            desired = constants.DEFAULT_BROWSER

        desired_capabilities = coerce_capabilities(desired)
        if marionette is not None:
            desired_capabilities = desired_capabilities.copy()
            desired_capabilities["marionette"] = marionette

        url = str(url)
        if not url.endswith("/"):
            url += "/"
        http_client.server_url = url

        self.http = http_client
        self.codec = ElementCodec()
        self.atoms = Atoms()
        self._session_id: str | None = None
        self._capabilities: Capabilities | None = None

        add_debug_log(f"W3CBridge: creating session on {url}", level="INFO")
        self._capabilities = self.create_session(desired_capabilities)

    # -----------------------------------------------------------------------
    # Session lifecycle
    # -----------------------------------------------------------------------

    @property
    def capabilities(self) -> Capabilities | None:
        return self._capabilities

    @property
    def session_id(self) -> str:
        """Current session id

        Raises:
            WebDriverError: no session was created
        """
        if self._session_id is None:
            raise WebDriverError("no current session exists")
        return self._session_id

    @property
    def browser(self) -> str:
        name = self._capabilities.browser_name if self._capabilities else None
        return name.replace(" ", "_") if name else "unknown"

    def create_session(self, desired_capabilities: Capabilities) -> Capabilities:
        """Create the remote session and return the negotiated capabilities

        Raises:
            WebDriverError: the response carries no session id
        """
        resp = self.raw_execute(
            "new_session", body={"desiredCapabilities": desired_capabilities.as_json()}
        )
        payload = _payload_of(resp) or {}
        session_id = payload.get("sessionId")
        value = payload.get("value")

        # newer servers nest the session id and capabilities inside "value"
        if session_id is None and isinstance(value, dict) and value.get("sessionId"):
            session_id = value["sessionId"]
            value = value.get("capabilities")

        if not session_id:
            raise WebDriverError("no sessionId in returned payload")

        self._session_id = session_id
        add_debug_log(f"W3CBridge: session {session_id} created", level="INFO")
        return Capabilities.json_create(value)

    def status(self) -> Any:
        return self.execute("status")

    def quit(self) -> None:
        """Delete the session and release the transport

        Only a transport that is already closed is ignored.
        """
        try:
            self.execute("delete_session")
            self._session_id = None
            self.http.close()
        except self.QUIT_ERRORS as e:
            add_debug_log(f"W3CBridge.quit: ignoring {e!r}")

    # -----------------------------------------------------------------------
    # Command execution
    # -----------------------------------------------------------------------

    def commands(self, command: str) -> Command:
        return lookup(command)

    def execute(
        self,
        command: str,
        url_params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> Any:
        """Execute a command and return the ``value`` of the response payload

        The whole payload is returned when it has no ``value`` key.
        """
        payload = _payload_of(self.raw_execute(command, url_params, body))
        if isinstance(payload, Mapping) and "value" in payload:
            return payload["value"]
        return payload

    def raw_execute(
        self,
        command: str,
        url_params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> Any:
        """Execute a command and return the transport's response unchanged"""
        descriptor = self.commands(command)
        path = resolve_path(command, descriptor.path, self._session_id, url_params)

        logger.debug("-> %s %s", descriptor.verb.upper(), path)
        try:
            return self.http.call(
                descriptor.verb, path, self.codec.encode(body) if body is not None else None
            )
        except Exception as e:
            log_operation_error(command, str(e), {"verb": descriptor.verb, "path": path})
            raise

    # -----------------------------------------------------------------------
    # Navigation
    # -----------------------------------------------------------------------

    def get(self, url: str) -> None:
        self.execute("get", body={"url": url})

    def go_back(self) -> None:
        self.execute("back")

    def go_forward(self) -> None:
        self.execute("forward")

    def refresh(self) -> None:
        self.execute("refresh")

    @property
    def url(self) -> str:
        return self.execute("get_current_url")

    @property
    def title(self) -> str:
        return self.execute("get_title")

    @property
    def page_source(self) -> str:
        return self.execute_script(_PAGE_SOURCE_SCRIPT)

    # -----------------------------------------------------------------------
    # Timeouts (server side waits)
    # -----------------------------------------------------------------------

    def timeout(self, type_: str, milliseconds: int) -> None:
        self.execute("set_timeout", body={"type": type_, "ms": milliseconds})

    def set_implicit_wait_timeout(self, milliseconds: int) -> None:
        self.timeout("implicit", milliseconds)

    def set_script_timeout(self, milliseconds: int) -> None:
        self.timeout("script", milliseconds)

    def set_page_load_timeout(self, milliseconds: int) -> None:
        self.timeout("page load", milliseconds)

    # -----------------------------------------------------------------------
    # Alerts
    # -----------------------------------------------------------------------

    def accept_alert(self) -> None:
        self.execute("accept_alert")

    def dismiss_alert(self) -> None:
        self.execute("dismiss_alert")

    def send_alert_text(self, keys: str) -> None:
        self.execute("send_alert_text", body={"value": list(keys)})

    @property
    def alert_text(self) -> str:
        return self.execute("get_alert_text")

    # -----------------------------------------------------------------------
    # Windows and frames
    # -----------------------------------------------------------------------

    def switch_to_window(self, name: str) -> None:
        self.execute("switch_to_window", body={"handle": name})

    def switch_to_frame(self, frame_id: Any) -> None:
        if isinstance(frame_id, str):
            frame_id = self.find_element_by("id", frame_id)
        self.execute("switch_to_frame", body={"id": frame_id})

    def switch_to_parent_frame(self) -> None:
        self.execute("switch_to_parent_frame")

    def switch_to_default_content(self) -> None:
        self.switch_to_frame(None)

    def close(self) -> Any:
        return self.execute("close_window")

    @property
    def window_handles(self) -> list[str]:
        return self.execute("get_window_handles")

    @property
    def window_handle(self) -> str:
        return self.execute("get_window_handle")

    def resize_window(self, width: int, height: int, handle: str = CURRENT_WINDOW) -> None:
        if handle != CURRENT_WINDOW:
            raise UnsupportedOperationError(
                "Switch to desired window before changing its size"
            )
        self.execute("set_window_size", body={"width": width, "height": height})

    def maximize_window(self, handle: str = CURRENT_WINDOW) -> None:
        if handle != CURRENT_WINDOW:
            raise UnsupportedOperationError(
                "Switch to desired window before changing its size"
            )
        self.execute("maximize_window")

    def full_screen_window(self) -> None:
        self.execute("fullscreen_window")

    def window_size(self, handle: str = CURRENT_WINDOW) -> Dimension:
        if handle != CURRENT_WINDOW:
            raise UnsupportedOperationError(
                "Switch to desired window before getting its size"
            )
        data = self.execute("get_window_size")
        return Dimension(data["width"], data["height"])

    def reposition_window(self, x: int, y: int) -> None:
        self.execute("set_window_position", body={"x": x, "y": y})

    @property
    def window_position(self) -> Point:
        data = self.execute("get_window_position")
        return Point(data["x"], data["y"])

    def screenshot(self) -> str:
        """Base64 encoded PNG of the current window"""
        return self.execute("take_screenshot")

    # -----------------------------------------------------------------------
    # Web storage
    # -----------------------------------------------------------------------

    def local_storage_item(self, key: str, value: str | None = None) -> Any:
        return self._storage_item("localStorage", key, value)

    def remove_local_storage_item(self, key: str) -> Any:
        return self.execute_script("localStorage.removeItem(arguments[0])", key)

    def local_storage_keys(self) -> list[str]:
        return self.execute_script("return Object.keys(localStorage)")

    def clear_local_storage(self) -> None:
        self.execute_script("localStorage.clear()")

    def local_storage_size(self) -> int:
        return self.execute_script("return localStorage.length")

    def session_storage_item(self, key: str, value: str | None = None) -> Any:
        return self._storage_item("sessionStorage", key, value)

    def remove_session_storage_item(self, key: str) -> Any:
        return self.execute_script("sessionStorage.removeItem(arguments[0])", key)

    def session_storage_keys(self) -> list[str]:
        return self.execute_script("return Object.keys(sessionStorage)")

    def clear_session_storage(self) -> None:
        self.execute_script("sessionStorage.clear()")

    def session_storage_size(self) -> int:
        return self.execute_script("return sessionStorage.length")

    def _storage_item(self, storage: str, key: str, value: str | None) -> Any:
        if value is not None:
            return self.execute_script(f"{storage}.setItem(arguments[0], arguments[1])", key, value)
        return self.execute_script(f"return {storage}.getItem(arguments[0])", key)

    # -----------------------------------------------------------------------
    # Operations without a W3C equivalent
    # -----------------------------------------------------------------------

    def location(self) -> Any:
        raise UnsupportedOperationError(
            "The W3C standard does not currently support getting location"
        )

    def set_location(self, latitude: float, longitude: float, altitude: float) -> Any:
        raise UnsupportedOperationError(
            "The W3C standard does not currently support setting location"
        )

    def network_connection(self) -> Any:
        raise UnsupportedOperationError(
            "The W3C standard does not currently support getting network connection"
        )

    def set_network_connection(self, connection_type: Any) -> Any:
        raise UnsupportedOperationError(
            "The W3C standard does not currently support setting network connection"
        )

    def mouse(self) -> Any:
        raise UnsupportedOperationError("mouse is no longer supported, use send_actions instead")

    def keyboard(self) -> Any:
        raise UnsupportedOperationError("keyboard is no longer supported, use send_actions instead")

    # -----------------------------------------------------------------------
    # Script execution
    # -----------------------------------------------------------------------

    def execute_script(self, script: str, *args: Any) -> Any:
        result = self.execute("execute_script", body={"script": script, "args": list(args)})
        return self.codec.unwrap_script_result(self, result)

    def execute_async_script(self, script: str, *args: Any) -> Any:
        result = self.execute(
            "execute_async_script", body={"script": script, "args": list(args)}
        )
        return self.codec.unwrap_script_result(self, result)

    # -----------------------------------------------------------------------
    # Cookies
    # -----------------------------------------------------------------------

    def add_cookie(self, cookie: Mapping[str, Any]) -> None:
        self.execute("add_cookie", body={"cookie": dict(cookie)})

    def delete_cookie(self, name: str) -> None:
        self.execute("delete_cookie", {"name": name})

    def cookie(self, name: str) -> Any:
        return self.execute("get_cookie", {"name": name})

    def cookies(self) -> list[dict[str, Any]]:
        return self.execute("get_all_cookies")

    def delete_all_cookies(self) -> None:
        self.execute("delete_all_cookies")

    # -----------------------------------------------------------------------
    # Actions
    # -----------------------------------------------------------------------

    def send_actions(self, data: list[dict[str, Any]]) -> None:
        self.execute("actions", body={"actions": data})

    def release_actions(self) -> None:
        self.execute("release_actions")

    # -----------------------------------------------------------------------
    # Element operations
    # -----------------------------------------------------------------------

    def click_element(self, element: Any) -> None:
        self.execute("element_click", {"id": element})

    def send_keys_to_element(self, element: Any, keys: Iterable[str]) -> None:
        self.execute("element_send_keys", {"id": element}, {"value": list("".join(keys))})

    def clear_element(self, element: Any) -> None:
        self.execute("element_clear", {"id": element})

    def submit_element(self, element: Any) -> None:
        form = self.find_element_by("xpath", "./ancestor-or-self::form", element)
        self.execute_script(_SUBMIT_SCRIPT, form)

    def element_tag_name(self, element: Any) -> str:
        return self.execute("get_element_tag_name", {"id": element})

    def element_attribute(self, element: Any, name: str) -> Any:
        if not isinstance(element, Element):
            element = Element(self, element)
        return self.atoms.execute(self, "getAttribute", element, name)

    def element_property(self, element: Any, name: str) -> Any:
        return self.execute("get_element_property", {"id": element, "name": name})

    def element_value(self, element: Any) -> Any:
        return self.element_property(element, "value")

    def element_text(self, element: Any) -> str:
        return self.execute("get_element_text", {"id": element})

    def element_rect(self, element: Any) -> dict[str, Any]:
        return self.execute("get_element_rect", {"id": element})

    def element_location(self, element: Any) -> Point:
        data = self.element_rect(element)
        return Point(data["x"], data["y"])

    def element_location_once_scrolled_into_view(self, element: Any) -> Point:
        self.send_keys_to_element(element, [""])
        return self.element_location(element)

    def element_size(self, element: Any) -> Dimension:
        data = self.element_rect(element)
        return Dimension(data["width"], data["height"])

    def element_enabled(self, element: Any) -> bool:
        return self.execute("is_element_enabled", {"id": element})

    def element_selected(self, element: Any) -> bool:
        return self.execute("is_element_selected", {"id": element})

    def element_displayed(self, element: Any) -> bool:
        return self.execute("is_element_displayed", {"id": element})

    def element_value_of_css_property(self, element: Any, prop: str) -> str:
        return self.execute("get_element_css_value", {"id": element, "property_name": prop})

    # -----------------------------------------------------------------------
    # Finding elements
    # -----------------------------------------------------------------------

    def active_element(self) -> Element:
        return self.codec.wrap(self, self.execute("get_active_element"))

    switch_to_active_element = active_element

    def find_element(self, *args: str, **kwargs: str) -> Element:
        """``find_element("css selector", "a")`` or ``find_element(css="a")``"""
        how, what = extract_locator(*args, **kwargs)
        return self.find_element_by(how, what)

    def find_elements(self, *args: str, **kwargs: str) -> list[Element]:
        how, what = extract_locator(*args, **kwargs)
        return self.find_elements_by(how, what)

    def find_element_by(self, how: str, what: str, parent: Any = None) -> Element:
        how, what = convert_locator(how, what)

        if parent is not None:
            ref = self.execute(
                "find_child_element", {"id": parent}, {"using": how, "value": what}
            )
        else:
            ref = self.execute("find_element", body={"using": how, "value": what})
        return self.codec.wrap(self, ref)

    def find_elements_by(self, how: str, what: str, parent: Any = None) -> list[Element]:
        how, what = convert_locator(how, what)

        if parent is not None:
            refs = self.execute(
                "find_child_elements", {"id": parent}, {"using": how, "value": what}
            )
        else:
            refs = self.execute("find_elements", body={"using": how, "value": what})
        return self.codec.wrap_all(self, refs)


__all__: list[str] = ["W3CBridge", "CURRENT_WINDOW"]

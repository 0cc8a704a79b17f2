"""remote.element

Element handles and the codec converting them to and from the wire.

The server names an element with a JSON object carrying a reference key
(``element-6066-11e4-a52e-4f735466cecf`` for W3C, ``ELEMENT`` for the
legacy protocol). ``ElementCodec`` turns such objects into ``Element``
handles, turns handles back into reference objects when they are sent as
arguments, and walks script results replacing embedded references.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, Iterable

from .. import constants
from ..exceptions import WebDriverError
from .locators import extract_locator

if TYPE_CHECKING:  # pragma: no cover
    from .bridge import W3CBridge


class Element:
    """Handle to a DOM element inside the remote session.

    Holds the raw reference id and a weak reference to the bridge that
    created it. The handle never keeps the bridge alive.
    """

    def __init__(self, bridge: "W3CBridge", ref: str):
        self._bridge_ref = weakref.ref(bridge)
        self.ref = ref

    @property
    def bridge(self) -> "W3CBridge":
        bridge = self._bridge_ref()
        if bridge is None:
            raise WebDriverError(f"bridge for element {self.ref!r} is no longer available")
        return bridge

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.ref == other.ref

    def __hash__(self) -> int:
        return hash(self.ref)

    def __repr__(self) -> str:
        return f"<Element ref={self.ref!r}>"

    def as_json(self) -> dict[str, str]:
        """Wire form of this handle"""
        return {constants.ELEMENT_KEY: self.ref}

    # -----------------------------------------------------------------------
    # Element scoped commands
    # -----------------------------------------------------------------------

    def click(self) -> None:
        self.bridge.click_element(self.ref)

    def clear(self) -> None:
        self.bridge.clear_element(self.ref)

    def send_keys(self, *keys: str) -> None:
        self.bridge.send_keys_to_element(self.ref, keys)

    def submit(self) -> None:
        self.bridge.submit_element(self)

    @property
    def text(self) -> str:
        return self.bridge.element_text(self.ref)

    @property
    def tag_name(self) -> str:
        return self.bridge.element_tag_name(self.ref)

    def get_attribute(self, name: str) -> Any:
        return self.bridge.element_attribute(self, name)

    def get_property(self, name: str) -> Any:
        return self.bridge.element_property(self.ref, name)

    def css_value(self, property_name: str) -> str:
        return self.bridge.element_value_of_css_property(self.ref, property_name)

    def is_displayed(self) -> bool:
        return self.bridge.element_displayed(self.ref)

    def is_enabled(self) -> bool:
        return self.bridge.element_enabled(self.ref)

    def is_selected(self) -> bool:
        return self.bridge.element_selected(self.ref)

    @property
    def rect(self) -> dict[str, Any]:
        return self.bridge.element_rect(self.ref)

    @property
    def location(self) -> tuple[Any, Any]:
        return self.bridge.element_location(self.ref)

    @property
    def size(self) -> tuple[Any, Any]:
        return self.bridge.element_size(self.ref)

    def find_element(self, *args: str, **kwargs: str) -> "Element":
        """Find the first element below this one"""
        how, what = extract_locator(*args, **kwargs)
        return self.bridge.find_element_by(how, what, self.ref)

    def find_elements(self, *args: str, **kwargs: str) -> list["Element"]:
        """Find all elements below this one"""
        how, what = extract_locator(*args, **kwargs)
        return self.bridge.find_elements_by(how, what, self.ref)


class ElementCodec:
    """Converts element references between wire objects and handles"""

    def __init__(
        self,
        keys: Iterable[str] = (constants.ELEMENT_KEY, constants.LEGACY_ELEMENT_KEY),
    ):
        self.keys: tuple[str, ...] = tuple(keys)

    def is_reference(self, obj: Any) -> bool:
        """Return True if ``obj`` is an element reference object"""
        return isinstance(obj, dict) and any(key in obj for key in self.keys)

    def element_id_from(self, obj: Any) -> str:
        """Extract the raw element id from a reference object"""
        if isinstance(obj, dict):
            for key in self.keys:
                if key in obj:
                    return obj[key]
        raise WebDriverError(f"no element reference in {obj!r}")

    def wrap(self, bridge: "W3CBridge", obj: Any) -> Element:
        return Element(bridge, self.element_id_from(obj))

    def wrap_all(self, bridge: "W3CBridge", objs: Iterable[Any]) -> list[Element]:
        """Wrap every reference, keeping the order the server returned"""
        return [self.wrap(bridge, obj) for obj in objs]

    def encode(self, value: Any) -> Any:
        """Replace handles with their wire form anywhere inside ``value``"""
        if isinstance(value, Element):
            return value.as_json()
        if isinstance(value, (list, tuple)):
            return [self.encode(item) for item in value]
        if isinstance(value, dict):
            return {key: self.encode(item) for key, item in value.items()}
        return value

    def unwrap_script_result(self, bridge: "W3CBridge", value: Any) -> Any:
        """Replace reference objects with handles anywhere inside ``value``

        Lists keep their order and dicts keep their key set; every other
        value is returned unchanged.
        """
        if isinstance(value, list):
            return [self.unwrap_script_result(bridge, item) for item in value]
        if isinstance(value, dict):
            if self.is_reference(value):
                return self.wrap(bridge, value)
            return {
                key: self.unwrap_script_result(bridge, item)
                for key, item in value.items()
            }
        return value


__all__: list[str] = ["Element", "ElementCodec"]

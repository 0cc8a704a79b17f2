"""remote.capabilities

Capability set exchanged at session creation.

Keys are snake_case on the Python side and camelCase on the wire.
Vendor keys (containing ``:``) and unknown keys are kept untouched.
"""

from __future__ import annotations

import re
from typing import Any, Iterator, Mapping

from ..exceptions import BridgeArgumentError


def _camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _snake(key: str) -> str:
    return re.sub(r"(?<!^)([A-Z])", r"_\1", key).lower()


class Capabilities:
    """Dict-backed capability set"""

    PRESETS: dict[str, dict[str, Any]] = {
        "firefox": {"browser_name": "firefox", "marionette": True},
        "chrome": {"browser_name": "chrome"},
        "edge": {"browser_name": "MicrosoftEdge", "platform_name": "windows"},
        "safari": {"browser_name": "safari", "platform_name": "mac"},
        "internet_explorer": {"browser_name": "internet explorer", "platform_name": "windows"},
    }

    def __init__(self, **opts: Any):
        self._caps: dict[str, Any] = dict(opts)

    @classmethod
    def from_preset(cls, name: str) -> "Capabilities":
        """Build a capability set from a named preset (``"firefox"``, ``"chrome"``, ...)"""
        preset = cls.PRESETS.get(name)
        if preset is None:
            raise BridgeArgumentError(f"unknown capabilities preset: {name!r}")
        return cls(**preset)

    @classmethod
    def firefox(cls) -> "Capabilities":
        return cls.from_preset("firefox")

    @classmethod
    def chrome(cls) -> "Capabilities":
        return cls.from_preset("chrome")

    @classmethod
    def json_create(cls, data: Mapping[str, Any] | None) -> "Capabilities":
        """Build a capability set from a server payload"""
        caps = cls()
        for key, value in (data or {}).items():
            if ":" in key:
                caps[key] = value
            else:
                caps[_snake(key)] = value
        return caps

    def as_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in self._caps.items():
            if value is None:
                continue
            wire_key = key if ":" in key else _camel(key)
            result[wire_key] = value.as_json() if hasattr(value, "as_json") else value
        return result

    @property
    def browser_name(self) -> str | None:
        return self._caps.get("browser_name")

    @property
    def browser_version(self) -> str | None:
        return self._caps.get("browser_version")

    def get(self, key: str, default: Any = None) -> Any:
        return self._caps.get(key, default)

    def copy(self) -> "Capabilities":
        return type(self)(**self._caps)

    def __getitem__(self, key: str) -> Any:
        return self._caps.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self._caps[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._caps

    def __iter__(self) -> Iterator[str]:
        return iter(self._caps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Capabilities):
            return NotImplemented
        return self.as_json() == other.as_json()

    def __repr__(self) -> str:
        return f"Capabilities({self._caps!r})"


def coerce_capabilities(value: Any) -> Capabilities:
    """Accept a Capabilities, a mapping or a preset name"""
    if isinstance(value, Capabilities):
        return value
    if isinstance(value, str):
        return Capabilities.from_preset(value)
    if isinstance(value, Mapping):
        return Capabilities.json_create(value)
    raise BridgeArgumentError(f"invalid desired_capabilities: {value!r}")


__all__: list[str] = ["Capabilities", "coerce_capabilities"]

"""remote.atoms

Bundled JavaScript atoms executed through ``execute_script``.

Each atom is a ``function(...) {...}`` expression stored as
``atoms/<name>.js`` package data.
"""

from __future__ import annotations

from importlib import resources
from typing import TYPE_CHECKING, Any

from ..exceptions import BridgeArgumentError

if TYPE_CHECKING:  # pragma: no cover
    from .bridge import W3CBridge


class Atoms:
    """Loads atoms and runs them against a bridge"""

    def __init__(self, package: str = __package__, directory: str = "atoms"):
        self._package = package
        self._directory = directory
        self._cache: dict[str, str] = {}

    def read(self, name: str) -> str:
        """Return the source of atom ``name``"""
        if name not in self._cache:
            source = (
                resources.files(self._package)
                .joinpath(self._directory)
                .joinpath(f"{name}.js")
            )
            if not source.is_file():
                raise BridgeArgumentError(f"unknown atom: {name!r}")
            self._cache[name] = source.read_text(encoding="utf-8")
        return self._cache[name]

    def script(self, name: str) -> str:
        return f"return ({self.read(name)}).apply(null, arguments)"

    def execute(self, bridge: "W3CBridge", name: str, *args: Any) -> Any:
        return bridge.execute_script(self.script(name), *args)


__all__: list[str] = ["Atoms"]

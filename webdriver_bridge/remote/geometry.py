"""remote.geometry

Value types for window and element positions and sizes.
"""

from typing import Any, NamedTuple


class Point(NamedTuple):
    x: Any
    y: Any


class Dimension(NamedTuple):
    width: Any
    height: Any


__all__: list[str] = ["Point", "Dimension"]

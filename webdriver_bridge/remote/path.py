"""remote.path

Fills the ``:placeholder`` tokens of a command path template with the
active session id and caller supplied URL parameters.
"""

from __future__ import annotations

import re
from typing import Any, Mapping
from urllib.parse import quote

from ..exceptions import BridgeArgumentError, WebDriverError
from .element import Element

SESSION_ID_TOKEN = ":session_id"

# A placeholder is bounded by "/" or the end of the template
_PLACEHOLDER_RE = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)(?=/|$)")


def escape(value: Any) -> str:
    """Percent-encode ``value`` leaving only RFC 3986 unreserved characters"""
    if isinstance(value, Element):
        value = value.ref
    elif isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe="")


def _token_re(key: str) -> re.Pattern[str]:
    return re.compile(re.escape(f":{key}") + r"(?=/|$)")


def resolve_path(
    command: str,
    template: str,
    session_id: str | None,
    url_params: Mapping[str, Any] | None = None,
) -> str:
    """Return ``template`` with every placeholder substituted

    Args:
        command: Command name, used in error messages
        template: Path template such as ``/session/:session_id/element/:id/text``
        session_id: Active session id, ``None`` before a session exists
        url_params: Values for the remaining placeholders

    Raises:
        WebDriverError: the template needs a session and none is set
        BridgeArgumentError: a parameter has no placeholder, or a placeholder
            is left unfilled
    """
    path = template

    if SESSION_ID_TOKEN in path:
        if session_id is None:
            raise WebDriverError("no current session exists")
        path = path.replace(SESSION_ID_TOKEN, quote(str(session_id), safe=""), 1)

    params = dict(url_params or {})
    for key, value in params.items():
        path, count = _token_re(str(key)).subn(
            lambda _m, v=value: escape(v), path, count=1
        )
        if count == 0:
            raise BridgeArgumentError(f"{params!r} invalid for {command!r}")

    leftover = _PLACEHOLDER_RE.search(path)
    if leftover:
        raise BridgeArgumentError(
            f"missing parameter {leftover.group(1)!r} for {command!r}"
        )

    return path


__all__: list[str] = ["resolve_path", "escape", "SESSION_ID_TOKEN"]

"""In-memory transport used by the bridge tests"""

from __future__ import annotations

from typing import Any

DEFAULT_SESSION_ID = "abc123"


class FakeHttpClient:
    """Records every call and answers from a route table

    A route value may be a payload dict, an exception instance to raise,
    or a callable receiving the request body.
    """

    def __init__(
        self,
        session_id: str | None = DEFAULT_SESSION_ID,
        capabilities: dict[str, Any] | None = None,
    ):
        self.server_url: str | None = None
        self.calls: list[tuple[str, str, Any]] = []
        self.closed = False
        self.close_error: BaseException | None = None
        self._routes: dict[tuple[str, str], Any] = {}

        new_session: dict[str, Any] = {
            "value": capabilities if capabilities is not None else {"browserName": "firefox"}
        }
        if session_id is not None:
            new_session["sessionId"] = session_id
        self.route("post", "/session", new_session)

    def route(self, verb: str, path: str, result: Any) -> None:
        self._routes[(verb, path)] = result

    def call(self, verb: str, path: str, body: Any = None) -> Any:
        self.calls.append((verb, path, body))
        result = self._routes.get((verb, path), {"value": None})
        if isinstance(result, BaseException):
            raise result
        if callable(result):
            return result(body)
        return result

    def close(self) -> None:
        if self.close_error is not None:
            raise self.close_error
        self.closed = True

    @property
    def last_call(self) -> tuple[str, str, Any]:
        return self.calls[-1]


class Owner:
    """Weak-referenceable stand-in for a bridge"""

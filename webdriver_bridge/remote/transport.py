"""remote.transport

HTTP transport used by the bridge.

Any object with a ``server_url`` attribute, a ``call(verb, path, body)``
method and a ``close()`` method can stand in for ``DefaultHttpClient``
(an in-memory fake in tests, a logging wrapper, ...). ``call`` may return a
``Response`` or a bare payload dict.

The transport owns client-side timeouts. It never retries.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol
from urllib.parse import urljoin

import requests

from .. import constants
from ..exceptions import (ServerError, TransportClosedError, WebDriverError,
                          error_for_code)
from ..utils import add_debug_log, log_json_debug

logger = logging.getLogger(__name__)


class Response:
    """Status code and decoded JSON payload of one wire exchange"""

    def __init__(self, code: int, payload: dict[str, Any]):
        self.code = code
        self.payload = payload

    def __getitem__(self, key: str) -> Any:
        return self.payload[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default)

    def __repr__(self) -> str:
        return f"Response(code={self.code}, payload={self.payload!r})"


class HttpClient(Protocol):
    """Interface the bridge expects from its transport"""

    server_url: str | None

    def call(self, verb: str, path: str, body: dict[str, Any] | None = None) -> Any:
        ...

    def close(self) -> None:
        ...


class DefaultHttpClient:
    """``requests`` based transport"""

    HEADERS = {
        "Accept": "application/json",
        "Content-Type": "application/json; charset=UTF-8",
        "User-Agent": "webdriver-bridge (python)",
    }

    def __init__(
        self,
        timeout: float = constants.DEFAULT_HTTP_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.server_url: str | None = None
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def call(self, verb: str, path: str, body: dict[str, Any] | None = None) -> Response:
        """Send one request and return the decoded response

        Raises:
            TransportClosedError: the client was closed
            ServerError: the server answered with an error payload
            WebDriverError: the request could not be sent
        """
        if self._closed:
            raise TransportClosedError("HTTP client is closed")
        if not self.server_url:
            raise WebDriverError("server_url is not set on the HTTP client")

        url = urljoin(self.server_url, path.lstrip("/"))
        if body is not None:
            data = json.dumps(body)
        elif verb.lower() == "post":
            data = "{}"
        else:
            data = None

        log_json_debug(f"{verb.upper()} {url}", body)
        try:
            resp = self._session.request(
                verb.upper(),
                url,
                data=data,
                headers=self.HEADERS,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            add_debug_log(f"HTTP request failed: {verb.upper()} {url}: {e}", level="ERROR")
            raise WebDriverError(f"HTTP request failed: {verb.upper()} {url}: {e}") from e

        return self._create_response(resp)

    def _create_response(self, resp: requests.Response) -> Response:
        code = resp.status_code
        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if not isinstance(payload, dict):
            if code >= 400:
                raise ServerError(
                    f"unexpected response, code={code}, content={resp.text[:200]!r}",
                    status_code=code,
                )
            return Response(code, {"value": payload if payload is not None else resp.text})

        log_json_debug(f"<- {code}", payload)
        self._assert_ok(code, payload)
        return Response(code, payload)

    @staticmethod
    def _assert_ok(code: int, payload: dict[str, Any]) -> None:
        value = payload.get("value")
        # W3C error payloads come with a 4xx/5xx status
        if code >= 400 and isinstance(value, dict) and "error" in value:
            error = value["error"]
            raise error_for_code(error)(
                value.get("message") or error,
                error=error,
                stacktrace=value.get("stacktrace"),
                status_code=code,
            )

        # legacy protocol: non-zero numeric status
        status = payload.get("status")
        if isinstance(status, int) and status != 0:
            message = value.get("message") if isinstance(value, dict) else value
            raise ServerError(str(message or f"status {status}"), status_code=code)

        if code >= 400:
            raise ServerError(f"unexpected response, code={code}", status_code=code)

    def close(self) -> None:
        """Release the underlying connection pool

        Raises:
            TransportClosedError: the client was already closed
        """
        if self._closed:
            raise TransportClosedError("HTTP client already closed")
        self._closed = True
        self._session.close()


__all__: list[str] = ["Response", "HttpClient", "DefaultHttpClient"]

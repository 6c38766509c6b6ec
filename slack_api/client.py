from __future__ import annotations

import json
import time
from typing import Any, Callable, Mapping

import certifi
import requests

from .http import HttpTransport
from .models import RequestOptions
from .params import merge_auth

DEFAULT_URL = "https://slack.com/api"

# CA bundle used when neither the caller nor the transport picked one.
BUNDLED_CA_PATH = certifi.where()

# Raised unchanged from the transport and the JSON decoder respectively.
TransportError = requests.RequestException
ParseError = json.JSONDecodeError

Parameters = RequestOptions | Mapping[str, Any] | None


class SlackApi:
    """Thin client for the Slack web API.

    Every call is sent as ``<base_url>/<api_method>`` with the current token
    and a ``t`` timestamp added to the query string. The response body is
    decoded as JSON and returned as-is; Slack's own ``"ok": false`` errors are
    left for the caller to inspect.
    """

    def __init__(
        self,
        transport: Any = None,
        token: str | None = None,
        *,
        base_url: str = DEFAULT_URL,
        verify: str | bool | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.url = base_url
        self.clock = clock
        self._client: Any = None
        self.with_transport(transport, verify)
        self.set_token(token)

    def with_transport_factory(self, factory: Callable[[], Any], verify: str | bool | None = None) -> "SlackApi":
        """Build a transport with `factory` and use it, replacing any current one."""
        self._client = factory()
        self.set_ssl_verify_path(verify)
        return self

    def with_transport(self, transport: Any = None, verify: str | bool | None = None) -> "SlackApi":
        """Use `transport` unless one is already configured.

        With no transport configured and none given, a default `HttpTransport`
        is created. An existing transport is never replaced here; use
        `with_transport_factory` for that.
        """
        # TODO: let plain instances replace the transport too, like factories do.
        if self._client is None:
            self._client = transport if transport is not None else HttpTransport()
        self.set_ssl_verify_path(verify)
        return self

    @property
    def client(self) -> Any:
        return self._client

    def get_client(self) -> Any:
        return self._client

    def set_ssl_verify_path(self, path: str | bool | None = None) -> None:
        # False is a real value here: it turns verification off.
        if path is None or path == "":
            path = self.get_ssl_verify_path()
        self._client.set_default_option("verify", path)

    def get_ssl_verify_path(self) -> str | bool:
        current = self._client.get_default_option("verify")
        if current is None or current == "":
            return BUNDLED_CA_PATH
        return current

    def set_token(self, token: str | None) -> None:
        self.token = token

    def _get_token(self) -> str | None:
        return self.token

    def close(self) -> None:
        close = getattr(self._client, "close", None)
        if close is not None:
            close()

    def get_url(self, method: str = "") -> str:
        return self.url.rstrip("/") + "/" + method

    def merge_parameters(self, parameters: Parameters = None) -> RequestOptions:
        if not isinstance(parameters, RequestOptions):
            parameters = RequestOptions.from_mapping(parameters)
        return merge_auth(parameters, self._get_token(), self.clock)

    def method(self, verb: str, url: str, parameters: RequestOptions) -> Any:
        resp = getattr(self._client, verb)(url, parameters)
        return json.loads(resp.text)

    def get(self, api_method: str, parameters: Parameters = None) -> Any:
        return self._send("get", api_method, parameters)

    def post(self, api_method: str, parameters: Parameters = None) -> Any:
        return self._send("post", api_method, parameters)

    def put(self, api_method: str, parameters: Parameters = None) -> Any:
        return self._send("put", api_method, parameters)

    def delete(self, api_method: str, parameters: Parameters = None) -> Any:
        return self._send("delete", api_method, parameters)

    def patch(self, api_method: str, parameters: Parameters = None) -> Any:
        return self._send("patch", api_method, parameters)

    def _send(self, verb: str, api_method: str, parameters: Parameters) -> Any:
        url = self.get_url(api_method)
        options = self.merge_parameters(parameters)
        return self.method(verb, url, options)

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import requests

from .models import RequestOptions

log = logging.getLogger(__name__)


@dataclass
class HttpTransport:
    timeout_s: float = 30.0
    session: requests.Session = field(default_factory=requests.Session)
    # Extra requests kwargs sent with every call (`verify`, `headers`, ...).
    defaults: dict[str, Any] = field(default_factory=dict)

    def set_default_option(self, name: str, value: Any) -> None:
        self.defaults[name] = value

    def get_default_option(self, name: str, default: Any = None) -> Any:
        return self.defaults.get(name, default)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get(self, url: str, parameters: RequestOptions) -> requests.Response:
        return self.request("GET", url, parameters)

    def post(self, url: str, parameters: RequestOptions) -> requests.Response:
        return self.request("POST", url, parameters)

    def put(self, url: str, parameters: RequestOptions) -> requests.Response:
        return self.request("PUT", url, parameters)

    def delete(self, url: str, parameters: RequestOptions) -> requests.Response:
        return self.request("DELETE", url, parameters)

    def patch(self, url: str, parameters: RequestOptions) -> requests.Response:
        return self.request("PATCH", url, parameters)

    def request(self, verb: str, url: str, parameters: RequestOptions) -> requests.Response:
        kwargs: dict[str, Any] = {"timeout": self.timeout_s, **self.defaults}
        kwargs["params"] = parameters.query

        body = parameters.body
        if isinstance(body, (dict, list)):
            kwargs["json"] = body
        elif body is not None:
            kwargs["data"] = body

        resp = self.session.request(verb, url, **kwargs)
        # The query carries the token and is never logged.
        log.debug("%s %s -> %s", verb, url, resp.status_code)
        return resp

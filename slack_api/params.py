from __future__ import annotations

import time
from typing import Callable

from .models import RequestOptions


def merge_auth(
    options: RequestOptions,
    token: str | None,
    clock: Callable[[], float] = time.time,
) -> RequestOptions:
    # `t` and `token` are applied last so callers cannot override them.
    query = dict(options.query)
    query["t"] = int(clock())
    # An unset token is sent as an empty value; requests drops None params.
    query["token"] = token if token is not None else ""
    return RequestOptions(query=query, body=options.body)

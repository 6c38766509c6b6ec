from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class RequestOptions:
    """What gets sent alongside a Slack API call."""

    # Query-string parameters; `t` and `token` are filled in at send time.
    query: dict[str, Any] = field(default_factory=dict)

    # Request payload, passed through to the transport untouched.
    body: Any = None

    @staticmethod
    def from_mapping(parameters: Mapping[str, Any] | None) -> "RequestOptions":
        """Read the `{"query": ..., "body": ...}` form. Other keys are dropped."""
        if not parameters:
            return RequestOptions()
        return RequestOptions(
            query=dict(parameters.get("query") or {}),
            body=parameters.get("body"),
        )

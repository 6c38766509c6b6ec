from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .client import DEFAULT_URL, SlackApi
from .http import HttpTransport

REQUIRED_KEYS = [
    "SLACK_TOKEN",
]

OPTIONAL_KEYS = [
    "SLACK_API_URL",
    "SLACK_CA_BUNDLE",
    "SLACK_TIMEOUT",
]

_FALSE_VALUES = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class Config:
    token: str
    api_url: str = DEFAULT_URL
    verify: str | bool | None = None
    timeout_s: float = 30.0

    @staticmethod
    def load_from_env(environ: Mapping[str, str] | None = None) -> "Config":
        env = os.environ if environ is None else environ

        for k in REQUIRED_KEYS:
            val = env.get(k)
            if val is None:
                raise RuntimeError(f"Missing environment variable: {k}")
            if val.strip() in {"PLACEHOLDER", "MASKED", ""}:
                raise RuntimeError(f"Environment variable {k} is still a placeholder")

        timeout_raw = env.get("SLACK_TIMEOUT", "").strip()
        try:
            timeout_s = float(timeout_raw) if timeout_raw else 30.0
        except ValueError:
            raise RuntimeError(f"SLACK_TIMEOUT must be a number of seconds, got {timeout_raw!r}")

        return Config(
            token=env["SLACK_TOKEN"].strip(),
            api_url=(env.get("SLACK_API_URL") or DEFAULT_URL).rstrip("/"),
            verify=_parse_verify(env.get("SLACK_CA_BUNDLE")),
            timeout_s=timeout_s,
        )

    def build_client(self) -> SlackApi:
        return SlackApi(
            HttpTransport(timeout_s=self.timeout_s),
            self.token,
            base_url=self.api_url,
            verify=self.verify,
        )


def _parse_verify(raw: str | None) -> str | bool | None:
    if raw is None or not raw.strip():
        return None
    if raw.strip().lower() in _FALSE_VALUES:
        return False
    return raw.strip()

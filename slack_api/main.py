from __future__ import annotations

import argparse
import json
import logging
import sys

from .client import ParseError, TransportError
from .config import OPTIONAL_KEYS, REQUIRED_KEYS, Config
from .models import RequestOptions

VERBS = ("get", "post", "put", "delete", "patch")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="slack-api")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Log HTTP requests")

    sub = p.add_subparsers(dest="cmd", required=False)

    p_config = sub.add_parser("config", help="Config commands")
    sub_config = p_config.add_subparsers(dest="config_cmd", required=True)

    sub_config.add_parser("keys", help="List environment keys")
    sub_config.add_parser("check", help="Validate the environment is filled")

    p_call = sub.add_parser("call", help="Call a Slack API method and print the JSON response")
    p_call.add_argument("method", help="API method (e.g. 'auth.test')")
    p_call.add_argument("--verb", choices=VERBS, default="get")
    p_call.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter, repeatable",
    )
    p_call.add_argument("--body", default=None, help="JSON request body")

    return p


def parse_params(pairs: list[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise RuntimeError(f"Expected KEY=VALUE, got {pair!r}")
        out[key] = value
    return out


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if args.verbose:
        # Only our loggers go to DEBUG; urllib3 would log request lines with the token.
        logging.basicConfig(format="%(asctime)s - %(levelname)s - %(message)s")
        logging.getLogger("slack_api").setLevel(logging.DEBUG)

    if args.version:
        print("0.1.0")
        return 0

    if args.cmd is None:
        p.print_help()
        return 0

    try:
        if args.cmd == "config":
            if args.config_cmd == "keys":
                for k in REQUIRED_KEYS:
                    print(k)
                for k in OPTIONAL_KEYS:
                    print(f"{k} (optional)")
                return 0

            if args.config_cmd == "check":
                # Intentionally do not print the token
                cfg = Config.load_from_env()
                print(f"OK: Slack config present for {cfg.api_url}")
                return 0

        if args.cmd == "call":
            return _run_call(args)
    except (TransportError, ParseError, RuntimeError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    raise RuntimeError("unreachable")


def _run_call(args) -> int:
    body = json.loads(args.body) if args.body is not None else None
    options = RequestOptions(query=parse_params(args.param), body=body)

    api = Config.load_from_env().build_client()
    try:
        data = getattr(api, args.verb)(args.method, options)
    finally:
        api.close()
    print(json.dumps(data, indent=2))

    if isinstance(data, dict) and data.get("ok") is False:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

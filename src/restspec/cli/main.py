# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""restspec CLI: resolve a request configuration document without sending it."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, TextIO

from ..errors import RequestConfigError
from ..http import RequestSpec, build_all_headers, build_full_url, parse_request_json
from ..log import setup_logging

CLI_BODY_PREVIEW_CHARS = 200

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resolve a declarative HTTP request configuration")
    parser.add_argument("config", help="Path to a JSON request document, or '-' for stdin")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the normalized request document as JSON",
    )
    parser.add_argument(
        "--resolved",
        action="store_true",
        help="Include the composed URL and header set in JSON output",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: RESTSPEC_LOG_LEVEL or WARNING)")
    return parser


def _read_config(path: str, stdin: TextIO) -> str:
    if path == "-":
        return stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def _to_payload(spec: RequestSpec, *, resolved: bool) -> dict[str, Any]:
    payload = spec.to_document()
    if resolved:
        payload["resolved"] = {
            "url": build_full_url(spec),
            "headers": build_all_headers(spec),
        }
    return payload


def _pretty_print(spec: RequestSpec) -> None:
    print(f"{spec.method.value} {build_full_url(spec)}")
    for name, value in sorted(build_all_headers(spec).items()):
        print(f"{name}: {value}")
    print(f"Auth: {spec.auth.auth_type.value}")
    print(f"Timeout: {spec.timeout_ms} ms | redirects={spec.follow_redirects} | verify_ssl={spec.verify_ssl}")
    if spec.has_body:
        body = spec.body or ""
        if len(body) > CLI_BODY_PREVIEW_CHARS:
            body = body[:CLI_BODY_PREVIEW_CHARS] + "...[truncated]"
        print()
        print(body)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        spec = parse_request_json(_read_config(args.config, sys.stdin))
    except OSError as exc:
        print(f"error: cannot read {args.config}: {exc}", file=sys.stderr)
        return 2
    except RequestConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    logger.debug("Resolved request for %s", spec.url)
    if args.json:
        json.dump(_to_payload(spec, resolved=args.resolved), sys.stdout, indent=2, sort_keys=True)
        sys.stdout.write("\n")
    else:
        _pretty_print(spec)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

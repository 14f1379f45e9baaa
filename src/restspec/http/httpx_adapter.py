# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx bindings for RequestSpec.

These helpers only build httpx objects; sending them is left to the caller's client.
"""

from __future__ import annotations

from typing import Any

import httpx

from ..config import HttpSettings, load_http_settings
from .headers import build_all_headers, has_body
from .models import RequestSpec
from .url import build_full_url

USER_AGENT_HEADER = "User-Agent"


def to_httpx_request(spec: RequestSpec, settings: HttpSettings | None = None) -> httpx.Request:
    """Build an unsent ``httpx.Request`` from the composed url, headers and body."""
    settings = settings or load_http_settings()
    headers = httpx.Headers(build_all_headers(spec))
    if settings.send_user_agent and USER_AGENT_HEADER not in headers:
        headers[USER_AGENT_HEADER] = settings.user_agent

    content = spec.body.encode("utf-8") if has_body(spec) else None
    return httpx.Request(
        spec.method.value,
        build_full_url(spec),
        headers=headers,
        content=content,
    )


def client_options(spec: RequestSpec) -> dict[str, Any]:
    """Keyword arguments for ``httpx.Client`` matching the spec's transport flags."""
    return {
        "follow_redirects": spec.follow_redirects,
        "verify": spec.verify_ssl,
        "timeout": httpx.Timeout(spec.timeout_ms / 1000.0),
    }


__all__ = ["USER_AGENT_HEADER", "client_options", "to_httpx_request"]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header composition utilities.

The composed header set is a plain dict: later layers replace earlier entries on an
exact key match.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import RequestSpec

CONTENT_TYPE_HEADER = "Content-Type"


def has_body(spec: RequestSpec) -> bool:
    """True when the spec carries a non-empty body."""
    return spec.body is not None and spec.body != ""


def build_all_headers(spec: RequestSpec) -> dict[str, str]:
    """
    Layer the request headers.

    Order: Content-Type (only with a body), then auth headers, then user headers.
    Each layer overwrites same-named entries from the layers before it.
    """
    headers: dict[str, str] = {}
    if has_body(spec):
        headers[CONTENT_TYPE_HEADER] = spec.content_type.mime_type
    headers.update(spec.auth.auth_headers())
    headers.update(spec.headers)
    return headers


__all__ = ["CONTENT_TYPE_HEADER", "build_all_headers", "has_body"]

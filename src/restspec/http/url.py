# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Final request URL composition."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING
from urllib.parse import quote_plus

if TYPE_CHECKING:
    from .models import RequestSpec

logger = logging.getLogger(__name__)


def encode_component(value: str) -> str:
    """
    Form-encode a query key or value (UTF-8, space as ``+``).

    Values that cannot be encoded (e.g. lone surrogates) are passed through raw.
    """
    try:
        return quote_plus(value, safe="*", encoding="utf-8", errors="strict")
    except (UnicodeEncodeError, TypeError):
        logger.debug("Passing query component through unescaped: %r", value)
        return value


def _encode_pairs(params: Mapping[str, str]) -> list[str]:
    return [f"{encode_component(key)}={encode_component(value)}" for key, value in params.items()]


def build_full_url(spec: RequestSpec) -> str:
    """
    Append auth-contributed and user query parameters to the spec url.

    Auth pairs always precede user pairs. When neither group has entries the
    url is returned untouched.
    """
    auth_params = spec.auth.auth_query_params()
    if not auth_params and not spec.query_params:
        return spec.url

    pairs = _encode_pairs(auth_params) + _encode_pairs(spec.query_params)
    separator = "&" if "?" in spec.url else "?"
    return spec.url + separator + "&".join(pairs)


__all__ = ["build_full_url", "encode_component"]

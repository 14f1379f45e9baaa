# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request model, composition and parsing exports."""

from .auth import AUTH_SCHEMES, ApiKeyAuth, AuthScheme, BasicAuth, BearerAuth, NoAuth
from .builder import RequestBuilder
from .enums import ApiKeyLocation, AuthType, ContentType, HttpMethod
from .headers import build_all_headers, has_body
from .httpx_adapter import client_options, to_httpx_request
from .models import DEFAULT_TIMEOUT_MS, RequestSpec
from .parser import (
    parse_auth_document,
    parse_request_builder,
    parse_request_document,
    parse_request_json,
)
from .url import build_full_url

__all__ = [
    "AUTH_SCHEMES",
    "ApiKeyAuth",
    "ApiKeyLocation",
    "AuthScheme",
    "AuthType",
    "BasicAuth",
    "BearerAuth",
    "ContentType",
    "DEFAULT_TIMEOUT_MS",
    "HttpMethod",
    "NoAuth",
    "RequestBuilder",
    "RequestSpec",
    "build_all_headers",
    "build_full_url",
    "client_options",
    "has_body",
    "parse_auth_document",
    "parse_request_builder",
    "parse_request_document",
    "parse_request_json",
    "to_httpx_request",
]

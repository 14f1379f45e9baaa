# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
restspec package entrypoint.

Builds immutable outbound HTTP request descriptions from declarative JSON
configuration documents, with pluggable authentication and deterministic
URL/header composition. Sending the request is left to the caller's transport;
httpx helpers are provided to build (not send) the equivalent ``httpx.Request``.
"""

from .config import HttpSettings, load_http_settings
from .document import DocumentNode, JsonDocument
from .errors import BuilderFinalizedError, MissingFieldError, RequestConfigError
from .http import (
    ApiKeyAuth,
    ApiKeyLocation,
    AuthScheme,
    AuthType,
    BasicAuth,
    BearerAuth,
    ContentType,
    HttpMethod,
    NoAuth,
    RequestBuilder,
    RequestSpec,
    build_all_headers,
    build_full_url,
    has_body,
    parse_request_document,
    parse_request_json,
    to_httpx_request,
)
from .log import LogSink, setup_logging
from .version import __version__

__all__ = [
    "ApiKeyAuth",
    "ApiKeyLocation",
    "AuthScheme",
    "AuthType",
    "BasicAuth",
    "BearerAuth",
    "BuilderFinalizedError",
    "ContentType",
    "DocumentNode",
    "HttpMethod",
    "HttpSettings",
    "JsonDocument",
    "LogSink",
    "MissingFieldError",
    "NoAuth",
    "RequestBuilder",
    "RequestConfigError",
    "RequestSpec",
    "build_all_headers",
    "build_full_url",
    "has_body",
    "load_http_settings",
    "parse_request_document",
    "parse_request_json",
    "setup_logging",
    "to_httpx_request",
    "__version__",
]

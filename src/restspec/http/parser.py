# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Declarative request documents -> RequestSpec.

Only the url is mandatory. Every optional field that is absent, null or of the
wrong type silently keeps its default. Unknown verbs are ignored without a
warning, while unknown auth types fall back to ``NoAuth`` and log a warning.
"""

from __future__ import annotations

import json
from typing import Any

from ..document import DocumentNode, as_document, is_boolean, is_empty, is_number, to_json
from ..errors import MissingFieldError, RequestConfigError
from ..log import LogSink, resolve_sink
from .auth import ApiKeyAuth, AuthScheme, BasicAuth, BearerAuth, DEFAULT_API_KEY_NAME, NoAuth
from .builder import RequestBuilder
from .enums import ApiKeyLocation, AuthType, ContentType, HttpMethod
from .models import RequestSpec

AUTH_TYPE_KEY = "authType"


def _text_value(node: DocumentNode, key: str, default: str | None) -> str | None:
    child = node.get(key)
    if child is None or child.is_null():
        return default
    value = child.as_text()
    return default if not value or not value.strip() else value.strip()


def _required_text(node: DocumentNode, key: str) -> str:
    child = node.get(key)
    if child is None or child.is_null() or not child.as_text().strip():
        raise MissingFieldError(key)
    return child.as_text().strip()


def _bool_value(node: DocumentNode, key: str, default: bool) -> bool:
    child = node.get(key)
    if child is None or not is_boolean(child):
        return default
    return child.as_boolean(default)


def _lenient_bool_value(node: DocumentNode, key: str, default: bool) -> bool:
    """Booleans as-is, numbers by non-zero, ``"true"`` / ``"false"`` text; else default."""
    child = node.get(key)
    if child is None or child.is_null():
        return default
    if is_boolean(child):
        return bool(child.as_boolean(default))
    if is_number(child):
        return child.as_number(0) != 0
    if child.is_object() or child.is_array():
        return default
    text = child.as_text().strip()
    if text == "true":
        return True
    if text == "false":
        return False
    return default


def _string_map(node: DocumentNode | None) -> dict[str, str] | None:
    if node is None or not node.is_object():
        return None
    return {key: value.as_text() for key, value in node.items()}


def parse_auth_document(node: DocumentNode | Any, log: LogSink | None = None) -> AuthScheme:
    """Parse the nested ``auth`` sub-document, keyed by ``authType``."""
    sink = resolve_sink(log, __name__)
    node = as_document(node)
    if node is None or node.is_null():
        return NoAuth()
    if not node.is_object() or is_empty(node):
        sink.debug("Auth node is not a populated object; using no authentication")
        return NoAuth()

    raw_type = _text_value(node, AUTH_TYPE_KEY, AuthType.NONE.value)
    auth_type = AuthType.from_key(raw_type)

    if auth_type is AuthType.NONE:
        return NoAuth()
    if auth_type is AuthType.BASIC:
        return BasicAuth(
            username=_text_value(node, "username", ""),
            password=_text_value(node, "password", ""),
            preemptive=_lenient_bool_value(node, "preemptive", True),
        )
    if auth_type is AuthType.BEARER:
        return BearerAuth(token=_text_value(node, "token", ""))
    if auth_type is AuthType.API_KEY:
        location = ApiKeyLocation.from_key(_text_value(node, "location", ApiKeyLocation.HEADER.value))
        return ApiKeyAuth(
            key_name=_text_value(node, "keyName", DEFAULT_API_KEY_NAME),
            key_value=_text_value(node, "keyValue", ""),
            location=location or ApiKeyLocation.HEADER,
        )

    sink.warning("Unrecognized auth type %r; falling back to no authentication", raw_type)
    return NoAuth()


def parse_request_builder(document: DocumentNode | Any, log: LogSink | None = None) -> RequestBuilder:
    """
    Stage a request document into a builder.

    Raises ``MissingFieldError`` for a missing or blank url before anything
    else is read.
    """
    sink = resolve_sink(log, __name__)
    node = as_document(document)
    if node is None or node.is_null():
        raise RequestConfigError("Request document cannot be null")

    builder = RequestBuilder(_required_text(node, "url"))

    method_text = _text_value(node, "method", HttpMethod.GET.value)
    method = HttpMethod.from_key(method_text)
    if method is not None:
        builder.method(method)
    else:
        sink.debug("Ignoring unknown HTTP method %r", method_text)

    headers = _string_map(node.get("headers"))
    if headers:
        builder.headers(headers)

    query_params = _string_map(node.get("queryParams"))
    if query_params:
        builder.query_params(query_params)

    body_node = node.get("body")
    if body_node is not None and not body_node.is_null():
        if body_node.is_object() or body_node.is_array():
            builder.body(to_json(body_node))
        else:
            builder.body(body_node.as_text())

    content_type = ContentType.from_mime_type(_text_value(node, "contentType", ContentType.JSON.value))
    if content_type is not None:
        builder.content_type(content_type)

    auth_node = node.get("auth")
    if auth_node is not None and not auth_node.is_null():
        builder.auth(parse_auth_document(auth_node, log=sink))

    timeout_node = node.get("timeoutMs")
    if timeout_node is not None and is_number(timeout_node):
        builder.timeout(timeout_node.as_number(0))

    redirects_node = node.get("followRedirects")
    if redirects_node is not None and is_boolean(redirects_node):
        builder.follow_redirects(redirects_node.as_boolean(True))

    ssl_node = node.get("verifySsl")
    if ssl_node is not None and is_boolean(ssl_node):
        builder.verify_ssl(ssl_node.as_boolean(True))

    return builder


def parse_request_document(document: DocumentNode | Any, log: LogSink | None = None) -> RequestSpec:
    """Parse a request document straight into a finalized RequestSpec."""
    return parse_request_builder(document, log=log).build()


def parse_request_json(text: str | bytes, log: LogSink | None = None) -> RequestSpec:
    """Decode JSON text and parse it as a request document."""
    try:
        decoded = json.loads(text)
    except ValueError as exc:
        raise RequestConfigError(f"Request document is not valid JSON: {exc}") from exc
    return parse_request_document(decoded, log=log)


__all__ = [
    "AUTH_TYPE_KEY",
    "parse_auth_document",
    "parse_request_builder",
    "parse_request_document",
    "parse_request_json",
]

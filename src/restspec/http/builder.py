# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Mutable staging object for RequestSpec.

Setters only record values; defaults and url validation happen in ``build()``, so
intermediate states may be incomplete. A builder belongs to one producer and is
finalized exactly once.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from ..errors import BuilderFinalizedError, RequestConfigError
from .auth import ApiKeyAuth, AuthScheme, BasicAuth, BearerAuth
from .enums import ApiKeyLocation, ContentType, HttpMethod
from .models import RequestSpec


class RequestBuilder:
    def __init__(self, url: str | None):
        self._url = url
        self._method: HttpMethod | None = None
        self._headers: dict[str, str] = {}
        self._query_params: dict[str, str] = {}
        self._body: str | None = None
        self._content_type: ContentType | None = None
        self._auth: AuthScheme | None = None
        self._timeout_ms: int | None = None
        self._follow_redirects: bool | None = None
        self._verify_ssl: bool | None = None
        self._built: RequestSpec | None = None

    def _check_open(self) -> None:
        if self._built is not None:
            raise BuilderFinalizedError()

    def method(self, method: HttpMethod | None) -> RequestBuilder:
        self._check_open()
        self._method = method
        return self

    def get(self) -> RequestBuilder:
        return self.method(HttpMethod.GET)

    def post(self) -> RequestBuilder:
        return self.method(HttpMethod.POST)

    def put(self) -> RequestBuilder:
        return self.method(HttpMethod.PUT)

    def patch(self) -> RequestBuilder:
        return self.method(HttpMethod.PATCH)

    def delete(self) -> RequestBuilder:
        return self.method(HttpMethod.DELETE)

    def header(self, name: str, value: str) -> RequestBuilder:
        self._check_open()
        self._headers[name] = value
        return self

    def headers(self, headers: Mapping[str, str]) -> RequestBuilder:
        self._check_open()
        self._headers.update(headers or {})
        return self

    def query_param(self, name: str, value: str) -> RequestBuilder:
        self._check_open()
        self._query_params[name] = value
        return self

    def query_params(self, params: Mapping[str, str]) -> RequestBuilder:
        self._check_open()
        self._query_params.update(params or {})
        return self

    def body(self, body: str | None) -> RequestBuilder:
        self._check_open()
        self._body = body
        return self

    def json_body(self, obj: Any) -> RequestBuilder:
        """Serialize ``obj`` as compact JSON and switch the content type to JSON."""
        self._check_open()
        try:
            self._body = json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise RequestConfigError(f"Failed to serialize object to JSON: {exc}") from exc
        self._content_type = ContentType.JSON
        return self

    def content_type(self, content_type: ContentType | None) -> RequestBuilder:
        self._check_open()
        self._content_type = content_type
        return self

    def auth(self, auth: AuthScheme | None) -> RequestBuilder:
        self._check_open()
        self._auth = auth
        return self

    def basic_auth(self, username: str, password: str) -> RequestBuilder:
        return self.auth(BasicAuth(username=username, password=password))

    def bearer_auth(self, token: str) -> RequestBuilder:
        return self.auth(BearerAuth(token=token))

    def api_key_auth(
        self,
        key_name: str,
        key_value: str,
        location: ApiKeyLocation = ApiKeyLocation.HEADER,
    ) -> RequestBuilder:
        return self.auth(ApiKeyAuth(key_name=key_name, key_value=key_value, location=location))

    def timeout(self, timeout_ms: int | None) -> RequestBuilder:
        self._check_open()
        self._timeout_ms = timeout_ms
        return self

    def follow_redirects(self, follow: bool) -> RequestBuilder:
        self._check_open()
        self._follow_redirects = follow
        return self

    def verify_ssl(self, verify: bool) -> RequestBuilder:
        self._check_open()
        self._verify_ssl = verify
        return self

    @property
    def is_built(self) -> bool:
        return self._built is not None

    def build(self) -> RequestSpec:
        """
        Finalize into an immutable RequestSpec.

        Raises ``MissingFieldError`` when the url is absent or blank. A second call
        returns the spec produced by the first.
        """
        if self._built is not None:
            return self._built
        self._built = RequestSpec(
            url=self._url,
            method=self._method,
            headers=self._headers,
            query_params=self._query_params,
            body=self._body,
            content_type=self._content_type,
            auth=self._auth,
            timeout_ms=self._timeout_ms,
            follow_redirects=self._follow_redirects,
            verify_ssl=self._verify_ssl,
        )
        return self._built


__all__ = ["RequestBuilder"]

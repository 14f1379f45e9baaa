# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Immutable request description consumed by transports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ..errors import MissingFieldError
from .auth import AuthScheme, NoAuth
from .enums import ContentType, HttpMethod
from .headers import build_all_headers, has_body
from .url import build_full_url

if TYPE_CHECKING:
    from ..document import DocumentNode
    from ..log import LogSink
    from .builder import RequestBuilder

DEFAULT_TIMEOUT_MS = 30000

Headers = Mapping[str, str]


def _frozen_mapping(values: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(values or {}))


def _resolve_timeout(value: Any) -> int:
    if isinstance(value, bool):
        return DEFAULT_TIMEOUT_MS
    try:
        timeout_ms = int(value)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_TIMEOUT_MS
    return timeout_ms if timeout_ms > 0 else DEFAULT_TIMEOUT_MS


@dataclass(frozen=True)
class RequestSpec:
    """
    Fully resolved description of one HTTP request.

    Construction applies every default and validates the url, so an instance is
    always complete. Header and query mappings are read-only snapshots.
    """

    url: str
    method: HttpMethod = HttpMethod.GET
    headers: Headers = field(default_factory=dict)
    query_params: Headers = field(default_factory=dict)
    body: str | None = None
    content_type: ContentType = ContentType.JSON
    auth: AuthScheme = field(default_factory=NoAuth)
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    follow_redirects: bool = True
    verify_ssl: bool = True

    # mapping snapshots are unhashable
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        url = "" if self.url is None else str(self.url).strip()
        if not url:
            raise MissingFieldError("url")
        object.__setattr__(self, "url", url)

        method = self.method
        if not isinstance(method, HttpMethod):
            method = HttpMethod.from_key(method) or HttpMethod.GET
        object.__setattr__(self, "method", method)

        object.__setattr__(self, "headers", _frozen_mapping(self.headers))
        object.__setattr__(self, "query_params", _frozen_mapping(self.query_params))

        content_type = self.content_type
        if not isinstance(content_type, ContentType):
            content_type = ContentType.from_mime_type(content_type) or ContentType.JSON
        object.__setattr__(self, "content_type", content_type)

        if self.auth is None:
            object.__setattr__(self, "auth", NoAuth())
        object.__setattr__(self, "timeout_ms", _resolve_timeout(self.timeout_ms))
        object.__setattr__(self, "follow_redirects", True if self.follow_redirects is None else bool(self.follow_redirects))
        object.__setattr__(self, "verify_ssl", True if self.verify_ssl is None else bool(self.verify_ssl))

    def __reduce__(self):
        # rebuild from plain dicts; mappingproxy cannot be copied or pickled
        return (
            self.__class__,
            (
                self.url,
                self.method,
                dict(self.headers),
                dict(self.query_params),
                self.body,
                self.content_type,
                self.auth,
                self.timeout_ms,
                self.follow_redirects,
                self.verify_ssl,
            ),
        )

    @staticmethod
    def builder(url: str | None) -> RequestBuilder:
        from .builder import RequestBuilder

        return RequestBuilder(url)

    @classmethod
    def get(cls, url: str) -> RequestSpec:
        return cls.builder(url).get().build()

    @classmethod
    def post_json(cls, url: str, body: str) -> RequestSpec:
        return cls.builder(url).post().body(body).content_type(ContentType.JSON).build()

    @classmethod
    def from_document(cls, document: DocumentNode | Any, log: LogSink | None = None) -> RequestSpec:
        from .parser import parse_request_document

        return parse_request_document(document, log=log)

    def with_changes(self, **changes: Any) -> RequestSpec:
        """Return a new spec with the given fields replaced."""
        return replace(self, **changes)

    @property
    def has_body(self) -> bool:
        return has_body(self)

    def build_full_url(self) -> str:
        return build_full_url(self)

    def build_all_headers(self) -> dict[str, str]:
        return build_all_headers(self)

    def to_document(self) -> dict[str, Any]:
        """Render the spec in the configuration document shape."""
        document: dict[str, Any] = {
            "url": self.url,
            "method": self.method.value,
            "headers": dict(self.headers),
            "queryParams": dict(self.query_params),
            "contentType": self.content_type.mime_type,
            "auth": self.auth.to_document(),
            "timeoutMs": self.timeout_ms,
            "followRedirects": self.follow_redirects,
            "verifySsl": self.verify_ssl,
        }
        if self.body is not None:
            document["body"] = self.body
        return document


__all__ = ["DEFAULT_TIMEOUT_MS", "Headers", "RequestSpec"]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Closed registries for HTTP verbs, content types and authentication discriminants.

Every lookup helper is lenient: blank or unknown input yields ``None`` so callers
can fall back to their own default instead of handling an exception.
"""

from __future__ import annotations

from enum import Enum


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @property
    def description(self) -> str:
        return _METHOD_DESCRIPTIONS[self]

    @property
    def supports_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)

    @classmethod
    def from_key(cls, key: str | None) -> HttpMethod | None:
        """Case-insensitive verb lookup."""
        if key is None:
            return None
        normalized = str(key).strip().upper()
        if not normalized:
            return None
        try:
            return cls(normalized)
        except ValueError:
            return None

    @classmethod
    def all_data(cls) -> dict[str, str]:
        return {member.value: member.description for member in cls}

    @classmethod
    def all_keys(cls) -> list[str]:
        return [member.value for member in cls]


_METHOD_DESCRIPTIONS = {
    HttpMethod.GET: "Retrieve a resource",
    HttpMethod.POST: "Create a new resource",
    HttpMethod.PUT: "Replace an existing resource",
    HttpMethod.PATCH: "Partially update a resource",
    HttpMethod.DELETE: "Delete a resource",
    HttpMethod.HEAD: "Retrieve headers only",
    HttpMethod.OPTIONS: "Retrieve allowed methods",
}


class ContentType(str, Enum):
    JSON = "application/json"
    XML = "application/xml"
    TEXT_PLAIN = "text/plain"
    TEXT_HTML = "text/html"
    FORM_URLENCODED = "application/x-www-form-urlencoded"
    MULTIPART_FORM_DATA = "multipart/form-data"
    BINARY = "application/octet-stream"
    PDF = "application/pdf"

    @property
    def mime_type(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _CONTENT_TYPE_DESCRIPTIONS[self]

    @property
    def is_text_based(self) -> bool:
        return self in (ContentType.JSON, ContentType.XML, ContentType.TEXT_PLAIN, ContentType.TEXT_HTML)

    @property
    def is_json(self) -> bool:
        return self is ContentType.JSON

    @classmethod
    def from_mime_type(cls, mime_type: str | None) -> ContentType | None:
        """
        Match a mime string against the registry.

        Parameters such as ``; charset=utf-8`` are ignored.
        """
        if mime_type is None:
            return None
        normalized = str(mime_type).strip().lower()
        if ";" in normalized:
            normalized = normalized.split(";", 1)[0].strip()
        if not normalized:
            return None
        for member in cls:
            if member.value == normalized:
                return member
        return None

    @classmethod
    def all_data(cls) -> dict[str, str]:
        return {member.value: member.description for member in cls}

    @classmethod
    def all_keys(cls) -> list[str]:
        return [member.value for member in cls]


_CONTENT_TYPE_DESCRIPTIONS = {
    ContentType.JSON: "JSON format",
    ContentType.XML: "XML format",
    ContentType.TEXT_PLAIN: "Plain text format",
    ContentType.TEXT_HTML: "HTML format",
    ContentType.FORM_URLENCODED: "URL-encoded form data",
    ContentType.MULTIPART_FORM_DATA: "Multipart form data for file uploads",
    ContentType.BINARY: "Binary data",
    ContentType.PDF: "PDF document",
}


class ApiKeyLocation(str, Enum):
    HEADER = "header"
    QUERY_PARAM = "queryParam"

    @property
    def description(self) -> str:
        if self is ApiKeyLocation.HEADER:
            return "API key sent as HTTP header"
        return "API key sent as URL query parameter"

    @classmethod
    def from_key(cls, key: str | None) -> ApiKeyLocation | None:
        """Accepts the document key (``queryParam``), the member name or ``query``."""
        if key is None:
            return None
        normalized = str(key).strip().lower()
        if not normalized:
            return None
        for member in cls:
            if normalized in (member.value.lower(), member.name.lower()):
                return member
        if normalized == "query":
            return cls.QUERY_PARAM
        return None

    @classmethod
    def all_data(cls) -> dict[str, str]:
        return {member.value: member.description for member in cls}

    @classmethod
    def all_keys(cls) -> list[str]:
        return [member.value for member in cls]


class AuthType(str, Enum):
    NONE = "none"
    BASIC = "basic"
    BEARER = "bearer"
    API_KEY = "apiKey"

    @property
    def description(self) -> str:
        return _AUTH_TYPE_DESCRIPTIONS[self]

    @property
    def requires_credentials(self) -> bool:
        return self is AuthType.BASIC

    @property
    def uses_static_token(self) -> bool:
        return self in (AuthType.BEARER, AuthType.API_KEY)

    @classmethod
    def from_key(cls, key: str | None) -> AuthType | None:
        if key is None:
            return None
        normalized = str(key).strip().lower()
        if not normalized:
            return None
        if normalized == "api_key":
            return cls.API_KEY
        for member in cls:
            if member.value.lower() == normalized:
                return member
        return None

    @classmethod
    def all_data(cls) -> dict[str, str]:
        return {member.value: member.description for member in cls}

    @classmethod
    def all_keys(cls) -> list[str]:
        return [member.value for member in cls]


_AUTH_TYPE_DESCRIPTIONS = {
    AuthType.NONE: "No authentication required",
    AuthType.BASIC: "HTTP Basic Authentication with username and password",
    AuthType.BEARER: "Bearer token authentication (JWT, OAuth2)",
    AuthType.API_KEY: "API Key authentication in header or query parameter",
}


__all__ = ["ApiKeyLocation", "AuthType", "ContentType", "HttpMethod"]

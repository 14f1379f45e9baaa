# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Authentication schemes.

Each scheme is a frozen dataclass tagged with an ``AuthType`` discriminant and
contributes headers and/or query parameters to a request. ``AUTH_SCHEMES`` maps
every discriminant to its variant.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from .enums import ApiKeyLocation, AuthType

AUTHORIZATION_HEADER = "Authorization"
DEFAULT_API_KEY_NAME = "X-API-Key"


@dataclass(frozen=True)
class NoAuth:
    auth_type: ClassVar[AuthType] = AuthType.NONE

    def auth_headers(self) -> dict[str, str]:
        return {}

    def auth_query_params(self) -> dict[str, str]:
        return {}

    def to_document(self) -> dict[str, Any]:
        return {"authType": self.auth_type.value}


@dataclass(frozen=True)
class BasicAuth:
    username: str = ""
    password: str = ""
    preemptive: bool = True

    auth_type: ClassVar[AuthType] = AuthType.BASIC

    def __post_init__(self) -> None:
        if self.username is None:
            object.__setattr__(self, "username", "")
        if self.password is None:
            object.__setattr__(self, "password", "")

    def auth_headers(self) -> dict[str, str]:
        credentials = f"{self.username}:{self.password}".encode("utf-8")
        encoded = base64.b64encode(credentials).decode("ascii")
        return {AUTHORIZATION_HEADER: f"Basic {encoded}"}

    def auth_query_params(self) -> dict[str, str]:
        return {}

    def to_document(self) -> dict[str, Any]:
        return {
            "authType": self.auth_type.value,
            "username": self.username,
            "password": self.password,
            "preemptive": self.preemptive,
        }

    def __repr__(self) -> str:
        return f"BasicAuth(username={self.username!r}, password='***', preemptive={self.preemptive!r})"


@dataclass(frozen=True)
class BearerAuth:
    token: str = ""

    auth_type: ClassVar[AuthType] = AuthType.BEARER

    def __post_init__(self) -> None:
        if self.token is None:
            object.__setattr__(self, "token", "")

    def auth_headers(self) -> dict[str, str]:
        return {AUTHORIZATION_HEADER: "Bearer " + self.token}

    def auth_query_params(self) -> dict[str, str]:
        return {}

    def to_document(self) -> dict[str, Any]:
        return {"authType": self.auth_type.value, "token": self.token}

    def __repr__(self) -> str:
        return "BearerAuth(token='***')"


@dataclass(frozen=True)
class ApiKeyAuth:
    key_name: str = DEFAULT_API_KEY_NAME
    key_value: str = ""
    location: ApiKeyLocation = ApiKeyLocation.HEADER

    auth_type: ClassVar[AuthType] = AuthType.API_KEY

    def __post_init__(self) -> None:
        if self.key_name is None or not str(self.key_name).strip():
            object.__setattr__(self, "key_name", DEFAULT_API_KEY_NAME)
        if self.key_value is None:
            object.__setattr__(self, "key_value", "")
        if not isinstance(self.location, ApiKeyLocation):
            location = ApiKeyLocation.from_key(self.location) or ApiKeyLocation.HEADER
            object.__setattr__(self, "location", location)

    def auth_headers(self) -> dict[str, str]:
        if self.location is ApiKeyLocation.HEADER:
            return {self.key_name: self.key_value}
        return {}

    def auth_query_params(self) -> dict[str, str]:
        if self.location is ApiKeyLocation.QUERY_PARAM:
            return {self.key_name: self.key_value}
        return {}

    def to_document(self) -> dict[str, Any]:
        return {
            "authType": self.auth_type.value,
            "keyName": self.key_name,
            "keyValue": self.key_value,
            "location": self.location.value,
        }

    def __repr__(self) -> str:
        return f"ApiKeyAuth(key_name={self.key_name!r}, key_value='***', location={self.location.value!r})"


AuthScheme = Union[NoAuth, BasicAuth, BearerAuth, ApiKeyAuth]

AUTH_SCHEMES: dict[AuthType, type] = {
    AuthType.NONE: NoAuth,
    AuthType.BASIC: BasicAuth,
    AuthType.BEARER: BearerAuth,
    AuthType.API_KEY: ApiKeyAuth,
}


def none() -> NoAuth:
    return NoAuth()


def basic(username: str, password: str, *, preemptive: bool = True) -> BasicAuth:
    return BasicAuth(username=username, password=password, preemptive=preemptive)


def bearer(token: str) -> BearerAuth:
    return BearerAuth(token=token)


def api_key(key_name: str, key_value: str, location: ApiKeyLocation = ApiKeyLocation.HEADER) -> ApiKeyAuth:
    return ApiKeyAuth(key_name=key_name, key_value=key_value, location=location)


__all__ = [
    "AUTHORIZATION_HEADER",
    "AUTH_SCHEMES",
    "ApiKeyAuth",
    "AuthScheme",
    "BasicAuth",
    "BearerAuth",
    "DEFAULT_API_KEY_NAME",
    "NoAuth",
    "api_key",
    "basic",
    "bearer",
    "none",
]

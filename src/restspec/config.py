# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for restspec."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"restspec/{__version__}"


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


def _str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass
class HttpSettings:
    """Transport-adapter defaults. RequestSpec defaults are fixed and not read from here."""

    user_agent: str = DEFAULT_USER_AGENT
    send_user_agent: bool = True

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            user_agent=_str_env("RESTSPEC_USER_AGENT", cls.user_agent),
            send_user_agent=_bool_env("RESTSPEC_SEND_USER_AGENT", cls.send_user_agent),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()

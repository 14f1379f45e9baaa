# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for restspec."""

from __future__ import annotations

import logging
import os
from typing import Any, Protocol

DEFAULT_LOG_LEVEL = os.getenv("RESTSPEC_LOG_LEVEL", "WARNING").upper()


class LogSink(Protocol):
    """Anything with ``debug``/``warning`` in the ``logging.Logger`` calling convention."""

    def debug(self, msg: str, *args: Any) -> None: ...

    def warning(self, msg: str, *args: Any) -> None: ...


def resolve_sink(sink: LogSink | None, name: str) -> LogSink:
    """Return the injected sink, or the named module logger when none was given."""
    return sink if sink is not None else logging.getLogger(name)


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


__all__ = ["DEFAULT_LOG_LEVEL", "LogSink", "resolve_sink", "setup_logging"]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy for request construction."""


class RequestConfigError(ValueError):
    """A request configuration that cannot be turned into a RequestSpec."""


class MissingFieldError(RequestConfigError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Required field '{field}' is missing or blank")


class BuilderFinalizedError(RequestConfigError):
    def __init__(self) -> None:
        super().__init__("RequestBuilder was already finalized by build()")


__all__ = ["BuilderFinalizedError", "MissingFieldError", "RequestConfigError"]

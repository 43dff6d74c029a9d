"""Error types raised by the stencil engine and configuration loader."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class StencilErrorKind(str, Enum):
    """Categories of stencil failures returned to the caller."""

    EMPTY_ID = "empty_id"
    DUPLICATE_ID = "duplicate_id"
    NOT_FOUND = "not_found"
    TEMPLATE_ERROR = "template_error"


class StencilError(RuntimeError):
    """Base class for every failure raised while registering or applying stencils."""

    kind: Optional[StencilErrorKind] = None

    def __init__(self, message: str, *, stencil_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.stencil_id = stencil_id


class EmptyIDError(StencilError):
    """Raised when a stencil is registered with an empty identifier."""

    kind = StencilErrorKind.EMPTY_ID

    def __init__(self, stencil_kind: str) -> None:
        super().__init__(f"{stencil_kind} stencil id must not be empty", stencil_id="")


class DuplicateIDError(StencilError):
    """Raised when a stencil id is already registered for that stencil kind."""

    kind = StencilErrorKind.DUPLICATE_ID

    def __init__(self, stencil_kind: str, stencil_id: str) -> None:
        super().__init__(
            f"{stencil_kind} stencil with id of {stencil_id!r} already exists",
            stencil_id=stencil_id,
        )


class StencilNotFoundError(StencilError):
    """Raised when no stencil of the requested kind matches an id."""

    kind = StencilErrorKind.NOT_FOUND

    def __init__(self, stencil_kind: str, stencil_id: str) -> None:
        super().__init__(
            f"Unable to find {stencil_kind} stencil with id of {stencil_id!r}",
            stencil_id=stencil_id,
        )


class TemplateError(StencilError):
    """Raised when a template string cannot be parsed."""

    kind = StencilErrorKind.TEMPLATE_ERROR

    def __init__(self, message: str, *, stencil_id: Optional[str] = None) -> None:
        super().__init__(message, stencil_id=stencil_id)
        self.reason = message


class ConfigError(ValueError):
    """Raised when the configuration file is malformed or fails validation."""


__all__ = [
    "ConfigError",
    "DuplicateIDError",
    "EmptyIDError",
    "StencilError",
    "StencilErrorKind",
    "StencilNotFoundError",
    "TemplateError",
]

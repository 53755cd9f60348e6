"""Errors raised while paginating categories.

Every error names the category that failed validation so the build log points
at the offending configuration entry. All of them abort the whole build.
"""

from __future__ import annotations


class PaginationError(ValueError):
    """Base class for fatal category pagination failures."""

    def __init__(self, message: str, *, category: str) -> None:
        super().__init__(f"{message} ({category})")
        self.category = category


class MissingCollectionError(PaginationError):
    """Raised when a category key has no backing item list."""


class ConflictingRenderTargetError(PaginationError):
    """Raised when a config sets both or neither of ``template``/``layout``."""


class MissingPathError(PaginationError):
    """Raised when no ``path`` template resolves for a category."""


class InvalidPaginationConfigError(PaginationError):
    """Raised for unusable pagination options such as ``noPageOne`` without ``first``."""


__all__ = [
    "ConflictingRenderTargetError",
    "InvalidPaginationConfigError",
    "MissingCollectionError",
    "MissingPathError",
    "PaginationError",
]

"""Custom exception types raised by the renamer."""

from __future__ import annotations


class RenamerError(RuntimeError):
    """Base class for errors raised while renaming a seed project."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigurationError(RenamerError):
    """Raised when the run cannot start because its inputs are unusable.

    ``hint`` carries a short remediation message shown to the user after the
    error itself.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

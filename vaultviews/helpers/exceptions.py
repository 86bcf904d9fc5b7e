"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class VaultViewsError(Exception):
    """Base class for errors raised by vaultviews."""


class RuleDefinitionError(VaultViewsError):
    """Raised when a configured custom view or custom tag definition is invalid."""


class ViewAlreadyInitiatedError(VaultViewsError):
    """Raised when materializing a view whose file already exists."""

    def __init__(self, view_name: str, path: str) -> None:
        super().__init__(f"View '{view_name}' already exists at {path}")
        self.view_name = view_name
        self.path = path

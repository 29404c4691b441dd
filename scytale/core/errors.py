"""
Scytale Error Taxonomy
=======================

Every failure raised by a cipher is a :class:`CipherError`. The concrete
classes also derive from :class:`ValueError` so callers that only know
about the built-in exception keep working.

Errors are raised from ``encode`` / ``decode``, never from a cipher's
constructor, and name the input that failed in :attr:`CipherError.field`.
"""

from __future__ import annotations


class CipherError(Exception):
    """Base class for all cipher failures.

    Attributes:
        field: Name of the input that failed (``"message"``, ``"key"``,
            ``"transposition_key"`` ...).
    """

    def __init__(self, message: str, *, field: str = "message") -> None:
        super().__init__(message)
        self.field = field


class KeyValidationError(CipherError, ValueError):
    """The key is malformed: not a permutation, not numeric, wrong length."""

    def __init__(self, message: str, *, field: str = "key") -> None:
        super().__init__(message, field=field)


class EmptyInputError(CipherError, ValueError):
    """A required message or key is empty."""


class UnsupportedSymbolError(CipherError, ValueError):
    """The input holds symbols the cipher cannot represent."""

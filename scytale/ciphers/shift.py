"""
Shift Ciphers
==============

Caesar shift with a caller-supplied offset, and the fixed-offset ROT
variants. ROT5, ROT13, ROT18 and ROT47 are their own inverse.

References:
    - Suetonius, De Vita Caesarum, Divus Iulius 56.
    - Kahn, D. (1996). The Codebreakers, ch. 2.
"""

from __future__ import annotations

import string
from typing import Any

from scytale.core.base import BaseCipher
from scytale.core.keys import parse_shift_key
from scytale.core.models import CipherFamily
from scytale.core.primitives import DIGITS, rotate_symbols, shift_characters

# Printable ASCII from "!" (33) to "~" (126)
ROT47_ALPHABET = "".join(chr(code) for code in range(33, 127))


class CaesarShift(BaseCipher):
    """Shift every letter by ``key mod 26``; case kept, other symbols untouched.

    >>> CaesarShift("Hello, World!", 3).encode()
    'Khoor, Zruog!'
    """

    method = "caesar"
    family = CipherFamily.SHIFT

    def __init__(self, message: str = "", key: Any = None, **kwargs: Any) -> None:
        super().__init__(message, key, **kwargs)
        self._alphabet = string.ascii_uppercase

    @property
    def offset(self) -> int:
        return parse_shift_key(self._key) % 26

    def _encode(self, text: str) -> str:
        return shift_characters(text, self.offset)

    def _decode(self, text: str) -> str:
        return shift_characters(text, -self.offset)


class _FixedRotation(BaseCipher):
    """Keyless letter rotation by a class-level offset."""

    keyed = False
    family = CipherFamily.SHIFT
    rotation: int = 0

    def __init__(self, message: str = "", key: Any = None, **kwargs: Any) -> None:
        super().__init__(message, None, **kwargs)
        self._alphabet = string.ascii_uppercase

    def _encode(self, text: str) -> str:
        return shift_characters(text, self.rotation)

    def _decode(self, text: str) -> str:
        return shift_characters(text, -self.rotation)


class Rot7(_FixedRotation):
    """Shift letters by seven; decoding shifts back."""

    method = "rot7"
    rotation = 7


class Rot13(_FixedRotation):
    """ROT13: ``Rot13("Hello").encode() == "Uryyb"``."""

    method = "rot13"
    rotation = 13


class Rot5(_FixedRotation):
    """Rotate digits by five; letters pass through."""

    method = "rot5"

    def __init__(self, message: str = "", key: Any = None, **kwargs: Any) -> None:
        super().__init__(message, None, **kwargs)
        self._alphabet = DIGITS

    def _encode(self, text: str) -> str:
        return rotate_symbols(text, 5, DIGITS)

    def _decode(self, text: str) -> str:
        return rotate_symbols(text, -5, DIGITS)


class Rot18(_FixedRotation):
    """ROT13 on letters combined with ROT5 on digits."""

    method = "rot18"

    def __init__(self, message: str = "", key: Any = None, **kwargs: Any) -> None:
        super().__init__(message, None, **kwargs)
        self._alphabet = string.ascii_uppercase + DIGITS

    def _encode(self, text: str) -> str:
        return rotate_symbols(shift_characters(text, 13), 5, DIGITS)

    def _decode(self, text: str) -> str:
        return rotate_symbols(shift_characters(text, -13), -5, DIGITS)


class Rot47(_FixedRotation):
    """Rotate the 94 printable ASCII symbols ``!``..``~`` by 47."""

    method = "rot47"

    def __init__(self, message: str = "", key: Any = None, **kwargs: Any) -> None:
        super().__init__(message, None, **kwargs)
        self._alphabet = ROT47_ALPHABET

    def _encode(self, text: str) -> str:
        return rotate_symbols(text, 47, ROT47_ALPHABET)

    def _decode(self, text: str) -> str:
        return rotate_symbols(text, -47, ROT47_ALPHABET)

"""
Periodic Polyalphabetic Ciphers
================================

Vigenère, Beaufort, Gronsfeld and Porta. Each key symbol selects one
alphabet; the key repeats over the letters of the message. Case is kept,
and symbols other than A-Z are copied through without consuming a key
position.

References:
    - Vigenère, B. de (1586). Traicté des chiffres. Paris.
    - Porta, G. B. (1563). De Furtivis Literarum Notis. Naples.
    - Kahn, D. (1996). The Codebreakers, ch. 4 "The Era of the Black
      Chambers".
"""

from __future__ import annotations

import abc
from typing import Any

from scytale.core.base import BaseCipher
from scytale.core.errors import EmptyInputError, KeyValidationError
from scytale.core.keys import parse_keyword
from scytale.core.models import CipherFamily
from scytale.core.primitives import UPPERCASE


def _letter_index(ch: str) -> int | None:
    if "A" <= ch <= "Z":
        return ord(ch) - 65
    if "a" <= ch <= "z":
        return ord(ch) - 97
    return None


def _with_case(template: str, index: int) -> str:
    letter = UPPERCASE[index % 26]
    return letter if template.isupper() else letter.lower()


class _PeriodicCipher(BaseCipher):
    """Walks the message and applies one key value per letter."""

    family = CipherFamily.POLYALPHABETIC

    def __init__(self, message: str = "", key: Any = None, **kwargs: Any) -> None:
        super().__init__(message, key, **kwargs)
        self._alphabet = UPPERCASE

    def _key_values(self) -> list[int]:
        """Numeric value of each key position."""
        return [UPPERCASE.index(ch) for ch in parse_keyword(self._key)]

    @abc.abstractmethod
    def _substitute(self, index: int, key: int, forward: bool) -> int:
        """Cipher index of letter *index* under key value *key*."""

    def _transform(self, text: str, forward: bool) -> str:
        values = self._key_values()
        self._trace("key values %s", values)
        out: list[str] = []
        position = 0
        for ch in text:
            index = _letter_index(ch)
            if index is None:
                out.append(ch)
                continue
            key = values[position % len(values)]
            out.append(_with_case(ch, self._substitute(index, key, forward)))
            position += 1
        return "".join(out)

    def _encode(self, text: str) -> str:
        return self._transform(text, True)

    def _decode(self, text: str) -> str:
        return self._transform(text, False)


class Vigenere(_PeriodicCipher):
    """Vigenère: ``C = P + K (mod 26)``.

    >>> Vigenere("HELLO", "KEY").encode()
    'RIJVS'
    """

    method = "vigenere"

    def _substitute(self, index: int, key: int, forward: bool) -> int:
        return index + key if forward else index - key


class Beaufort(_PeriodicCipher):
    """Beaufort: ``C = K - P (mod 26)``, its own inverse.

    >>> Beaufort("HELLO", "KEY").encode()
    'DANZQ'
    """

    method = "beaufort"

    def _substitute(self, index: int, key: int, forward: bool) -> int:
        return key - index


class Gronsfeld(Vigenere):
    """Vigenère with a key of digits, each digit a shift of 0-9.

    >>> Gronsfeld("HELLO", "31415").encode()
    'KFPMT'
    """

    method = "gronsfeld"

    def _key_values(self) -> list[int]:
        if isinstance(self._key, bool):
            raise KeyValidationError("Gronsfeld key must be digits", field="key")
        digits = "".join(str(self._key if self._key is not None else "").split())
        if not digits:
            raise EmptyInputError("Gronsfeld key is empty", field="key")
        if not digits.isdigit() or not digits.isascii():
            raise KeyValidationError(
                f"Gronsfeld key {self._key!r} must contain digits 0-9 only", field="key"
            )
        return [int(d) for d in digits]


class Porta(_PeriodicCipher):
    """Porta: thirteen reciprocal alphabets, one per key letter pair.

    Key letters ``A/B`` select the first alphabet, ``C/D`` the second and
    so on. Each alphabet swaps the halves ``A-M`` and ``N-Z``, the second
    half rotated by the pair number, so encoding and decoding are the
    same operation.
    """

    method = "porta"

    def _substitute(self, index: int, key: int, forward: bool) -> int:
        pair = key // 2
        if index < 13:
            return 13 + (index + pair) % 13
        return (index - 13 - pair) % 13

"""
Rail Fence Cipher
==================

Zigzag transposition: the letters are written diagonally down and up
across a number of rails, then read off rail by rail.

References:
    - Gaines, H. F. (1956). Cryptanalysis, ch. 5 "Transposition".
"""

from __future__ import annotations

from typing import Any

from scytale.core.base import BaseCipher
from scytale.core.errors import EmptyInputError, KeyValidationError
from scytale.core.keys import parse_shift_key
from scytale.core.models import CipherFamily
from scytale.core.primitives import UPPERCASE


def rail_pattern(length: int, rails: int) -> list[int]:
    """Rail index of each position of a *length*-letter zigzag.

    >>> rail_pattern(6, 3)
    [0, 1, 2, 1, 0, 1]
    """
    cycle = 2 * (rails - 1)
    pattern = []
    for i in range(length):
        step = i % cycle
        pattern.append(step if step < rails else cycle - step)
    return pattern


class RailFence(BaseCipher):
    """Rail fence with a rail count of two or more.

    Letters are upper-cased and everything else is removed.

    >>> RailFence("WE ARE DISCOVERED", 3).encode()
    'WECRERDSOEEAIVD'
    """

    method = "rail_fence"
    family = CipherFamily.TRANSPOSITION

    def __init__(self, message: str = "", key: Any = 3, **kwargs: Any) -> None:
        super().__init__(message, key, **kwargs)
        self._alphabet = UPPERCASE

    @property
    def rails(self) -> int:
        rails = parse_shift_key(self._key)
        if rails < 2:
            raise KeyValidationError(f"Rail fence needs at least 2 rails, got {rails}")
        return rails

    def _letters(self, text: str) -> str:
        letters = "".join(ch for ch in text.upper() if ch in UPPERCASE)
        if not letters:
            raise EmptyInputError("Message holds no letters", field="message")
        return letters

    def _order(self, length: int) -> list[int]:
        pattern = rail_pattern(length, self.rails)
        self._trace("rail pattern %s", pattern)
        return sorted(range(length), key=lambda i: (pattern[i], i))

    def _encode(self, text: str) -> str:
        letters = self._letters(text)
        return "".join(letters[i] for i in self._order(len(letters)))

    def _decode(self, text: str) -> str:
        letters = self._letters(text)
        out = [""] * len(letters)
        for source, target in enumerate(self._order(len(letters))):
            out[target] = letters[source]
        return "".join(out)

"""
Polybius Square
================

Replaces each letter with its 1-based ``row col`` coordinates in a 5x5
square (I and J share a cell). An optional keyword reorders the square.

References:
    - Polybius, Histories, Book X, 45-46.
"""

from __future__ import annotations

import re
from typing import Any

from scytale.core.base import BaseCipher
from scytale.core.errors import KeyValidationError, UnsupportedSymbolError
from scytale.core.keys import parse_keyword
from scytale.core.models import CipherFamily
from scytale.core.primitives import (
    SQUARE_ALPHABET,
    Grid,
    grid_position,
    keyed_alphabet,
    polybius_grid,
)

_PAIR = re.compile(r"\d{2}")


def square_letters(text: str) -> str:
    """Upper-case *text*, fold J into I and drop everything but letters."""
    return "".join(
        ch for ch in text.upper().replace("J", "I") if ch in SQUARE_ALPHABET
    )


def keyed_square(keyword: str = "") -> Grid:
    return polybius_grid(keyed_alphabet(square_letters(keyword), SQUARE_ALPHABET), 5)


def square_filler(filler: Any, *, field: str = "filler") -> str:
    """Return *filler* as an upper-case letter of the 25-letter square.

    Raises:
        KeyValidationError: For anything else, J included.
    """
    value = filler.upper() if isinstance(filler, str) else filler
    if not isinstance(value, str) or len(value) != 1 or value not in SQUARE_ALPHABET:
        raise KeyValidationError(
            f"Filler must be one letter of the I/J square, got {filler!r}", field=field
        )
    return value


class Polybius(BaseCipher):
    """Polybius square.

    >>> Polybius("HELLO").encode()
    '23 15 31 31 34'
    >>> Polybius().decode("23 15 31 31 34")
    'HELLO'
    """

    method = "polybius"
    family = CipherFamily.POLYGRAPHIC
    keyed = False

    def __init__(self, message: str = "", key: Any = "", **kwargs: Any) -> None:
        super().__init__(message, key or "", **kwargs)

    def _grid(self) -> Grid:
        keyword = parse_keyword(self._key) if str(self._key or "").strip() else ""
        self._alphabet = keyed_square(keyword)
        return self._alphabet

    def _encode(self, text: str) -> str:
        grid = self._grid()
        pairs = []
        for letter in square_letters(text):
            row, col = grid_position(grid, letter)
            pairs.append(f"{row + 1}{col + 1}")
        return " ".join(pairs)

    def _decode(self, text: str) -> str:
        grid = self._grid()
        out: list[str] = []
        for pair in _PAIR.findall(text):
            row, col = int(pair[0]) - 1, int(pair[1]) - 1
            if not (0 <= row < 5 and 0 <= col < 5):
                raise UnsupportedSymbolError(
                    f"Coordinate pair {pair!r} lies outside the 5x5 square"
                )
            out.append(grid[row][col])
        return "".join(out)

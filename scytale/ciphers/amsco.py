"""
AMSCO Transposition
====================

Incomplete columnar transposition whose cells alternately hold one and
two characters. The key is a permutation of ``1..n``; columns are read
out in ascending key-digit order.

References:
    - Gaines, H. F. (1956). Cryptanalysis, ch. 8. The cipher is named
      after A. M. Scott.
"""

from __future__ import annotations

from typing import Any

from scytale.core.base import BaseCipher
from scytale.core.keys import parse_permutation_key, validate_permutation_key
from scytale.core.models import CipherFamily
from scytale.core.primitives import column_order

# (row, column, width) of one cell
Cell = tuple[int, int, int]


def amsco_layout(length: int, columns: int) -> list[Cell]:
    """Row-major cell layout for *length* characters over *columns* columns.

    Cell ``(r, c)`` is one character wide when ``r*(columns+1)+c`` is even
    and two wide otherwise; the last cell is cut to what remains.
    """
    cells: list[Cell] = []
    remaining = length
    row = 0
    while remaining > 0:
        for col in range(columns):
            if remaining <= 0:
                break
            width = 1 if (row * (columns + 1) + col) % 2 == 0 else 2
            width = min(width, remaining)
            cells.append((row, col, width))
            remaining -= width
        row += 1
    return cells


class Amsco(BaseCipher):
    """AMSCO cipher.

    >>> Amsco("Encode this text please", "321").encode()
    'OHELENCETSTTPASEDIXE'
    """

    method = "amsco"
    family = CipherFamily.TRANSPOSITION

    def __init__(self, message: str = "", key: Any = None, *, max_key_length: int = 9, **kwargs: Any) -> None:
        super().__init__(message, key, **kwargs)
        self._max_key_length = max_key_length

    def validate_key(self) -> bool:
        """True when the key is a permutation of ``1..n`` within the length cap."""
        return validate_permutation_key(self._key, self._max_key_length).valid

    def _order(self) -> list[int]:
        key = parse_permutation_key(self._key, max_length=self._max_key_length)
        self._alphabet = key
        return column_order(key)

    @staticmethod
    def _normalise(text: str) -> str:
        return "".join(text.split()).upper()

    def _encode(self, text: str) -> str:
        order = self._order()
        plain = self._normalise(text)

        chunks: dict[int, list[str]] = {col: [] for col in range(len(order))}
        pos = 0
        for _, col, width in amsco_layout(len(plain), len(order)):
            chunks[col].append(plain[pos:pos + width])
            pos += width

        self._trace("columns %s", chunks)
        return "".join("".join(chunks[col]) for col in order)

    def _decode(self, text: str) -> str:
        order = self._order()
        cipher = self._normalise(text)
        layout = amsco_layout(len(cipher), len(order))

        # Fill each column's cells in key order, then read row-major
        pieces: dict[tuple[int, int], str] = {}
        pos = 0
        for col in order:
            for row, cell_col, width in layout:
                if cell_col == col:
                    pieces[(row, col)] = cipher[pos:pos + width]
                    pos += width

        return "".join(pieces[(row, col)] for row, col, _ in layout)

"""
Fractionating Ciphers
======================

ADFGVX and ADFGX: each symbol is replaced by the row and column labels
of its cell in a keyed Polybius square, and the resulting label stream
is put through an incomplete columnar transposition.

Bifid fractionates the same way but recombines the coordinates itself:
all rows, then all columns, read back in pairs.

References:
    - Kahn, D. (1996). The Codebreakers, ch. 11 "Two Fräuleins".
    - Friedman, W. F. (1941). Military Cryptanalysis, Part IV.
    - Delastelle, F. (1902). Traité élémentaire de cryptographie. Paris.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from scytale.ciphers.polybius import keyed_square, square_letters
from scytale.core.base import BaseCipher
from scytale.core.errors import (
    EmptyInputError,
    KeyValidationError,
    UnsupportedSymbolError,
)
from scytale.core.keys import parse_keyword, parse_permutation_key
from scytale.core.models import CipherFamily, CipherParams
from scytale.core.primitives import (
    DIGITS,
    SQUARE_ALPHABET,
    UPPERCASE,
    Grid,
    column_order,
    grid_position,
    keyed_alphabet,
    polybius_grid,
)


def columnar_order(transposition_key: Any) -> list[int]:
    """Reading order for a numeric permutation or an alphabetic keyword.

    Raises:
        EmptyInputError: If the key is empty.
        KeyValidationError: If a numeric key is not a permutation, or the
            key mixes digits, letters or other symbols.
    """
    raw = "" if transposition_key is None else str(transposition_key).strip()
    if not raw:
        raise EmptyInputError("Transposition key is empty", field="transposition_key")
    if raw.isdigit():
        return column_order(parse_permutation_key(raw, field="transposition_key"))
    letters = raw.upper()
    if any(ch not in UPPERCASE for ch in letters):
        raise KeyValidationError(
            f"Transposition key {transposition_key!r} must be a digit permutation "
            "or a keyword of letters A-Z",
            field="transposition_key",
        )
    return column_order(letters)


def columnar_transpose(stream: str, order: list[int]) -> str:
    """Write *stream* row-wise under ``len(order)`` columns, read columns in *order*."""
    width = len(order)
    return "".join(stream[col::width] for col in order)


def columnar_restore(text: str, order: list[int]) -> str:
    """Invert :func:`columnar_transpose` for an unpadded final row."""
    width = len(order)
    rows, extra = divmod(len(text), width)
    lengths = [rows + (1 if col < extra else 0) for col in range(width)]

    columns: dict[int, str] = {}
    pos = 0
    for col in order:
        columns[col] = text[pos:pos + lengths[col]]
        pos += lengths[col]

    return "".join(columns[i % width][i // width] for i in range(len(text)))


class _FractionatingCipher(BaseCipher):
    """Shared ADFGX / ADFGVX machinery.

    Args:
        message: Text to process.
        key: Keyword ordering the Polybius square; empty gives the
            straight square.
        transposition_key: Numeric permutation or keyword for the
            columnar stage.
    """

    family = CipherFamily.FRACTIONATION
    labels: ClassVar[str] = ""
    symbols: ClassVar[str] = ""

    def __init__(
        self,
        message: str = "",
        key: Any = None,
        transposition_key: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, key, **kwargs)
        self._transposition_key = transposition_key

    @classmethod
    def build(cls, message: str, params: CipherParams, **kwargs: Any) -> BaseCipher:
        return cls(message, params.key, params.secondary_key, **kwargs)

    @property
    def transposition_key(self) -> Optional[str]:
        return self._transposition_key

    @transposition_key.setter
    def transposition_key(self, value: Optional[str]) -> None:
        self._transposition_key = value

    def _prepare(self, text: str) -> str:
        return "".join(ch for ch in text.upper() if ch in self.symbols)

    def _square(self) -> Grid:
        raw = "".join(str(self._key or "").split())
        keyword = self._prepare(raw)
        if len(keyword) != len(raw):
            raise KeyValidationError(
                f"Square key {self._key!r} holds symbols outside the {self.method} square",
                field="key",
            )
        self._alphabet = polybius_grid(
            keyed_alphabet(keyword, self.symbols), len(self.labels)
        )
        return self._alphabet

    def _encode(self, text: str) -> str:
        order = columnar_order(self._transposition_key)
        square = self._square()
        plain = self._prepare(text)
        if not plain:
            raise EmptyInputError("Message holds no encodable symbols", field="message")

        stream = "".join(
            self.labels[r] + self.labels[c]
            for r, c in (grid_position(square, ch) for ch in plain)
        )
        self._trace("fractionated stream %s", stream)
        return columnar_transpose(stream, order)

    def _decode(self, text: str) -> str:
        order = columnar_order(self._transposition_key)
        square = self._square()
        cipher = "".join(ch for ch in text.upper() if ch in self.labels)
        if not cipher:
            raise EmptyInputError("Message holds no coordinate labels", field="message")
        if len(cipher) % 2:
            raise UnsupportedSymbolError(
                f"Coordinate count must be even, got {len(cipher)}"
            )

        stream = columnar_restore(cipher, order)
        return "".join(
            square[self.labels.index(r)][self.labels.index(c)]
            for r, c in zip(stream[0::2], stream[1::2])
        )


class ADFGVX(_FractionatingCipher):
    """6x6 square over ``A..Z0..9`` labelled ``ADFGVX``."""

    method = "adfgvx"
    labels = "ADFGVX"
    symbols = UPPERCASE + DIGITS


class ADFGX(_FractionatingCipher):
    """5x5 square (I/J merged) labelled ``ADFGX``."""

    method = "adfgx"
    labels = "ADFGX"
    symbols = SQUARE_ALPHABET

    def _prepare(self, text: str) -> str:
        return super()._prepare(text.upper().replace("J", "I"))


# ===================================================================== #
#  Bifid
# ===================================================================== #


class Bifid(BaseCipher):
    """Delastelle's Bifid over a keyed 5x5 square (I/J merged).

    All row coordinates are written out, followed by all column
    coordinates, and the combined stream is read back in pairs.
    An empty key gives the straight square.

    >>> Bifid("FLEEATONCE", "BGWKZQPNDSIOAXEFCLUMTHYVR").encode()
    'UAEOLWRINS'
    """

    method = "bifid"
    family = CipherFamily.FRACTIONATION

    def _square(self) -> Grid:
        keyword = parse_keyword(self._key) if str(self._key or "").strip() else ""
        self._alphabet = keyed_square(keyword)
        return self._alphabet

    def _letters(self, text: str) -> str:
        letters = square_letters(text)
        if not letters:
            raise EmptyInputError("Message holds no letters", field="message")
        return letters

    def _encode(self, text: str) -> str:
        square = self._square()
        coords = [grid_position(square, ch) for ch in self._letters(text)]
        stream = [r for r, _ in coords] + [c for _, c in coords]
        self._trace("coordinate stream %s", stream)
        return "".join(
            square[r][c] for r, c in zip(stream[0::2], stream[1::2])
        )

    def _decode(self, text: str) -> str:
        square = self._square()
        letters = self._letters(text)
        stream = [n for ch in letters for n in grid_position(square, ch)]
        half = len(letters)
        return "".join(
            square[r][c] for r, c in zip(stream[:half], stream[half:])
        )

"""
Two-Square Cipher
==================

Horizontal two-square (double Playfair) digraph cipher. Square A is
keyed by the primary key and square B by the secondary key; both are
5x5 with I and J merged.

References:
    - Gaines, H. F. (1956). Cryptanalysis, ch. 21 "Two-Square".
"""

from __future__ import annotations

from typing import Any, Optional

from scytale.ciphers.polybius import keyed_square, square_filler, square_letters
from scytale.core.base import BaseCipher
from scytale.core.errors import EmptyInputError, UnsupportedSymbolError
from scytale.core.keys import parse_keyword
from scytale.core.models import CipherFamily, CipherParams
from scytale.core.primitives import Grid, grid_position


def digraph_letters(text: str, filler: str) -> str:
    """Square letters of *text*, padded with *filler* to an even count.

    Raises:
        EmptyInputError: If *text* holds no letters.
    """
    letters = square_letters(text)
    if not letters:
        raise EmptyInputError("Message holds no letters", field="message")
    if len(letters) % 2:
        letters += filler
    return letters


def cipher_digraphs(text: str, cipher: str) -> str:
    """Square letters of a digraph ciphertext.

    Raises:
        EmptyInputError: If *text* holds no letters.
        UnsupportedSymbolError: If the letter count is odd.
    """
    letters = square_letters(text)
    if not letters:
        raise EmptyInputError("Message holds no letters", field="message")
    if len(letters) % 2:
        raise UnsupportedSymbolError(
            f"{cipher} ciphertext needs an even letter count, got {len(letters)}"
        )
    return letters


class TwoSquare(BaseCipher):
    """Horizontal Two-Square.

    For a plaintext pair ``(a, b)`` with ``a`` at ``(r1, c1)`` in square A
    and ``b`` at ``(r2, c2)`` in square B, the ciphertext pair is
    ``B[r1][c2] + A[r2][c1]``. Odd-length input is padded with the filler
    letter.

    Decoding drops one trailing filler letter, so ``HELLO`` survives a
    round trip. A plaintext whose last letter really is the filler loses
    it too; the ciphertext cannot tell the two apart. Pass
    ``strip_filler=False`` to get the raw pairs back.

    Args:
        message: Text to process.
        key: Keyword for square A.
        secondary_key: Keyword for square B, defaults to *key*.
        filler: Padding letter for odd-length input.
        strip_filler: Drop a trailing filler letter when decoding.
    """

    method = "two_square"
    family = CipherFamily.POLYGRAPHIC

    def __init__(
        self,
        message: str = "",
        key: Any = None,
        secondary_key: Optional[str] = None,
        *,
        filler: str = "X",
        strip_filler: bool = True,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, key, **kwargs)
        self._secondary_key = secondary_key
        self._filler = filler
        self._strip_filler = strip_filler

    @classmethod
    def build(cls, message: str, params: CipherParams, **kwargs: Any) -> TwoSquare:
        return cls(message, params.key, params.secondary_key, **kwargs)

    @property
    def secondary_key(self) -> Optional[str]:
        return self._secondary_key

    @secondary_key.setter
    def secondary_key(self, value: Optional[str]) -> None:
        self._secondary_key = value

    @property
    def filler(self) -> str:
        return self._filler

    def _squares(self) -> tuple[Grid, Grid]:
        primary = parse_keyword(self._key, field="key")
        secondary = (
            parse_keyword(self._secondary_key, field="secondary_key")
            if self._secondary_key
            else primary
        )
        square_a, square_b = keyed_square(primary), keyed_square(secondary)
        self._alphabet = (square_a, square_b)
        self._trace("square A %s, square B %s", square_a, square_b)
        return square_a, square_b

    def _encode(self, text: str) -> str:
        square_a, square_b = self._squares()
        letters = digraph_letters(text, square_filler(self._filler))

        out: list[str] = []
        for a, b in zip(letters[0::2], letters[1::2]):
            r1, c1 = grid_position(square_a, a)
            r2, c2 = grid_position(square_b, b)
            out.append(square_b[r1][c2] + square_a[r2][c1])
        return "".join(out)

    def _decode(self, text: str) -> str:
        square_a, square_b = self._squares()
        filler = square_filler(self._filler)
        letters = cipher_digraphs(text, "Two-Square")

        out: list[str] = []
        for x, y in zip(letters[0::2], letters[1::2]):
            r1, c2 = grid_position(square_b, x)
            r2, c1 = grid_position(square_a, y)
            out.append(square_a[r1][c1] + square_b[r2][c2])
        plain = "".join(out)
        if self._strip_filler and plain.endswith(filler):
            self._trace("dropping trailing filler %s", filler)
            plain = plain[:-1]
        return plain

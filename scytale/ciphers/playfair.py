"""
Playfair and Four-Square Ciphers
=================================

Digraph ciphers over 5x5 squares with I and J merged.

Playfair uses a single keyed square and three rules: letters on the
same row move right, letters in the same column move down, and any
other pair swaps columns. Four-Square spreads the lookup over two plain
and two keyed squares, so it needs no rule for doubled letters.

References:
    - Wheatstone, C. (1854). The Playfair cipher, as published by
      Lord Playfair.
    - Delastelle, F. (1902). Traité élémentaire de cryptographie. Paris.
    - Gaines, H. F. (1956). Cryptanalysis, ch. 21 "Digraphic Substitution".
"""

from __future__ import annotations

from typing import Any, Optional

from scytale.ciphers.polybius import keyed_square, square_filler, square_letters
from scytale.ciphers.two_square import cipher_digraphs, digraph_letters
from scytale.core.base import BaseCipher
from scytale.core.errors import EmptyInputError
from scytale.core.keys import parse_keyword
from scytale.core.models import CipherFamily, CipherParams
from scytale.core.primitives import Grid, grid_position

# Pads a doubled or trailing X, where X itself cannot be used
_FILLER_FOR_X = "Q"


# ===================================================================== #
#  Playfair
# ===================================================================== #


class Playfair(BaseCipher):
    """Playfair digraph substitution.

    The plaintext is split into pairs. A pair of identical letters gets
    the filler inserted between them, and a lone final letter gets the
    filler appended; where the letter is the filler itself, ``Q`` is
    used instead.

    Decoding removes a filler that sits between two identical letters or
    at the very end. A plaintext that really had an X in either spot
    loses it; pass ``strip_filler=False`` to keep every letter.

    >>> Playfair("Hide the gold", "playfair example").encode()
    'BMODZBXDNAGE'

    Args:
        message: Text to process.
        key: Keyword ordering the square.
        filler: Letter that splits doubled letters and pads odd input.
        strip_filler: Drop filler letters when decoding.
    """

    method = "playfair"
    family = CipherFamily.POLYGRAPHIC

    def __init__(
        self,
        message: str = "",
        key: Any = None,
        *,
        filler: str = "X",
        strip_filler: bool = True,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, key, **kwargs)
        self._filler = filler
        self._strip_filler = strip_filler

    def _square(self) -> Grid:
        self._alphabet = keyed_square(parse_keyword(self._key))
        self._trace("square %s", self._alphabet)
        return self._alphabet

    def _pad_for(self, letter: str, filler: str) -> str:
        return _FILLER_FOR_X if letter == filler else filler

    def _pairs(self, text: str, filler: str) -> list[tuple[str, str]]:
        letters = square_letters(text)
        if not letters:
            raise EmptyInputError("Message holds no letters", field="message")
        pairs: list[tuple[str, str]] = []
        i = 0
        while i < len(letters):
            a = letters[i]
            b = letters[i + 1] if i + 1 < len(letters) else None
            if b is None or a == b:
                pairs.append((a, self._pad_for(a, filler)))
                i += 1
            else:
                pairs.append((a, b))
                i += 2
        return pairs

    @staticmethod
    def _substitute(square: Grid, a: str, b: str, step: int) -> str:
        r1, c1 = grid_position(square, a)
        r2, c2 = grid_position(square, b)
        if r1 == r2:
            return square[r1][(c1 + step) % 5] + square[r2][(c2 + step) % 5]
        if c1 == c2:
            return square[(r1 + step) % 5][c1] + square[(r2 + step) % 5][c2]
        return square[r1][c2] + square[r2][c1]

    def _encode(self, text: str) -> str:
        square = self._square()
        pairs = self._pairs(text, square_filler(self._filler))
        self._trace("digraphs %s", pairs)
        return "".join(self._substitute(square, a, b, 1) for a, b in pairs)

    def _decode(self, text: str) -> str:
        square = self._square()
        filler = square_filler(self._filler)
        letters = cipher_digraphs(text, "Playfair")
        plain = "".join(
            self._substitute(square, a, b, -1)
            for a, b in zip(letters[0::2], letters[1::2])
        )
        if not self._strip_filler:
            return plain
        return self._drop_fillers(plain, filler)

    def _drop_fillers(self, plain: str, filler: str) -> str:
        out: list[str] = []
        for i in range(0, len(plain), 2):
            a, b = plain[i], plain[i + 1]
            following = plain[i + 2] if i + 2 < len(plain) else None
            out.append(a)
            if b == self._pad_for(a, filler) and following in (a, None):
                continue
            out.append(b)
        return "".join(out)


# ===================================================================== #
#  Four-Square
# ===================================================================== #


class FourSquare(BaseCipher):
    """Four-Square digraph substitution.

    The plain squares sit top-left and bottom-right; the top-right square
    is keyed by *key* and the bottom-left by *secondary_key*. For a pair
    ``(a, b)`` with ``a`` at ``(r1, c1)`` and ``b`` at ``(r2, c2)`` in
    the plain squares, the ciphertext is ``TR[r1][c2] + BL[r2][c1]``.

    Odd-length input is padded with the filler, and decoding drops one
    trailing filler the same way :class:`TwoSquare` does.

    Args:
        message: Text to process.
        key: Keyword for the top-right square.
        secondary_key: Keyword for the bottom-left square.
        filler: Padding letter for odd-length input.
        strip_filler: Drop a trailing filler letter when decoding.
    """

    method = "four_square"
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
    def build(cls, message: str, params: CipherParams, **kwargs: Any) -> FourSquare:
        return cls(message, params.key, params.secondary_key, **kwargs)

    @property
    def secondary_key(self) -> Optional[str]:
        return self._secondary_key

    @secondary_key.setter
    def secondary_key(self, value: Optional[str]) -> None:
        self._secondary_key = value

    def _squares(self) -> tuple[Grid, Grid, Grid]:
        plain = keyed_square()
        top_right = keyed_square(parse_keyword(self._key, field="key"))
        bottom_left = keyed_square(
            parse_keyword(self._secondary_key, field="secondary_key")
        )
        self._alphabet = (plain, top_right, bottom_left)
        return plain, top_right, bottom_left

    def _encode(self, text: str) -> str:
        plain, top_right, bottom_left = self._squares()
        letters = digraph_letters(text, square_filler(self._filler))

        out: list[str] = []
        for a, b in zip(letters[0::2], letters[1::2]):
            r1, c1 = grid_position(plain, a)
            r2, c2 = grid_position(plain, b)
            out.append(top_right[r1][c2] + bottom_left[r2][c1])
        return "".join(out)

    def _decode(self, text: str) -> str:
        plain, top_right, bottom_left = self._squares()
        filler = square_filler(self._filler)
        letters = cipher_digraphs(text, "Four-Square")

        out: list[str] = []
        for x, y in zip(letters[0::2], letters[1::2]):
            r1, c2 = grid_position(top_right, x)
            r2, c1 = grid_position(bottom_left, y)
            out.append(plain[r1][c1] + plain[r2][c2])
        result = "".join(out)
        if self._strip_filler and result.endswith(filler):
            result = result[:-1]
        return result

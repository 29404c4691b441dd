"""
Baconian Cipher
================

Each letter becomes a five-symbol group of ``a`` and ``b``, its index
written in binary. This is the 26-letter variant, where I/J and U/V
have distinct groups. Groups are separated by one space and words by
three.

References:
    - Bacon, F. (1623). De Augmentis Scientiarum, Book VI.
"""

from __future__ import annotations

from typing import Any

from scytale.core.alphabet import AlphabetTable
from scytale.core.base import BaseCipher
from scytale.core.models import CipherFamily
from scytale.core.primitives import LOWERCASE, decode_alphabet, encode_alphabet

BACONIAN_TABLE = AlphabetTable(
    {
        letter: format(index, "05b").replace("0", "a").replace("1", "b")
        for index, letter in enumerate(LOWERCASE)
    }
)


class Baconian(BaseCipher):
    """Baconian biliteral encoding.

    >>> Baconian("hi").encode()
    'aabbb abaaa'
    """

    method = "baconian"
    family = CipherFamily.ENCODING
    keyed = False

    char_sep = " "
    word_sep = "   "

    def __init__(self, message: str = "", key: Any = None, **kwargs: Any) -> None:
        super().__init__(message, None, **kwargs)
        self._alphabet = BACONIAN_TABLE

    def _encode(self, text: str) -> str:
        return encode_alphabet(text, self._alphabet, self.char_sep, self.word_sep)

    def _decode(self, text: str) -> str:
        return decode_alphabet(
            text.strip(), self._alphabet.inverse, self.char_sep, self.word_sep
        )

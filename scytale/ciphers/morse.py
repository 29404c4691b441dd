"""
Morse Code
===========

International Morse for ``a..z``, ``0..9`` and ``. , ? !``. Characters
are separated by one space and words by three. Unknown symbols are
dropped.

References:
    - ITU-R M.1677-1 (2009). International Morse code.
"""

from __future__ import annotations

from typing import Any

from scytale.core.alphabet import AlphabetTable
from scytale.core.base import BaseCipher
from scytale.core.models import CipherFamily
from scytale.core.primitives import decode_alphabet, encode_alphabet

MORSE_TABLE = AlphabetTable(
    {
        "a": ".-", "b": "-...", "c": "-.-.", "d": "-..", "e": ".",
        "f": "..-.", "g": "--.", "h": "....", "i": "..", "j": ".---",
        "k": "-.-", "l": ".-..", "m": "--", "n": "-.", "o": "---",
        "p": ".--.", "q": "--.-", "r": ".-.", "s": "...", "t": "-",
        "u": "..-", "v": "...-", "w": ".--", "x": "-..-", "y": "-.--",
        "z": "--..",
        "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
        "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
        ".": ".-.-.-", ",": "--..--", "?": "..--..", "!": "-.-.--",
    }
)


class Morse(BaseCipher):
    """Morse encoding.

    >>> Morse("SOS").encode()
    '... --- ...'
    """

    method = "morse"
    family = CipherFamily.ENCODING
    keyed = False

    char_sep = " "

    def __init__(
        self,
        message: str = "",
        key: Any = None,
        *,
        word_sep: str = "   ",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, None, **kwargs)
        self._alphabet = MORSE_TABLE
        self.word_sep = word_sep

    def _encode(self, text: str) -> str:
        return encode_alphabet(text, self._alphabet, self.char_sep, self.word_sep)

    def _decode(self, text: str) -> str:
        return decode_alphabet(
            text.strip(), self._alphabet.inverse, self.char_sep, self.word_sep
        )

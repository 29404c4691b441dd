"""
Monoalphabetic Substitution Ciphers
====================================

Dictionary ciphers that replace each symbol through a fixed
:class:`~scytale.core.alphabet.AlphabetTable`: Atbash, keyword
substitution and the Bazeries square cipher.

Symbols missing from a table are dropped from the output.

References:
    - Gaines, H. F. (1956). Cryptanalysis, ch. 3 "Simple Substitution".
    - Bazeries, E. (1901). Les chiffres secrets dévoilés. Paris.
"""

from __future__ import annotations

from typing import Any

from scytale.core.alphabet import AlphabetTable
from scytale.core.base import BaseCipher
from scytale.core.errors import EmptyInputError
from scytale.core.keys import parse_keyword
from scytale.core.models import CipherFamily
from scytale.core.primitives import (
    DIGITS,
    LOWERCASE,
    decode_alphabet,
    encode_alphabet,
    keyed_alphabet,
    polybius_grid,
    transpose_matrix,
)


# ===================================================================== #
#  Atbash
# ===================================================================== #

_ATBASH_SEQUENCE = LOWERCASE + "01234"
_ATBASH_PUNCTUATION = "!?,. "
_ATBASH_PUNCTUATION_PAIRS = "56789"


def _atbash_table() -> AlphabetTable:
    mirrored = dict(zip(_ATBASH_SEQUENCE, reversed(_ATBASH_SEQUENCE)))
    for punct, digit in zip(_ATBASH_PUNCTUATION, _ATBASH_PUNCTUATION_PAIRS):
        mirrored[punct] = digit
        mirrored[digit] = punct
    return AlphabetTable(mirrored)


ATBASH_TABLE = _atbash_table()


class Atbash(BaseCipher):
    """Mirror ``a..z0..4`` end to end (``a<->4``, ``f<->z``) and swap
    ``! ? , . space`` with ``5 6 7 8 9``.

    Keyless and self-inverse on lower-case text::

        >>> Atbash("Encode this text please").encode()
        '0r2q10 lxwm l0hl pt04m0'

    The digit ``9`` is lossy. It encodes to a space, which decoding reads
    as a word break, so ``"a9b"`` encodes to ``"4 y"`` and decodes to
    ``"a b"``.
    """

    method = "atbash"
    family = CipherFamily.MONOALPHABETIC
    keyed = False

    def __init__(self, message: str = "", key: Any = None, **kwargs: Any) -> None:
        super().__init__(message, None, **kwargs)
        self._alphabet = ATBASH_TABLE

    def _encode(self, text: str) -> str:
        return encode_alphabet(text, self._alphabet, "", " ")

    def _decode(self, text: str) -> str:
        return decode_alphabet(text, self._alphabet.inverse, "", " ")


# ===================================================================== #
#  Keyword substitution
# ===================================================================== #

_PASSTHROUGH = DIGITS + " .,?!"


def substitution_table(keyword: str) -> AlphabetTable:
    """Plain -> cipher table for a keyword substitution.

    The deduplicated keyword letters are the plaintext images of cipher
    letters ``a, b, c ...``; the remaining plaintext letters follow in
    natural order. Digits and ``space . , ? !`` map to themselves.

    Raises:
        KeyValidationError: If *keyword* holds anything but letters and
            whitespace.
    """
    letters = parse_keyword(keyword, field="key").lower()
    plain_order = keyed_alphabet(letters, LOWERCASE)
    mapping = {plain: cipher for plain, cipher in zip(plain_order, LOWERCASE)}
    mapping.update((symbol, symbol) for symbol in _PASSTHROUGH)
    return AlphabetTable(mapping)


class SimpleSubstitution(BaseCipher):
    """Keyword substitution.

    >>> SimpleSubstitution("Encode this text please", "Tyranosaurus").encode()
    'lejfkl aopg alya usldgl'
    """

    method = "substitution"
    family = CipherFamily.MONOALPHABETIC

    def _table(self) -> AlphabetTable:
        if self._key is None or str(self._key) == "":
            raise EmptyInputError("Substitution keyword is empty", field="key")
        self._alphabet = substitution_table(str(self._key))
        return self._alphabet

    def _encode(self, text: str) -> str:
        return encode_alphabet(text, self._table(), "", " ")

    def _decode(self, text: str) -> str:
        return decode_alphabet(text, self._table().inverse, "", " ")


# ===================================================================== #
#  Bazeries
# ===================================================================== #

_SQUARE = LOWERCASE.replace("j", "")

_ONES = (
    "zero one two three four five six seven eight nine ten eleven twelve "
    "thirteen fourteen fifteen sixteen seventeen eighteen nineteen"
).split()
_TENS = "_ _ twenty thirty forty fifty sixty seventy eighty ninety".split()
_SCALES = ((10**9, "billion"), (10**6, "million"), (1000, "thousand"), (100, "hundred"))


def number_to_words(number: int) -> str:
    """Spell a non-negative integer in English.

    >>> number_to_words(3752)
    'three thousand seven hundred fifty two'
    """
    if number < 20:
        return _ONES[number]
    if number < 100:
        tens, ones = divmod(number, 10)
        return _TENS[tens] + (f" {_ONES[ones]}" if ones else "")
    for scale, name in _SCALES:
        if number >= scale:
            head, rest = divmod(number, scale)
            words = f"{number_to_words(head)} {name}"
            return words + (f" {number_to_words(rest)}" if rest else "")
    raise AssertionError("unreachable")


def bazeries_table(key: Any) -> AlphabetTable:
    """Plain -> cipher table for the Bazeries cipher.

    The cipher square is the keyed alphabet written row-wise; the plain
    square is the straight alphabet written column-wise. A letter maps
    to the letter in the same cell of the other square. An all-digit key
    is spelled out in English first; any other key must be letters and
    whitespace.

    Raises:
        KeyValidationError: If the key mixes letters with other symbols.
    """
    raw = str(key).strip()
    keyword = number_to_words(int(raw)) if raw.isdigit() else raw
    letters = parse_keyword(keyword, field="key").lower().replace("j", "i")

    cipher_grid = polybius_grid(keyed_alphabet(letters, _SQUARE), 5)
    plain_grid = transpose_matrix(polybius_grid(_SQUARE, 5))
    mapping = {
        plain_grid[r][c]: cipher_grid[r][c] for r in range(5) for c in range(5)
    }
    return AlphabetTable(mapping)


class Bazeries(BaseCipher):
    """Bazeries square substitution (25 letters, I/J merged).

    Output letters are separated by one space and words by three.
    """

    method = "bazeries"
    family = CipherFamily.MONOALPHABETIC

    char_sep = " "
    word_sep = "   "

    def _table(self) -> AlphabetTable:
        if self._key is None or str(self._key).strip() == "":
            raise EmptyInputError("Bazeries key is empty", field="key")
        self._alphabet = bazeries_table(self._key)
        return self._alphabet

    def _encode(self, text: str) -> str:
        return encode_alphabet(
            text.lower().replace("j", "i"), self._table(), self.char_sep, self.word_sep
        )

    def _decode(self, text: str) -> str:
        return decode_alphabet(
            text, self._table().inverse, self.char_sep, self.word_sep
        )

"""
Cipher Primitives
==================

Free, composable helpers shared by the cipher variants. None of them
keeps state; each returns a new string or grid.

References:
    - Kahn, D. (1996). The Codebreakers. Scribner.
    - Gaines, H. F. (1956). Cryptanalysis: A Study of Ciphers and Their
      Solution. Dover.
"""

from __future__ import annotations

import string
from typing import Mapping, Sequence

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits

# 25-letter square alphabet, J folded into I
SQUARE_ALPHABET = UPPERCASE.replace("J", "")

Grid = list[list[str]]


# ===================================================================== #
#  Shifts and rotations
# ===================================================================== #


def shift_characters(text: str, offset: int) -> str:
    """Shift each Latin letter by *offset* positions, preserving case.

    Non-letters are copied unchanged. Decoding is ``shift_characters(text, -offset)``.
    """
    offset %= 26
    out: list[str] = []
    for ch in text:
        if "a" <= ch <= "z":
            out.append(chr((ord(ch) - 97 + offset) % 26 + 97))
        elif "A" <= ch <= "Z":
            out.append(chr((ord(ch) - 65 + offset) % 26 + 65))
        else:
            out.append(ch)
    return "".join(out)


def rotate_symbols(text: str, offset: int, alphabet: Sequence[str]) -> str:
    """Rotate symbols of *alphabet* by *offset*; other symbols pass through."""
    size = len(alphabet)
    index = {symbol: i for i, symbol in enumerate(alphabet)}
    return "".join(
        alphabet[(index[ch] + offset) % size] if ch in index else ch
        for ch in text
    )


# ===================================================================== #
#  Dictionary substitution
# ===================================================================== #


def encode_alphabet(
    message: str,
    table: Mapping[str, str],
    char_sep: str = "",
    word_sep: str = " ",
) -> str:
    """Substitute every symbol of *message* through *table*.

    The message is lower-cased and split into words on single spaces.
    Symbols absent from *table* are dropped. Encoded symbols are joined
    with *char_sep*, encoded words with *word_sep*.
    """
    words = message.lower().split(" ")
    return word_sep.join(
        char_sep.join(table[ch] for ch in word if ch in table)
        for word in words
    )


def decode_alphabet(
    message: str,
    inverse: Mapping[str, str],
    char_sep: str = "",
    word_sep: str = " ",
) -> str:
    """Reverse :func:`encode_alphabet` using the *inverse* table.

    Words are separated by *word_sep*, symbols inside a word by
    *char_sep* (or taken one character at a time when *char_sep* is
    empty). Unknown symbols are dropped; words are re-joined with a
    single space.
    """
    words = message.lower().split(word_sep) if word_sep else [message.lower()]
    decoded: list[str] = []
    for word in words:
        symbols = word.split(char_sep) if char_sep else list(word)
        decoded.append("".join(inverse[s] for s in symbols if s in inverse))
    return " ".join(decoded)


# ===================================================================== #
#  Grids and matrices
# ===================================================================== #


def transpose_matrix(matrix: Sequence[Sequence[str]]) -> Grid:
    """Swap rows and columns of a rectangular matrix."""
    return [list(column) for column in zip(*matrix)]


def keyed_alphabet(keyword: str, base: str) -> str:
    """Deduplicated keyword symbols first, then the rest of *base* in order.

    Keyword symbols missing from *base* are ignored; callers normalise
    case beforehand.

    >>> keyed_alphabet("KEYWORD", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    'KEYWORDABCFGHIJLMNPQSTUVXZ'
    """
    seen: list[str] = []
    for symbol in keyword:
        if symbol in base and symbol not in seen:
            seen.append(symbol)
    seen.extend(symbol for symbol in base if symbol not in seen)
    return "".join(seen)


def polybius_grid(sequence: str, size: int) -> Grid:
    """Write *sequence* row-wise into a ``size x size`` grid.

    Raises:
        ValueError: If the sequence does not fill the grid exactly.
    """
    if len(sequence) != size * size:
        raise ValueError(
            f"Grid of size {size} needs {size * size} symbols, got {len(sequence)}"
        )
    return [list(sequence[row * size:(row + 1) * size]) for row in range(size)]


def grid_position(grid: Sequence[Sequence[str]], symbol: str) -> tuple[int, int] | None:
    """Zero-based ``(row, column)`` of *symbol*, or ``None`` if absent."""
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == symbol:
                return r, c
    return None


def column_order(key: str) -> list[int]:
    """Column indices in reading order: ascending key symbol, ties by position.

    >>> column_order("321")
    [2, 1, 0]
    >>> column_order("BAB")
    [1, 0, 2]
    """
    return sorted(range(len(key)), key=lambda i: (key[i], i))

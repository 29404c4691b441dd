"""
Alphabet Table
===============

Bidirectional symbol map used by the dictionary ciphers (Atbash, simple
substitution, Bazeries, Morse). The inverse is built once, when the
table is constructed.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping


class AlphabetTable(Mapping[str, str]):
    """Read-only plaintext-symbol to cipher-symbol map with its inverse.

    Args:
        mapping: Plain symbol -> cipher symbol. Must be injective.

    Raises:
        ValueError: If two plain symbols share a cipher symbol.
    """

    def __init__(self, mapping: Mapping[str, str]) -> None:
        forward = dict(mapping)
        inverse: dict[str, str] = {}
        for plain, cipher in forward.items():
            if cipher in inverse:
                raise ValueError(
                    f"Alphabet is not injective: {inverse[cipher]!r} and "
                    f"{plain!r} both map to {cipher!r}"
                )
            inverse[cipher] = plain
        self._forward = MappingProxyType(forward)
        self._inverse = MappingProxyType(inverse)

    @classmethod
    def from_sequences(cls, plain: str, cipher: str) -> AlphabetTable:
        """Pair two equal-length symbol sequences position by position."""
        if len(plain) != len(cipher):
            raise ValueError(
                f"Sequence lengths differ: {len(plain)} != {len(cipher)}"
            )
        return cls(dict(zip(plain, cipher)))

    def __getitem__(self, symbol: str) -> str:
        return self._forward[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)

    def __repr__(self) -> str:
        return f"AlphabetTable({len(self)} symbols)"

    @property
    def inverse(self) -> Mapping[str, str]:
        """Cipher symbol -> plain symbol."""
        return self._inverse

    def encode_symbol(self, symbol: str) -> str | None:
        return self._forward.get(symbol)

    def decode_symbol(self, symbol: str) -> str | None:
        return self._inverse.get(symbol)

"""
Scytale Cipher Variants
========================

Every cipher is registered under its ``method`` name so the engine and
CLI can build it from a string.
"""

from __future__ import annotations

from scytale.ciphers.amsco import Amsco
from scytale.ciphers.baconian import Baconian
from scytale.ciphers.fractionation import ADFGVX, ADFGX, Bifid
from scytale.ciphers.monoalphabetic import Atbash, Bazeries, SimpleSubstitution
from scytale.ciphers.morse import Morse
from scytale.ciphers.playfair import FourSquare, Playfair
from scytale.ciphers.polyalphabetic import Beaufort, Gronsfeld, Porta, Vigenere
from scytale.ciphers.polybius import Polybius
from scytale.ciphers.quagmire import Quagmire1, Quagmire2, Quagmire3, Quagmire4
from scytale.ciphers.rail_fence import RailFence
from scytale.ciphers.shift import CaesarShift, Rot5, Rot7, Rot13, Rot18, Rot47
from scytale.ciphers.two_square import TwoSquare
from scytale.core.base import BaseCipher

CIPHER_REGISTRY: dict[str, type[BaseCipher]] = {
    cls.method: cls
    for cls in (
        CaesarShift,
        Rot5,
        Rot7,
        Rot13,
        Rot18,
        Rot47,
        Atbash,
        SimpleSubstitution,
        Bazeries,
        Polybius,
        TwoSquare,
        Playfair,
        FourSquare,
        Amsco,
        RailFence,
        ADFGX,
        ADFGVX,
        Bifid,
        Vigenere,
        Beaufort,
        Gronsfeld,
        Porta,
        Quagmire1,
        Quagmire2,
        Quagmire3,
        Quagmire4,
        Morse,
        Baconian,
    )
}


def get_cipher(name: str) -> type[BaseCipher]:
    """Look up a cipher class by registry name (case-insensitive).

    Raises:
        KeyError: If no cipher is registered under *name*.
    """
    try:
        return CIPHER_REGISTRY[name.lower().replace("-", "_")]
    except KeyError:
        raise KeyError(
            f"Unknown cipher {name!r}; choose from {', '.join(sorted(CIPHER_REGISTRY))}"
        ) from None


__all__ = [
    "ADFGVX",
    "ADFGX",
    "Amsco",
    "Atbash",
    "Baconian",
    "Bazeries",
    "Beaufort",
    "Bifid",
    "CIPHER_REGISTRY",
    "CaesarShift",
    "FourSquare",
    "Gronsfeld",
    "Morse",
    "Playfair",
    "Polybius",
    "Porta",
    "Quagmire1",
    "Quagmire2",
    "Quagmire3",
    "Quagmire4",
    "RailFence",
    "Rot13",
    "Rot18",
    "Rot47",
    "Rot5",
    "Rot7",
    "SimpleSubstitution",
    "TwoSquare",
    "Vigenere",
    "get_cipher",
]

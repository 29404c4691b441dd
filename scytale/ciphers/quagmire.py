"""
Quagmire Ciphers
=================

Periodic polyalphabetic ciphers from the American Cryptogram
Association's Quagmire family. Each pairs a plain alphabet ``P`` with a
cipher alphabet ``C``; the indicator letter ``I`` and the repeating key
``K`` fix one alignment per key letter::

    offset(k) = index_C(k) - index_P(I)
    encode:  p -> C[(index_P(p) + offset) mod 26]
    decode:  c -> P[(index_C(c) - offset) mod 26]

=========  ================  ===================
Variant    Plain alphabet    Cipher alphabet
=========  ================  ===================
Quagmire1  straight          keyed
Quagmire2  keyed             straight
Quagmire3  keyed             same keyed alphabet
Quagmire4  keyed             independently keyed
=========  ================  ===================

Non-letters pass through and do not advance the key.

References:
    - American Cryptogram Association. Cipher Types: Quagmire I-IV.
      https://www.cryptogram.org/resource-area/cipher-types/
"""

from __future__ import annotations

import abc
from typing import Any, Optional

from scytale.core.base import BaseCipher
from scytale.core.keys import parse_keyword, validate_indicator
from scytale.core.models import CipherFamily, CipherParams
from scytale.core.primitives import UPPERCASE, keyed_alphabet


class _Quagmire(BaseCipher):
    """Shared Quagmire machinery.

    Args:
        message: Text to process.
        key: Keyword for the keyed alphabet(s).
        repeat_key: Repeating key; defaults to the keyword.
        indicator: Indicator letter, ``"A"`` by default.
    """

    family = CipherFamily.POLYALPHABETIC

    def __init__(
        self,
        message: str = "",
        key: Any = None,
        repeat_key: Optional[str] = None,
        indicator: str = "A",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, key, **kwargs)
        self._repeat_key = repeat_key
        self._indicator = indicator

    @classmethod
    def build(cls, message: str, params: CipherParams, **kwargs: Any) -> BaseCipher:
        return cls(
            message, params.key, params.repeat_key, params.indicator or "A", **kwargs
        )

    @property
    def indicator(self) -> str:
        return self._indicator

    @indicator.setter
    def indicator(self, value: str) -> None:
        self._indicator = value

    @property
    def repeat_key(self) -> Optional[str]:
        return self._repeat_key

    @abc.abstractmethod
    def alphabets(self) -> tuple[str, str]:
        """Return ``(plain_alphabet, cipher_alphabet)``."""

    def _offsets(self, plain: str, cipher: str) -> list[int]:
        indicator = validate_indicator(self._indicator)
        source = self._repeat_key if self._repeat_key is not None else self._key
        repeat = parse_keyword(
            source, field="repeat_key" if self._repeat_key is not None else "key"
        )
        base = plain.index(indicator)
        return [cipher.index(k) - base for k in repeat]

    def _keyword(self) -> str:
        return parse_keyword(self._key, field="key")

    def _transform(self, text: str, forward: bool) -> str:
        plain, cipher = self.alphabets()
        self._alphabet = (plain, cipher)
        offsets = self._offsets(plain, cipher)
        self._trace("P=%s C=%s offsets=%s", plain, cipher, offsets)

        out: list[str] = []
        i = 0
        for ch in text.upper():
            if ch not in UPPERCASE:
                out.append(ch)
                continue
            offset = offsets[i % len(offsets)]
            if forward:
                out.append(cipher[(plain.index(ch) + offset) % 26])
            else:
                out.append(plain[(cipher.index(ch) - offset) % 26])
            i += 1
        return "".join(out)

    def _encode(self, text: str) -> str:
        return self._transform(text, forward=True)

    def _decode(self, text: str) -> str:
        return self._transform(text, forward=False)


class Quagmire1(_Quagmire):
    """Straight plain alphabet, keyed cipher alphabet.

    >>> Quagmire1("HELLO", "KEY").encode()
    'FCMJO'
    """

    method = "quagmire1"

    def alphabets(self) -> tuple[str, str]:
        return UPPERCASE, keyed_alphabet(self._keyword(), UPPERCASE)


class Quagmire2(_Quagmire):
    """Keyed plain alphabet, straight cipher alphabet."""

    method = "quagmire2"

    def alphabets(self) -> tuple[str, str]:
        return keyed_alphabet(self._keyword(), UPPERCASE), UPPERCASE


class Quagmire3(_Quagmire):
    """Plain and cipher alphabets keyed by the same keyword."""

    method = "quagmire3"

    def alphabets(self) -> tuple[str, str]:
        keyed = keyed_alphabet(self._keyword(), UPPERCASE)
        return keyed, keyed


class Quagmire4(_Quagmire):
    """Plain alphabet keyed by *key*, cipher alphabet by *cipher_keyword*."""

    method = "quagmire4"

    def __init__(
        self,
        message: str = "",
        key: Any = None,
        cipher_keyword: Optional[str] = None,
        repeat_key: Optional[str] = None,
        indicator: str = "A",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, key, repeat_key, indicator, **kwargs)
        self._cipher_keyword = cipher_keyword

    @classmethod
    def build(cls, message: str, params: CipherParams, **kwargs: Any) -> BaseCipher:
        return cls(
            message,
            params.key,
            params.secondary_key,
            params.repeat_key,
            params.indicator or "A",
            **kwargs,
        )

    @property
    def cipher_keyword(self) -> Optional[str]:
        return self._cipher_keyword

    def alphabets(self) -> tuple[str, str]:
        plain = keyed_alphabet(self._keyword(), UPPERCASE)
        cipher = keyed_alphabet(
            parse_keyword(self._cipher_keyword, field="cipher_keyword"), UPPERCASE
        )
        return plain, cipher

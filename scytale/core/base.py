"""
Base Cipher Contract
=====================

Every cipher variant derives from :class:`BaseCipher`. A cipher owns a
message, a key, an alphabet and two advisory flags; ``encode`` and
``decode`` default to the stored message and always return a new string.

Keys are stored as given and validated when ``encode`` or ``decode``
runs, so a cipher can be built first and have its key fixed later.
"""

from __future__ import annotations

import abc
from contextlib import nullcontext
from typing import Any, ClassVar, Optional

from scytale.core.errors import EmptyInputError
from scytale.core.models import CipherFamily, CipherParams
from shared.logger import ScytaleLogger


class BaseCipher(abc.ABC):
    """Abstract cipher.

    Subclasses set :attr:`method` and :attr:`family` and implement
    :meth:`_encode` / :meth:`_decode`.

    Args:
        message: Text encoded or decoded when no explicit text is passed.
        key: Variant-specific key, validated lazily.
        encoded: Advisory flag marking *message* as ciphertext. Never
            enforced.
        debug: Log intermediate state at DEBUG level.
    """

    method: ClassVar[str] = ""
    family: ClassVar[CipherFamily]
    keyed: ClassVar[bool] = True

    def __init__(
        self,
        message: str = "",
        key: Any = None,
        *,
        encoded: bool = False,
        debug: bool = False,
    ) -> None:
        self._message = message
        self._key = key
        self._alphabet: Any = None
        self._encoded = encoded
        self._debug = debug
        self._logger: Optional[ScytaleLogger] = (
            ScytaleLogger(f"ciphers.{self.method}", log_level="DEBUG") if debug else None
        )

    @classmethod
    def build(
        cls,
        message: str,
        params: CipherParams,
        *,
        encoded: bool = False,
        debug: bool = False,
    ) -> BaseCipher:
        """Construct the cipher from a generic :class:`CipherParams`."""
        return cls(message, params.key, encoded=encoded, debug=debug)

    # ------------------------------------------------------------------ #
    #  Public operations
    # ------------------------------------------------------------------ #

    def encode(self, message: Optional[str] = None) -> str:
        text = self._resolve(message)
        with self._operation("encode"):
            result = self._encode(text)
        self._trace("encode %r -> %r", text, result)
        return result

    def decode(self, message: Optional[str] = None) -> str:
        text = self._resolve(message)
        with self._operation("decode"):
            result = self._decode(text)
        self._trace("decode %r -> %r", text, result)
        return result

    @abc.abstractmethod
    def _encode(self, text: str) -> str:
        ...

    @abc.abstractmethod
    def _decode(self, text: str) -> str:
        ...

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def message(self) -> str:
        return self._message

    @message.setter
    def message(self, value: str) -> None:
        self._message = value

    @property
    def key(self) -> Any:
        return self._key

    @key.setter
    def key(self, value: Any) -> None:
        self._key = value

    @property
    def alphabet(self) -> Any:
        """Symbol table or ordered alphabet the cipher works over."""
        return self._alphabet

    @alphabet.setter
    def alphabet(self, value: Any) -> None:
        self._alphabet = value

    @property
    def encoded(self) -> bool:
        return self._encoded

    @encoded.setter
    def encoded(self, value: bool) -> None:
        self._encoded = bool(value)

    @property
    def debug(self) -> bool:
        return self._debug

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    def _resolve(self, message: Optional[str]) -> str:
        text = self._message if message is None else message
        if not text:
            raise EmptyInputError("Message is empty", field="message")
        return text

    def _operation(self, name: str) -> Any:
        if self._logger is None:
            return nullcontext()
        return self._logger.operation(name)

    def _trace(self, msg: str, *args: Any) -> None:
        """Log at DEBUG when the cipher was built with ``debug=True``."""
        if self._logger is not None:
            self._logger.debug(msg, *args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(method={self.method!r}, key={self._key!r})"

"""
Scytale Core Module
====================

Error taxonomy, alphabet tables, primitives, key parsing, the base
cipher contract and the pydantic result models. The engine lives in
:mod:`scytale.core.engine`.
"""

from scytale.core.alphabet import AlphabetTable
from scytale.core.base import BaseCipher
from scytale.core.errors import (
    CipherError,
    EmptyInputError,
    KeyValidationError,
    UnsupportedSymbolError,
)
from scytale.core.models import (
    CandidateScore,
    CipherFamily,
    CipherParams,
    CipherResult,
    FrequencyReport,
    LanguageScore,
)

__all__ = [
    "AlphabetTable",
    "BaseCipher",
    "CandidateScore",
    "CipherError",
    "CipherFamily",
    "CipherParams",
    "CipherResult",
    "EmptyInputError",
    "FrequencyReport",
    "KeyValidationError",
    "LanguageScore",
    "UnsupportedSymbolError",
]

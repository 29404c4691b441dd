"""
Scytale Core Data Models
=========================

Pydantic models exchanged between the engine, the analyzers and the
output layer. All of them serialise to JSON through ``model_dump``.

References:
    - Friedman, W. F. (1922). The Index of Coincidence and Its
      Applications in Cryptanalysis. Riverbank Publication No. 22.
    - Pearson, K. (1900). On the criterion that a given system of
      deviations from the probable. Philosophical Magazine, 50(302).
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class CipherFamily(str, enum.Enum):
    """Classical cipher families."""

    SHIFT = "shift"
    MONOALPHABETIC = "monoalphabetic"
    POLYGRAPHIC = "polygraphic"          # Polybius, Two-Square, Playfair
    TRANSPOSITION = "transposition"
    FRACTIONATION = "fractionation"
    POLYALPHABETIC = "polyalphabetic"    # Vigenere family, Quagmire
    ENCODING = "encoding"                # Morse, Baconian; not ciphers


class Operation(str, enum.Enum):
    ENCODE = "encode"
    DECODE = "decode"


# ===================================================================== #
#  Cipher models
# ===================================================================== #


class CipherParams(BaseModel):
    """Keys handed to :meth:`BaseCipher.build`.

    Attributes:
        key: Primary key: shift, keyword or permutation.
        secondary_key: Second keyword (Two-Square square B, ADFGVX
            transposition key, Quagmire 4 cipher keyword).
        indicator: Quagmire indicator letter.
        repeat_key: Quagmire repeating key, defaults to the keyword.
    """

    key: Optional[Any] = None
    secondary_key: Optional[str] = None
    indicator: Optional[str] = None
    repeat_key: Optional[str] = None


class CipherResult(BaseModel):
    """Outcome of one encode or decode call made through the engine."""

    method: str
    family: CipherFamily
    operation: Operation
    input_text: str
    output_text: str
    key: Optional[str] = None
    secondary_key: Optional[str] = None
    duration_ms: float = 0.0


class CipherInfo(BaseModel):
    """Registry entry listed by ``scytale ciphers``."""

    method: str
    family: CipherFamily
    keyed: bool
    description: str = ""


# ===================================================================== #
#  Frequency analysis models
# ===================================================================== #


class LanguageScore(BaseModel):
    """Fit of a text's letter frequencies against one reference language.

    Lower ``chi_squared`` means a closer fit.
    """

    language: str
    chi_squared: float
    p_value: float = 0.0


class CandidateScore(BaseModel):
    """A decryption candidate ranked by chi-squared against a language."""

    key: str
    plaintext: str
    chi_squared: float
    shift: Optional[int] = None


class FrequencyPair(BaseModel):
    """Observed vs expected percentage for one symbol."""

    symbol: str
    observed: float
    expected: float


class FrequencyReport(BaseModel):
    """Complete frequency analysis of one text.

    Attributes:
        text_length: Characters in the analysed text.
        letter_count: Alphabetic characters counted.
        language: Reference language compared against.
        letter_frequencies: Observed letter percentages.
        expected_frequencies: Reference letter percentages.
        bigram_frequencies: Observed bigram percentages (top entries).
        pairs: Observed/expected pairs keyed by the reference alphabet.
        chi_squared: Statistic against ``expected_frequencies``.
        p_value: Chi-squared survival probability.
        index_of_coincidence: Friedman IC of the letters.
        entropy: Shannon entropy in bits per letter.
        language_scores: All reference languages ranked by fit.
    """

    text_length: int = 0
    letter_count: int = 0
    language: str = "english"
    letter_frequencies: dict[str, float] = Field(default_factory=dict)
    expected_frequencies: dict[str, float] = Field(default_factory=dict)
    bigram_frequencies: dict[str, float] = Field(default_factory=dict)
    pairs: list[FrequencyPair] = Field(default_factory=list)
    chi_squared: float = 0.0
    p_value: float = 0.0
    index_of_coincidence: float = 0.0
    entropy: float = 0.0
    language_scores: list[LanguageScore] = Field(default_factory=list)

    @property
    def best_language(self) -> Optional[str]:
        return self.language_scores[0].language if self.language_scores else None


# ===================================================================== #
#  Periodicity models
# ===================================================================== #


class KeyLengthScore(BaseModel):
    """A candidate period of a polyalphabetic key.

    ``score`` is the share of repeat distances that ``length`` divides.
    """

    length: int
    count: int
    score: float


class KasiskiReport(BaseModel):
    """Kasiski examination of one ciphertext.

    Attributes:
        letter_count: Letters examined after dropping everything else.
        ngram_size: Length of the repeated sequences searched for.
        repeats: Each repeated n-gram with its zero-based positions.
        distances: Pairwise distances between occurrences of a repeat.
        gcd: Greatest common divisor of all distances, 0 when none.
        key_lengths: Candidate periods, most likely first.
    """

    letter_count: int = 0
    ngram_size: int = 3
    repeats: dict[str, list[int]] = Field(default_factory=dict)
    distances: list[int] = Field(default_factory=list)
    gcd: int = 0
    key_lengths: list[KeyLengthScore] = Field(default_factory=list)

    @property
    def best_key_length(self) -> Optional[int]:
        return self.key_lengths[0].length if self.key_lengths else None

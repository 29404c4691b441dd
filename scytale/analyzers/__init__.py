"""
Scytale Analyzers
==================

Frequency analysis against reference language tables, plus Kasiski
examination of periodic ciphers.
"""

from scytale.analyzers.frequency import (
    FrequencyAnalyzer,
    chi_squared,
    letter_frequencies,
    ngram_frequencies,
)
from scytale.analyzers.kasiski import (
    KasiskiExaminer,
    distances_gcd,
    repeat_distances,
    repeated_ngrams,
)
from scytale.analyzers.references import (
    ReferenceTable,
    available_languages,
    expected_frequencies,
    load_reference,
)

__all__ = [
    "FrequencyAnalyzer",
    "KasiskiExaminer",
    "ReferenceTable",
    "available_languages",
    "chi_squared",
    "distances_gcd",
    "expected_frequencies",
    "letter_frequencies",
    "load_reference",
    "ngram_frequencies",
    "repeat_distances",
    "repeated_ngrams",
]

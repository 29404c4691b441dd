"""
Kasiski Examination
====================

Estimates the key period of a periodic polyalphabetic cipher such as
Vigenère. When the same plaintext fragment meets the same key fragment
twice, the ciphertext repeats, and the distance between the repeats is
a multiple of the key length.

The examination:
1. Find every n-gram (trigram by default) occurring more than once
2. Take the distance between each pair of its occurrences
3. Score each candidate length by the share of distances it divides

Accidental repeats add noise, so the score is a ranking, not a proof.
Multiples of the true period score at least as well as small factors of
it; ties are broken towards the shorter length.

References:
    - Kasiski, F. W. (1863). Die Geheimschriften und die
      Dechiffrir-Kunst. Berlin: Mittler und Sohn.
    - Sinkov, A. (1966). Elementary Cryptanalysis, ch. 4 "Polyalphabetic
      Substitution".
"""

from __future__ import annotations

import math
from functools import reduce
from typing import Mapping, Sequence

from scytale.core.models import KasiskiReport, KeyLengthScore
from scytale.core.primitives import UPPERCASE


# ===================================================================== #
#  Free functions
# ===================================================================== #


def _letters(text: str) -> str:
    return "".join(ch for ch in text.upper() if ch in UPPERCASE)


def repeated_ngrams(text: str, n: int = 3) -> dict[str, list[int]]:
    """Every n-gram of the letters of *text* that occurs more than once.

    >>> repeated_ngrams("ABCABCABC")["ABC"]
    [0, 3, 6]
    """
    letters = _letters(text)
    positions: dict[str, list[int]] = {}
    for i in range(len(letters) - n + 1):
        positions.setdefault(letters[i:i + n], []).append(i)
    return {gram: where for gram, where in positions.items() if len(where) > 1}


def repeat_distances(repeats: Mapping[str, Sequence[int]]) -> list[int]:
    """Distances between every pair of occurrences of each repeat."""
    distances = []
    for where in repeats.values():
        for i, first in enumerate(where):
            distances.extend(later - first for later in where[i + 1:])
    return distances


def distances_gcd(distances: Sequence[int]) -> int:
    """Greatest common divisor of *distances*, 0 for an empty sequence."""
    return reduce(math.gcd, distances, 0)


# ===================================================================== #
#  Examiner
# ===================================================================== #


class KasiskiExaminer:
    """Ranks candidate key lengths from repeated ciphertext n-grams.

    Usage::

        examiner = KasiskiExaminer()
        report = examiner.examine(ciphertext)
        period = report.best_key_length

    Args:
        ngram_size: Length of the repeats searched for.
        max_key_length: Longest period considered.
    """

    def __init__(self, ngram_size: int = 3, max_key_length: int = 20) -> None:
        if ngram_size < 2:
            raise ValueError(f"ngram_size must be at least 2, got {ngram_size}")
        if max_key_length < 2:
            raise ValueError(f"max_key_length must be at least 2, got {max_key_length}")
        self.ngram_size = ngram_size
        self.max_key_length = max_key_length

    def suggest_key_lengths(
        self, distances: Sequence[int], letter_count: int
    ) -> list[KeyLengthScore]:
        """Score lengths ``2..max_key_length`` against *distances*."""
        if not distances:
            return []
        longest = min(self.max_key_length, letter_count)
        scores = []
        for length in range(2, longest + 1):
            count = sum(1 for d in distances if d % length == 0)
            if count:
                scores.append(
                    KeyLengthScore(
                        length=length,
                        count=count,
                        score=round(count / len(distances), 6),
                    )
                )
        return sorted(scores, key=lambda s: (-s.score, s.length))

    def examine(self, text: str) -> KasiskiReport:
        letters = _letters(text)
        if len(letters) < 2 * self.ngram_size:
            return KasiskiReport(letter_count=len(letters), ngram_size=self.ngram_size)

        repeats = repeated_ngrams(letters, self.ngram_size)
        distances = repeat_distances(repeats)
        return KasiskiReport(
            letter_count=len(letters),
            ngram_size=self.ngram_size,
            repeats=repeats,
            distances=distances,
            gcd=distances_gcd(distances),
            key_lengths=self.suggest_key_lengths(distances, len(letters)),
        )

"""
Frequency Analyzer
===================

Letter and n-gram frequency analysis of natural-language text, scored
against reference language statistics.

The analysis pipeline:
1. Letter frequency table (percentages of alphabetic symbols)
2. Overlapping n-gram table (whitespace removed)
3. Chi-squared fit against the reference language, with p-value
4. Index of Coincidence and Shannon entropy of the letters
5. Ranking of every reference language by chi-squared

Chi-squared is the ranking score throughout: a lower value means the
text looks more like the reference language.

Index of Coincidence reference points:
    - IC ~ 0.066 : English plaintext or monoalphabetic ciphertext
    - IC ~ 0.038 : uniformly random letters (1/26)

References:
    - Friedman, W. F. (1922). The Index of Coincidence and Its
      Applications in Cryptanalysis. Riverbank Publication No. 22.
    - Pearson, K. (1900). On the criterion that a given system of
      deviations. Philosophical Magazine, 50(302), 157-175.
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America.
"""

from __future__ import annotations

import math
from typing import Iterable, Mapping, Optional

from scytale.analyzers.references import available_languages, load_reference
from scytale.core.models import (
    CandidateScore,
    FrequencyPair,
    FrequencyReport,
    LanguageScore,
)
from shared.math_utils import (
    align_frequencies,
    chi_squared_statistic,
    chi_squared_test,
    index_of_coincidence,
    percentage_table,
    shannon_entropy,
)


# ===================================================================== #
#  Free functions
# ===================================================================== #


def _letters(text: str) -> list[str]:
    return [ch for ch in text.upper() if ch.isalpha()]


def letter_frequencies(text: str) -> dict[str, float]:
    """Percentage of each upper-cased alphabetic symbol in *text*.

    >>> letter_frequencies("AAB")["B"]
    33.33333333333333
    """
    return percentage_table(_letters(text))


def ngram_frequencies(text: str, n: int = 2) -> dict[str, float]:
    """Percentage of each overlapping *n*-gram of *text*.

    Whitespace is removed and the text upper-cased before windows are
    taken; percentages are relative to the number of windows.

    Raises:
        ValueError: If *n* is less than 1.
    """
    if n < 1:
        raise ValueError(f"n-gram size must be >= 1, got {n}")
    cleaned = "".join(text.split()).upper()
    return percentage_table(
        cleaned[i:i + n] for i in range(len(cleaned) - n + 1)
    )


def chi_squared(observed: Mapping[str, float], expected: Mapping[str, float]) -> float:
    """Sum of ``(obs - exp)^2 / exp`` over the keys of *expected*.

    Observed symbols missing from *observed* count as 0; keys with a
    non-positive expected value are skipped.

    >>> chi_squared({"A": 10}, {"A": 5, "B": 5})
    10.0
    """
    _, obs, exp = align_frequencies(observed, expected)
    return chi_squared_statistic(obs, exp)


# ===================================================================== #
#  FrequencyAnalyzer
# ===================================================================== #


class FrequencyAnalyzer:
    """Frequency analysis against a reference language.

    Usage::

        analyzer = FrequencyAnalyzer(language="english")
        report = analyzer.analyze(text)
        print(report.chi_squared, report.best_language)

    Args:
        language: Default reference language.
        reference_dir: Directory of custom reference JSON tables; the
            bundled tables are used when empty.
        ngram_size: Window size for the n-gram table in reports.
        top_ngrams: Number of n-grams kept in a report.
    """

    # Friedman IC reference points for a 26-letter alphabet
    IC_ENGLISH: float = 0.0667
    IC_RANDOM_26: float = 1.0 / 26.0

    def __init__(
        self,
        language: str = "english",
        reference_dir: Optional[str] = None,
        ngram_size: int = 2,
        top_ngrams: int = 15,
    ) -> None:
        self.language = language.lower()
        self.reference_dir = reference_dir or None
        self.ngram_size = ngram_size
        self.top_ngrams = top_ngrams

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def get_letter_frequencies(self, text: str) -> dict[str, float]:
        return letter_frequencies(text)

    def get_ngram_frequencies(self, text: str, n: Optional[int] = None) -> dict[str, float]:
        return ngram_frequencies(text, self.ngram_size if n is None else n)

    def expected(self, language: Optional[str] = None) -> Mapping[str, float]:
        """Reference monogram percentages, read-only."""
        return load_reference(language or self.language, self.reference_dir).monograms

    def calculate_chi_squared(
        self,
        observed: Mapping[str, float],
        expected: Optional[Mapping[str, float]] = None,
    ) -> float:
        """Chi-squared of *observed* against *expected* (default: the reference language)."""
        return chi_squared(observed, self.expected() if expected is None else expected)

    def paired_frequencies(
        self, text: str, language: Optional[str] = None
    ) -> list[FrequencyPair]:
        """Observed and expected percentages keyed identically, A to Z.

        This is the shape a bar chart of observed vs expected consumes.
        """
        expected = self.expected(language)
        observed = letter_frequencies(text)
        return [
            FrequencyPair(
                symbol=symbol,
                observed=observed.get(symbol, 0.0),
                expected=expected[symbol],
            )
            for symbol in sorted(expected)
        ]

    # ------------------------------------------------------------------ #
    #  Statistics
    # ------------------------------------------------------------------ #

    def index_of_coincidence(self, text: str) -> float:
        return index_of_coincidence(_letters(text))

    def entropy(self, text: str) -> float:
        """Shannon entropy of the letters in bits per letter."""
        return shannon_entropy(_letters(text))

    def _score(self, text: str, language: str) -> LanguageScore:
        letters = _letters(text)
        observed = percentage_table(letters)
        expected = self.expected(language)
        _, obs_pct, exp_pct = align_frequencies(observed, expected)

        # p-value is only meaningful on counts, not percentages
        total = len(letters)
        _, p_value = chi_squared_test(obs_pct * total / 100.0, exp_pct * total / 100.0)
        return LanguageScore(
            language=language,
            chi_squared=chi_squared_statistic(obs_pct, exp_pct),
            p_value=p_value if total else 0.0,
        )

    def detect_language(self, text: str) -> list[LanguageScore]:
        """Rank every reference language by chi-squared, best first."""
        scores = [
            self._score(text, language)
            for language in available_languages(self.reference_dir)
        ]
        return sorted(scores, key=lambda s: s.chi_squared)

    def rank_candidates(
        self,
        candidates: Mapping[str, str] | Iterable[tuple[str, str]],
        language: Optional[str] = None,
    ) -> list[CandidateScore]:
        """Rank ``key -> plaintext`` candidates by chi-squared, best first.

        Candidates without any letters sort last.
        """
        items = candidates.items() if isinstance(candidates, Mapping) else candidates
        expected = self.expected(language)
        ranked: list[CandidateScore] = []
        for key, plaintext in items:
            observed = letter_frequencies(plaintext)
            score = chi_squared(observed, expected) if observed else math.inf
            ranked.append(
                CandidateScore(key=str(key), plaintext=plaintext, chi_squared=score)
            )
        return sorted(ranked, key=lambda c: c.chi_squared)

    # ------------------------------------------------------------------ #
    #  Full report
    # ------------------------------------------------------------------ #

    def analyze(self, text: str, language: Optional[str] = None) -> FrequencyReport:
        """Complete frequency analysis of *text*.

        Args:
            text: Text to analyse (plaintext or a decryption candidate).
            language: Reference language, defaults to the analyzer's.

        Returns:
            FrequencyReport with tables, statistics and language ranking.
        """
        language = (language or self.language).lower()
        letters = _letters(text)
        if not letters:
            return FrequencyReport(
                text_length=len(text),
                language=language,
                expected_frequencies=dict(self.expected(language)),
                p_value=1.0,
            )

        score = self._score(text, language)
        ngrams = self.get_ngram_frequencies(text)
        top = sorted(ngrams.items(), key=lambda kv: (-kv[1], kv[0]))[: self.top_ngrams]

        return FrequencyReport(
            text_length=len(text),
            letter_count=len(letters),
            language=language,
            letter_frequencies=dict(
                sorted(percentage_table(letters).items(), key=lambda kv: (-kv[1], kv[0]))
            ),
            expected_frequencies=dict(self.expected(language)),
            bigram_frequencies=dict(top),
            pairs=self.paired_frequencies(text, language),
            chi_squared=score.chi_squared,
            p_value=score.p_value,
            index_of_coincidence=self.index_of_coincidence(text),
            entropy=self.entropy(text),
            language_scores=self.detect_language(text),
        )


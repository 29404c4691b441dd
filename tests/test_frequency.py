"""
Tests for frequency analysis, reference tables and the statistics helpers.
"""
import json
import math

import numpy as np
import pytest

from scytale.analyzers.frequency import (
    FrequencyAnalyzer,
    chi_squared,
    letter_frequencies,
    ngram_frequencies,
)
from scytale.analyzers.references import (
    available_languages,
    expected_frequencies,
    load_reference,
)
from shared.math_utils import (
    chi_squared_test,
    index_of_coincidence,
    percentage_table,
    shannon_entropy,
)


class TestFrequencyTables:
    """Test letter and n-gram tables."""

    def test_letter_frequencies(self):
        freqs = letter_frequencies("aab!")
        assert freqs == pytest.approx({"A": 200 / 3, "B": 100 / 3})

    def test_letter_frequencies_empty(self):
        assert letter_frequencies("123 !?") == {}

    def test_bigrams_overlap(self):
        freqs = ngram_frequencies("ab ab", 2)
        assert freqs == pytest.approx({"AB": 200 / 3, "BA": 100 / 3})

    def test_ngram_size_must_be_positive(self):
        with pytest.raises(ValueError):
            ngram_frequencies("abc", 0)

    def test_percentage_table_keeps_first_seen_order(self):
        assert list(percentage_table("cab")) == ["c", "a", "b"]


class TestStatistics:
    """Test chi-squared, IC and entropy."""

    def test_chi_squared_missing_observed_counts_as_zero(self):
        assert chi_squared({"A": 10}, {"A": 5, "B": 5}) == pytest.approx(10.0)

    def test_chi_squared_identical(self):
        table = {"A": 40.0, "B": 60.0}
        assert chi_squared(table, table) == 0.0

    def test_chi_squared_skips_zero_expected(self):
        assert chi_squared({"A": 50, "K": 50}, {"A": 50, "K": 0.0}) == 0.0

    def test_chi_squared_test_p_value(self):
        chi2, p = chi_squared_test(np.array([10.0, 10.0]), np.array([10.0, 10.0]))
        assert chi2 == 0.0
        assert p == pytest.approx(1.0)

    def test_chi_squared_test_extreme_fit(self):
        _, p = chi_squared_test(np.array([100.0, 0.0]), np.array([50.0, 50.0]))
        assert p < 1e-10

    def test_chi_squared_shape_mismatch(self):
        with pytest.raises(ValueError):
            chi_squared_test(np.array([1.0]), np.array([1.0, 2.0]))

    def test_index_of_coincidence(self):
        assert index_of_coincidence("AAAA") == 1.0
        assert index_of_coincidence("ABCD") == 0.0
        assert index_of_coincidence("A") == 0.0

    def test_entropy(self):
        assert shannon_entropy("AAAA") == 0.0
        assert shannon_entropy("ABAB") == pytest.approx(1.0)
        assert shannon_entropy("") == 0.0


class TestReferences:
    """Test the bundled and custom reference tables."""

    def test_bundled_languages(self):
        assert available_languages() == [
            "english", "french", "german", "italian", "portuguese", "spanish",
        ]

    def test_monograms_cover_alphabet(self):
        table = load_reference("english")
        assert len(table.monograms) == 26
        assert sum(table.monograms.values()) == pytest.approx(100.0, abs=0.5)
        assert table.ngrams(2)["TH"] > 0

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            expected_frequencies("english")["E"] = 0.0  # type: ignore[index]

    def test_unknown_language(self):
        with pytest.raises(ValueError, match="klingon"):
            load_reference("klingon")

    def test_custom_reference_dir(self, tmp_path):
        payload = {"language": "tiny", "monograms": {"a": 50.0, "b": 50.0}}
        (tmp_path / "tiny.json").write_text(json.dumps(payload), encoding="utf-8")

        assert available_languages(tmp_path) == ["tiny"]
        table = load_reference("tiny", tmp_path)
        assert dict(table.monograms) == {"A": 50.0, "B": 50.0}
        assert dict(table.bigrams) == {}


class TestFrequencyAnalyzer:
    """Test the analyzer facade."""

    def test_paired_frequencies(self):
        pairs = FrequencyAnalyzer().paired_frequencies("EEE")
        assert [p.symbol for p in pairs] == sorted(p.symbol for p in pairs)
        assert len(pairs) == 26
        e = next(p for p in pairs if p.symbol == "E")
        assert e.observed == 100.0
        assert e.expected == pytest.approx(12.70)

    def test_detect_english(self, english_text):
        scores = FrequencyAnalyzer().detect_language(english_text)
        assert len(scores) == 6
        assert scores[0].language == "english"
        assert scores == sorted(scores, key=lambda s: s.chi_squared)

    def test_analyze_report(self, english_text):
        report = FrequencyAnalyzer().analyze(english_text)
        assert report.language == "english"
        assert report.text_length == len(english_text)
        assert report.letter_count == sum(ch.isalpha() for ch in english_text)
        assert report.best_language == "english"
        assert len(report.pairs) == 26
        assert 0 < len(report.bigram_frequencies) <= 15
        assert 0.05 < report.index_of_coincidence < 0.09
        assert 3.5 < report.entropy < 4.5
        assert 0.0 <= report.p_value <= 1.0

    def test_analyze_without_letters(self):
        report = FrequencyAnalyzer().analyze("1234 !!")
        assert report.letter_count == 0
        assert report.letter_frequencies == {}
        assert report.p_value == 1.0
        assert report.best_language is None

    def test_analyze_unknown_language(self):
        with pytest.raises(ValueError):
            FrequencyAnalyzer().analyze("hello", "klingon")

    def test_rank_candidates(self, english_text, shifted_text):
        ranked = FrequencyAnalyzer().rank_candidates(
            {"noise": shifted_text, "plain": english_text, "empty": "1234"}
        )
        assert [c.key for c in ranked] == ["plain", "noise", "empty"]
        assert math.isinf(ranked[-1].chi_squared)

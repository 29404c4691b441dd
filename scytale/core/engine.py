"""
Scytale Engine
===============

Facade over the cipher registry, the frequency analyzer and the Kasiski
examiner. Callers name
a cipher and pass keys as plain values; the engine builds the cipher,
applies configuration defaults, times the call and returns a pydantic
:class:`~scytale.core.models.CipherResult`.

Failures are logged and re-raised unchanged.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
    - Sinkov, A. (1966). Elementary Cryptanalysis, ch. 2 "Caesar
      brute force".
"""

from __future__ import annotations

import time
from typing import Any, Optional

from shared.config import ScytaleConfig
from shared.logger import ScytaleLogger

from scytale.analyzers.frequency import FrequencyAnalyzer
from scytale.analyzers.kasiski import KasiskiExaminer
from scytale.ciphers import CIPHER_REGISTRY, get_cipher
from scytale.ciphers.amsco import Amsco
from scytale.ciphers.morse import Morse
from scytale.ciphers.playfair import FourSquare, Playfair
from scytale.ciphers.rail_fence import RailFence
from scytale.ciphers.shift import CaesarShift
from scytale.ciphers.two_square import TwoSquare
from scytale.core.base import BaseCipher
from scytale.core.errors import CipherError
from scytale.core.models import (
    CandidateScore,
    CipherInfo,
    CipherParams,
    CipherResult,
    FrequencyReport,
    KasiskiReport,
    LanguageScore,
    Operation,
)


class ScytaleEngine:
    """Builds ciphers by name and runs frequency analysis.

    Usage::

        engine = ScytaleEngine()
        result = engine.encode("caesar", "Hello", key=3)
        report = engine.analyze("It was the best of times")
        best = engine.crack_shift("Olssv dvysk")[0]
        period = engine.kasiski(ciphertext).best_key_length

    Attributes:
        config: Scytale configuration instance.
        logger: Logger for the engine.
    """

    def __init__(self, config: Optional[ScytaleConfig] = None) -> None:
        self.config = config or ScytaleConfig()
        gs = self.config.global_settings
        self.logger = ScytaleLogger(
            "engine",
            log_level="DEBUG" if gs.debug else gs.log_level,
            log_file=gs.log_file or None,
            json_logs=gs.log_json,
        )

        analysis = self.config.analysis
        self._analyzer = FrequencyAnalyzer(
            language=analysis.default_language,
            reference_dir=analysis.reference_dir or None,
            ngram_size=analysis.ngram_size,
        )
        self._kasiski = KasiskiExaminer(
            ngram_size=analysis.kasiski_ngram_size,
            max_key_length=analysis.max_key_length,
        )

    @property
    def analyzer(self) -> FrequencyAnalyzer:
        return self._analyzer

    # ------------------------------------------------------------------ #
    #  Cipher registry
    # ------------------------------------------------------------------ #

    @staticmethod
    def list_ciphers() -> list[CipherInfo]:
        """Describe every registered cipher."""
        infos = []
        for name, cls in CIPHER_REGISTRY.items():
            doc = (cls.__doc__ or "").strip().splitlines()
            infos.append(
                CipherInfo(
                    method=name,
                    family=cls.family,
                    keyed=cls.keyed,
                    description=doc[0] if doc else "",
                )
            )
        return infos

    def build(
        self,
        name: str,
        message: str = "",
        *,
        key: Any = None,
        secondary_key: Optional[str] = None,
        indicator: Optional[str] = None,
        repeat_key: Optional[str] = None,
        encoded: bool = False,
    ) -> BaseCipher:
        """Instantiate cipher *name* with configuration defaults applied.

        Raises:
            KeyError: If *name* is not registered.
        """
        cls = get_cipher(name)
        cipher_cfg = self.config.cipher
        params = CipherParams(
            key=key,
            secondary_key=secondary_key,
            indicator=indicator or cipher_cfg.quagmire_indicator,
            repeat_key=repeat_key,
        )
        debug = self.config.global_settings.debug

        if cls is TwoSquare or cls is FourSquare:
            return cls(
                message, key, secondary_key,
                filler=cipher_cfg.two_square_filler, encoded=encoded, debug=debug,
            )
        if cls is Playfair:
            return Playfair(
                message, key,
                filler=cipher_cfg.two_square_filler, encoded=encoded, debug=debug,
            )
        if cls is RailFence:
            return RailFence(
                message, cipher_cfg.rail_fence_rails if key is None else key,
                encoded=encoded, debug=debug,
            )
        if cls is Amsco:
            return Amsco(
                message, key,
                max_key_length=cipher_cfg.max_amsco_key_length,
                encoded=encoded, debug=debug,
            )
        if cls is Morse:
            return Morse(
                message, word_sep=cipher_cfg.morse_word_separator,
                encoded=encoded, debug=debug,
            )
        return cls.build(message, params, encoded=encoded, debug=debug)

    # ------------------------------------------------------------------ #
    #  Encode / decode
    # ------------------------------------------------------------------ #

    def encode(self, name: str, message: str, **keys: Any) -> CipherResult:
        """Encode *message* with cipher *name*.

        Keyword arguments are the keys accepted by :meth:`build`.
        """
        return self._run(Operation.ENCODE, name, message, keys)

    def decode(self, name: str, message: str, **keys: Any) -> CipherResult:
        """Decode *message* with cipher *name*."""
        return self._run(Operation.DECODE, name, message, keys)

    def _run(
        self, operation: Operation, name: str, message: str, keys: dict[str, Any]
    ) -> CipherResult:
        with self.logger.operation(operation.value):
            cipher = self.build(
                name, message, encoded=operation is Operation.DECODE, **keys
            )
            self.logger.info(f"{operation.value} with {cipher.method}")
            start = time.perf_counter()
            try:
                if operation is Operation.ENCODE:
                    output = cipher.encode()
                else:
                    output = cipher.decode()
            except CipherError as exc:
                self.logger.error(
                    f"{cipher.method} {operation.value} failed: {exc}",
                    field=exc.field,
                )
                raise
            elapsed = (time.perf_counter() - start) * 1000.0

        key = keys.get("key")
        secondary = keys.get("secondary_key")
        return CipherResult(
            method=cipher.method,
            family=cipher.family,
            operation=operation,
            input_text=message,
            output_text=output,
            key=None if key is None else str(key),
            secondary_key=secondary,
            duration_ms=round(elapsed, 3),
        )

    # ------------------------------------------------------------------ #
    #  Analysis
    # ------------------------------------------------------------------ #

    def analyze(self, text: str, language: Optional[str] = None) -> FrequencyReport:
        """Frequency report of *text* against *language* (config default)."""
        with self.logger.operation("frequency_analysis"):
            with self.logger.timed("frequency analysis"):
                report = self._analyzer.analyze(text, language)
            self.logger.info(
                f"chi-squared {report.chi_squared:.3f} against {report.language}"
            )
        return report

    def detect_language(self, text: str) -> list[LanguageScore]:
        """Reference languages ranked by chi-squared, best first."""
        with self.logger.operation("detect_language"):
            scores = self._analyzer.detect_language(text)
            if scores:
                self.logger.info(f"best language match: {scores[0].language}")
        return scores

    def crack_shift(
        self, ciphertext: str, language: Optional[str] = None
    ) -> list[CandidateScore]:
        """Try all 26 Caesar shifts and rank the plaintexts by chi-squared.

        Returns:
            Candidates best first; ``shift`` holds the key that decodes
            the ciphertext into each candidate.
        """
        with self.logger.operation("crack_shift"):
            with self.logger.timed("caesar brute force"):
                cipher = CaesarShift(ciphertext, 0)
                candidates = {}
                for shift in range(26):
                    cipher.key = shift
                    candidates[str(shift)] = cipher.decode()
                ranked = self._analyzer.rank_candidates(candidates, language)

        for candidate in ranked:
            candidate.shift = int(candidate.key)
        if ranked:
            self.logger.info(f"best shift {ranked[0].shift}")
        return ranked

    def kasiski(self, ciphertext: str) -> KasiskiReport:
        """Kasiski examination of *ciphertext*, candidate periods best first."""
        with self.logger.operation("kasiski"):
            report = self._kasiski.examine(ciphertext)
            self.logger.info(
                f"{len(report.repeats)} repeated {report.ngram_size}-grams, "
                f"best period {report.best_key_length}"
            )
        return report

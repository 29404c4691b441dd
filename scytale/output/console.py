"""
Scytale Console Output
=======================

Rich-based formatters for cipher results, frequency reports, language
rankings, brute-force candidates and Kasiski periods. Observed and expected letter
frequencies are drawn side by side as horizontal bars.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.bar import Bar
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import ScytaleConsole
from scytale.core.models import (
    CandidateScore,
    CipherInfo,
    CipherResult,
    FrequencyReport,
    KasiskiReport,
    LanguageScore,
)

_FAMILY_COLOURS: dict[str, str] = {
    "shift": "bright_blue",
    "monoalphabetic": "cyan",
    "polygraphic": "bright_magenta",
    "transposition": "yellow",
    "fractionation": "dark_orange",
    "polyalphabetic": "bright_red",
    "encoding": "dim white",
}


class ScytaleConsoleOutput:
    """Console output formatters for Scytale results.

    Usage::

        output = ScytaleConsoleOutput(ScytaleConsole())
        output.display_cipher_result(result)
        output.display_frequency(report)
    """

    def __init__(self, console: Optional[ScytaleConsole] = None) -> None:
        self.console = console or ScytaleConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Cipher results
    # ------------------------------------------------------------------ #

    def display_cipher_result(self, result: CipherResult) -> None:
        """Show input, output and key of one encode/decode call."""
        colour = _FAMILY_COLOURS.get(result.family.value, "white")
        body = Text()
        body.append("Method: ", style="bold")
        body.append(f"{result.method}", style=colour)
        body.append(f" ({result.family.value})\n")
        if result.key is not None:
            body.append("Key: ", style="bold")
            body.append(f"{result.key}\n")
        if result.secondary_key:
            body.append("Secondary key: ", style="bold")
            body.append(f"{result.secondary_key}\n")
        body.append("Input: ", style="bold")
        body.append(f"{result.input_text}\n", style="scytale.plain")
        body.append("Output: ", style="bold")
        body.append(result.output_text, style="scytale.cipher")

        self._rich.print(
            Panel(
                body,
                title=result.operation.value.title(),
                subtitle=f"{result.duration_ms:.3f} ms",
                border_style="cyan",
            )
        )

    def display_cipher_list(self, ciphers: Sequence[CipherInfo]) -> None:
        tbl = Table(
            title="Available Ciphers",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("Name", style="bold")
        tbl.add_column("Family")
        tbl.add_column("Keyed", justify="center")
        tbl.add_column("Description")
        for info in ciphers:
            colour = _FAMILY_COLOURS.get(info.family.value, "white")
            tbl.add_row(
                info.method,
                f"[{colour}]{info.family.value}[/{colour}]",
                "yes" if info.keyed else "no",
                info.description,
            )
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Frequency analysis
    # ------------------------------------------------------------------ #

    def display_frequency(self, report: FrequencyReport) -> None:
        """Display a frequency report: summary, bar chart, bigrams, languages."""
        self.console.section("Frequency Analysis")

        summary = Text()
        summary.append("Characters: ", style="bold")
        summary.append(f"{report.text_length:,} ({report.letter_count:,} letters)\n")
        summary.append("Reference: ", style="bold")
        summary.append(f"{report.language}\n")
        summary.append("Chi-Squared: ", style="bold")
        summary.append(f"{report.chi_squared:.4f}")
        summary.append(f" (p={report.p_value:.6f})\n")
        summary.append("Index of Coincidence: ", style="bold")
        summary.append(f"{report.index_of_coincidence:.6f}\n")
        summary.append("Entropy: ", style="bold")
        summary.append(f"{report.entropy:.4f} bits/letter")
        if report.best_language:
            summary.append("\nBest Language Match: ", style="bold")
            summary.append(report.best_language, style="bold bright_green")

        self._rich.print(Panel(summary, title="Summary", border_style="cyan"))

        if report.pairs:
            self._display_frequency_bars(report)

        if report.bigram_frequencies:
            tbl = Table(
                title="Most Common Bigrams",
                border_style="bright_cyan",
                header_style="bold bright_magenta",
            )
            tbl.add_column("Bigram", justify="center")
            tbl.add_column("Frequency", justify="right")
            for gram, pct in report.bigram_frequencies.items():
                tbl.add_row(gram, f"{pct:.2f}%")
            self._rich.print(tbl)

        if report.language_scores:
            self.display_languages(report.language_scores)

    def _display_frequency_bars(self, report: FrequencyReport) -> None:
        peak = max(
            max(p.observed for p in report.pairs),
            max(p.expected for p in report.pairs),
            1.0,
        )
        tbl = Table(
            title=f"Observed vs Expected ({report.language})",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("Letter", justify="center", style="bold")
        tbl.add_column("Observed", justify="right")
        tbl.add_column("", width=24)
        tbl.add_column("Expected", justify="right")
        tbl.add_column("", width=24)
        for pair in report.pairs:
            tbl.add_row(
                pair.symbol,
                f"{pair.observed:.2f}",
                Bar(size=peak, begin=0, end=pair.observed, color="bright_green"),
                f"{pair.expected:.2f}",
                Bar(size=peak, begin=0, end=pair.expected, color="bright_blue"),
            )
        self._rich.print(tbl)

    def display_languages(self, scores: Sequence[LanguageScore]) -> None:
        tbl = Table(
            title="Language Ranking",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("#", style="dim", justify="right")
        tbl.add_column("Language")
        tbl.add_column("Chi-Squared", justify="right")
        tbl.add_column("p-value", justify="right")
        for idx, score in enumerate(scores, start=1):
            style = "bold bright_green" if idx == 1 else ""
            tbl.add_row(
                str(idx),
                f"[{style}]{score.language}[/{style}]" if style else score.language,
                f"{score.chi_squared:.3f}",
                f"{score.p_value:.4g}",
            )
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Brute force
    # ------------------------------------------------------------------ #

    def display_candidates(
        self, candidates: Sequence[CandidateScore], limit: int = 5
    ) -> None:
        """Show the best *limit* decryption candidates."""
        self.console.section("Shift Candidates")
        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("#", style="dim", justify="right")
        tbl.add_column("Key", justify="center")
        tbl.add_column("Chi-Squared", justify="right")
        tbl.add_column("Plaintext", ratio=2)
        for idx, cand in enumerate(candidates[:limit], start=1):
            tbl.add_row(
                str(idx),
                cand.key,
                f"{cand.chi_squared:.3f}",
                cand.plaintext,
            )
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Periodicity
    # ------------------------------------------------------------------ #

    def display_kasiski(self, report: KasiskiReport, limit: int = 8) -> None:
        """Show the repeated n-grams and the best candidate key lengths."""
        self.console.section("Kasiski Examination")
        if not report.key_lengths:
            self.console.warning(
                f"No repeated {report.ngram_size}-grams in {report.letter_count} letters"
            )
            return

        self.console.info(
            f"{len(report.repeats)} repeated {report.ngram_size}-grams, "
            f"{len(report.distances)} distances, gcd {report.gcd}"
        )
        tbl = Table(
            title="Key Length Candidates",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("Length", justify="right")
        tbl.add_column("Distances", justify="right")
        tbl.add_column("Share", justify="right")
        tbl.add_column("", ratio=1)
        for idx, score in enumerate(report.key_lengths[:limit]):
            tbl.add_row(
                f"[bold bright_green]{score.length}[/bold bright_green]" if idx == 0
                else str(score.length),
                str(score.count),
                f"{score.score:.1%}",
                Bar(size=1.0, begin=0, end=score.score, color="bright_red"),
            )
        self._rich.print(tbl)

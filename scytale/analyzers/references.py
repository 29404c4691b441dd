"""
Reference Language Tables
==========================

Expected letter (monogram) and common bigram percentages for the
languages Scytale scores against. Tables ship as JSON under
``scytale/data/languages`` and are handed out read-only.

A custom directory holding ``<language>.json`` files in the same format
can be passed to override or extend the bundled set.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

_BUNDLED_DIR = Path(__file__).resolve().parent.parent / "data" / "languages"


class ReferenceTable:
    """Read-only reference statistics for one language."""

    __slots__ = ("language", "monograms", "bigrams")

    def __init__(
        self,
        language: str,
        monograms: Mapping[str, float],
        bigrams: Mapping[str, float],
    ) -> None:
        self.language = language
        self.monograms: Mapping[str, float] = MappingProxyType(dict(monograms))
        self.bigrams: Mapping[str, float] = MappingProxyType(dict(bigrams))

    def ngrams(self, n: int) -> Mapping[str, float]:
        if n == 1:
            return self.monograms
        if n == 2:
            return self.bigrams
        raise ValueError(f"No reference table for n={n}; only 1 and 2 are shipped")

    def __repr__(self) -> str:
        return f"ReferenceTable({self.language!r})"


def _resolve_dir(reference_dir: Optional[str | Path]) -> Path:
    return Path(reference_dir) if reference_dir else _BUNDLED_DIR


@lru_cache(maxsize=32)
def _load(path: Path) -> ReferenceTable:
    with open(path, "r", encoding="utf-8") as fh:
        raw = json.load(fh)
    return ReferenceTable(
        language=raw.get("language", path.stem),
        monograms={k.upper(): float(v) for k, v in raw["monograms"].items()},
        bigrams={k.upper(): float(v) for k, v in raw.get("bigrams", {}).items()},
    )


def available_languages(reference_dir: Optional[str | Path] = None) -> list[str]:
    """Names of the reference languages found in *reference_dir*."""
    return sorted(p.stem for p in _resolve_dir(reference_dir).glob("*.json"))


def load_reference(
    language: str, reference_dir: Optional[str | Path] = None
) -> ReferenceTable:
    """Load the reference table for *language*.

    Raises:
        ValueError: If no table exists for *language*.
    """
    path = _resolve_dir(reference_dir) / f"{language.lower()}.json"
    if not path.is_file():
        raise ValueError(
            f"Unknown reference language {language!r}; available: "
            f"{', '.join(available_languages(reference_dir))}"
        )
    return _load(path)


def expected_frequencies(
    language: str = "english", reference_dir: Optional[str | Path] = None
) -> Mapping[str, float]:
    """Monogram percentages for *language*, read-only."""
    return load_reference(language, reference_dir).monograms

"""
Scytale Configuration Management
=================================

Centralized configuration for the Scytale classical-cipher toolkit using
Python dataclasses and TOML-based persistence.

Configuration is kept separate from code so that classroom deployments
can change defaults (filler letters, indicator letters, reference
language) without touching the cipher implementations.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Section Configs ================================


@dataclass(frozen=False, slots=True)
class CipherConfig:
    """Defaults applied when the engine builds cipher instances.

    Attributes:
        two_square_filler: Filler letter for the digraph ciphers (Two-Square,
            Four-Square, Playfair).
        quagmire_indicator: Indicator letter used when none is given.
        max_amsco_key_length: Longest permutation key accepted by Amsco.
        morse_word_separator: Separator placed between Morse-encoded words.
        rail_fence_rails: Rail count used when no key is given.
    """

    two_square_filler: str = "X"
    quagmire_indicator: str = "A"
    max_amsco_key_length: int = 9
    morse_word_separator: str = "   "
    rail_fence_rails: int = 3


@dataclass(frozen=False, slots=True)
class AnalysisConfig:
    """Configuration for the frequency analyzer and candidate scoring.

    Reference:
        Pearson, K. (1900). On the criterion that a given system of
        deviations from the probable ... Philosophical Magazine, 50(302).
    """

    default_language: str = "english"
    reference_dir: str = ""  # empty -> bundled reference tables
    ngram_size: int = 2
    top_candidates: int = 5
    chi_squared_significance: float = 0.05
    kasiski_ngram_size: int = 3
    max_key_length: int = 20


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, output location and version."""

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    output_dir: str = "output"
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class ScytaleConfig:
    """Master configuration aggregating all section settings.

    Usage:
        >>> config = ScytaleConfig.load()                  # from default path
        >>> config = ScytaleConfig.load("custom.toml")     # from custom path
        >>> print(config.analysis.default_language)
        'english'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    cipher: CipherConfig = field(default_factory=CipherConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> ScytaleConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root. Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`ScytaleConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            cipher=cls._build_section(CipherConfig, raw.get("cipher", {})),
            analysis=cls._build_section(AnalysisConfig, raw.get("analysis", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored so that newer config
        files keep loading on older releases.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> ScytaleConfig:
    """Cached wrapper around :meth:`ScytaleConfig.load`."""
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = ScytaleConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]

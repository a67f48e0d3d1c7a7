"""
Cryptex Configuration Management
=================================

Centralized configuration for the Cryptex toolkit using Python
dataclasses and TOML-based persistence.

Architecture follows the Twelve-Factor App methodology for configuration
management (Wiggins, 2011), separating config from code.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - PEP 681 -- Data Class Transforms (2022).
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


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class BreakerConfig:
    """Configuration for Breaker -- Classical Cipher Cryptanalysis Engine.

    Selects the language model and bounds the Kasiski-style period search
    and the brute-force key space.

    Reference:
        Kasiski, F. W. (1863). Die Geheimschriften und die
        Dechiffrirkunst. Berlin: E. S. Mittler und Sohn.
    """

    language: str = "english"
    repetition_min: int = 2
    repetition_max: int = 10
    max_brute_force_length: int = 6
    brute_force_top: int = 10
    output_format: str = "console"

    @property
    def repetition_lengths(self) -> range:
        """Inclusive range of repeated-substring lengths to examine."""
        return range(self.repetition_min, self.repetition_max + 1)


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared across all Cryptex modules.

    Controls logging verbosity, the log file and debug mode.
    """

    log_level: str = "INFO"
    log_file: str = ""  # empty disables file logging
    log_json: bool = False
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class CryptexConfig:
    """Master configuration aggregating tool-specific and global settings.

    Custom frequency tables live under ``[languages.<name>]`` and are kept
    as plain ``letter -> frequency`` mappings; the breaker turns them into
    language models on demand.

    Usage:
        >>> config = CryptexConfig.load()                  # from default path
        >>> config = CryptexConfig.load("custom.toml")     # from custom path
        >>> print(config.breaker.language)
        'english'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    breaker: BreakerConfig = field(default_factory=BreakerConfig)
    languages: dict[str, dict[str, float]] = field(default_factory=dict)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> CryptexConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys gracefully fall back to dataclass
        defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`CryptexConfig` instance.

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
            # Fall back to pure defaults when the default file is absent.
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            breaker=cls._build_section(BreakerConfig, raw.get("breaker", {})),
            languages=cls._build_languages(raw.get("languages", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)

    @staticmethod
    def _build_languages(data: dict[str, Any]) -> dict[str, dict[str, float]]:
        """Keep only table-shaped entries, coercing frequencies to float.

        Insertion order is preserved; it becomes the alphabet order.
        """
        tables: dict[str, dict[str, float]] = {}
        for name, table in data.items():
            if not isinstance(table, dict):
                continue
            tables[name.lower()] = {
                str(letter): float(freq) for letter, freq in table.items()
            }
        return tables


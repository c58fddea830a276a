"""
rdelf Configuration Management
===============================

Centralized configuration for the rdelf toolkit using Python dataclasses
and TOML-based persistence.

Configuration lives outside the code: every knob has a dataclass default,
and an optional ``config.toml`` overrides any subset of them.

References:
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, TypeVar

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Annotation strings (postponed evaluation) to the type a loaded value must have
_FIELD_TYPES: dict[str, type] = {"bool": bool, "int": int, "str": str}


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class ReadelfConfig:
    """Configuration for the ELF header reader.

    Controls the input size limit, the byte-order fallback policy, and
    which optional decoding/rendering steps are enabled.
    """

    max_file_size: int = 268_435_456  # 256 MiB
    # Reject data-encoding bytes other than 1/2 instead of assuming big-endian
    strict_data_encoding: bool = False
    resolve_section_names: bool = True
    table_output: bool = False


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared across all rdelf tools.

    Controls logging verbosity and the optional log file.
    """

    log_level: str = "WARNING"
    log_file: str = ""  # empty disables file logging
    log_json: bool = False
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class RdelfConfig:
    """Master configuration aggregating tool-specific and global settings.

    Usage:
        >>> config = RdelfConfig.load()                  # from default path
        >>> config = RdelfConfig.load("custom.toml")     # from custom path
        >>> print(config.readelf.resolve_section_names)
        True
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    readelf: ReadelfConfig = field(default_factory=ReadelfConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> RdelfConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`RdelfConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            tomllib.TOMLDecodeError: If the file is not valid TOML.
            ValueError: If a value is out of range (see :meth:`validate`).
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

        config = cls(
            global_settings=_section(GlobalConfig, "global", raw.get("global", {})),
            readelf=_section(ReadelfConfig, "readelf", raw.get("readelf", {})),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Reject values the tools cannot use.

        Every field must have its declared type (``true``/``false`` for
        flags, never a string), ``readelf.max_file_size`` must be positive
        and ``global.log_level`` must name a logging level.

        Raises:
            ValueError: On the first offending value.
        """
        for section_name, section in (
            ("global", self.global_settings),
            ("readelf", self.readelf),
        ):
            for f in fields(section):
                value = getattr(section, f.name)
                expected = _FIELD_TYPES[f.type]
                # bool is an int subclass; a flag is not a size
                if not isinstance(value, expected) or (
                    expected is int and isinstance(value, bool)
                ):
                    raise ValueError(
                        f"{section_name}.{f.name} must be of type "
                        f"{expected.__name__}, got {value!r}"
                    )

        if self.readelf.max_file_size <= 0:
            raise ValueError(
                "readelf.max_file_size must be positive, "
                f"got {self.readelf.max_file_size}"
            )
        if self.global_settings.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"global.log_level must be one of {sorted(_LOG_LEVELS)}, "
                f"got {self.global_settings.log_level!r}"
            )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)


_T = TypeVar("_T")


def _section(section_cls: type[_T], name: str, data: Any) -> _T:
    """Build dataclass *section_cls* from the keys of *data* it declares.

    Unknown keys are ignored so that newer config files load with older code.

    Raises:
        ValueError: If the ``[name]`` entry is not a TOML table.
    """
    if not isinstance(data, dict):
        raise ValueError(f"[{name}] must be a table, got {data!r}")
    known = {f.name for f in fields(section_cls)}  # type: ignore[arg-type]
    return section_cls(**{k: v for k, v in data.items() if k in known})

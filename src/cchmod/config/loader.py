"""Load and merge configuration from .cchmod.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

from cchmod.config.schema import (
    DIFF_FORMATS,
    OUTPUT_FORMATS,
    CChmodConfig,
    DiffConfig,
    OutputConfig,
)

CONFIG_FILENAME = ".cchmod.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(search_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = search_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: CChmodConfig) -> None:
    if cfg.output.format is not None and cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, got {cfg.output.format!r}"
        )
    if cfg.diff.format not in DIFF_FORMATS:
        raise ConfigError(
            f"diff.format must be one of {', '.join(DIFF_FORMATS)}, got {cfg.diff.format!r}"
        )
    if not isinstance(cfg.diff.show_unchanged, bool):
        raise ConfigError("diff.show_unchanged must be true or false")


def _merge_env_overrides(cfg: CChmodConfig) -> None:
    """Apply CCHMOD_* environment variable overrides."""
    if val := os.environ.get("CCHMOD_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("CCHMOD_DIFF_FORMAT"):
        if val in DIFF_FORMATS:
            cfg.diff.format = val  # type: ignore[assignment]


def load_config(
    search_dir: Path,
    config_override: Optional[str] = None,
) -> CChmodConfig:
    """Load, validate, and return a CChmodConfig."""
    config_path = find_config_file(search_dir, config_override)

    if config_path is None:
        cfg = CChmodConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = CChmodConfig(
            version=raw.get("version", "1.0"),
            output=_build_section(raw, OutputConfig, "output"),
            diff=_build_section(raw, DiffConfig, "diff"),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg

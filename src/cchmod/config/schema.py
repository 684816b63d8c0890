"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

OutputFormatName = Literal["num", "sym"]
DiffFormatName = Literal["terminal", "json"]

OUTPUT_FORMATS = ("num", "sym")
DIFF_FORMATS = ("terminal", "json")


@dataclass
class OutputConfig:
    format: Optional[OutputFormatName] = None  # None = --num or --sym is required


@dataclass
class DiffConfig:
    format: DiffFormatName = "terminal"
    show_unchanged: bool = True


@dataclass
class CChmodConfig:
    version: str = "1.0"
    output: OutputConfig = field(default_factory=OutputConfig)
    diff: DiffConfig = field(default_factory=DiffConfig)

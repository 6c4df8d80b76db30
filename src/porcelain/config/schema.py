"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

UntrackedMode = Literal["all", "normal", "no"]
OutputFormat = Literal["terminal", "json", "yaml"]

UNTRACKED_MODES: tuple[str, ...] = ("all", "normal", "no")
OUTPUT_FORMATS: tuple[str, ...] = ("terminal", "json", "yaml")


@dataclass
class StatusConfig:
    untracked: UntrackedMode = "all"  # passed to git as --untracked-files
    timeout: int = 30  # seconds before a stuck git is killed


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True
    show_full_paths: bool = False


@dataclass
class PorcelainConfig:
    version: str = "1.0"
    status: StatusConfig = field(default_factory=StatusConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

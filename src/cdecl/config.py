"""TOML config loading for cdecl.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from cdecl.lexer import MAX_TOKEN_LEN
from cdecl.pronouncer import STACK_CAPACITY

OUTPUT_FORMATS = ("short", "full")


@dataclass
class LimitsConfig:
    max_token_len: int = MAX_TOKEN_LEN
    stack_capacity: int = STACK_CAPACITY


@dataclass
class OutputConfig:
    format: str = "short"
    color: bool = True


@dataclass
class CdeclConfig:
    limits: LimitsConfig = field(default_factory=LimitsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _limit(path: Path, table: dict, key: str, default: int) -> int:
    value = table.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{path}: limits.{key} must be a positive integer")
    return value


def find_config(start_path: Path | None = None) -> Path:
    """Walk up directories to find cdecl.toml. Raises FileNotFoundError."""
    path = (start_path or Path.cwd()).resolve()
    if path.is_file():
        path = path.parent
    while True:
        candidate = path / "cdecl.toml"
        if candidate.exists():
            return candidate
        parent = path.parent
        if parent == path:
            raise FileNotFoundError("No cdecl.toml found in any parent directory")
        path = parent


def load_config(path: Path) -> CdeclConfig:
    """Parse a cdecl.toml file into a CdeclConfig."""
    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = CdeclConfig()

    if "limits" in data:
        lim = data["limits"]
        config.limits = LimitsConfig(
            max_token_len=_limit(path, lim, "max_token_len", MAX_TOKEN_LEN),
            stack_capacity=_limit(path, lim, "stack_capacity", STACK_CAPACITY),
        )

    if "output" in data:
        out = data["output"]
        fmt = out.get("format", "short")
        if fmt not in OUTPUT_FORMATS:
            raise ValueError(
                f"{path}: output.format must be one of {', '.join(OUTPUT_FORMATS)}"
            )
        config.output = OutputConfig(
            format=fmt,
            color=out.get("color", True),
        )

    return config


def resolve_config(explicit: Path | None = None) -> CdeclConfig:
    """Load ``explicit`` if given, else the nearest cdecl.toml, else defaults."""
    if explicit is not None:
        return load_config(explicit)
    try:
        return load_config(find_config())
    except FileNotFoundError:
        return CdeclConfig()

"""Configuration management for BuildGate."""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml  # type: ignore

from buildgate.errors import ConfigError

CONFIG_FILENAME = ".buildgate.yml"
DEFAULT_COMMAND = "cargo check"
REPORT_FORMATS = ("json", "markdown")

_DEFAULT_CONFIG = {
    "command": DEFAULT_COMMAND,
    "timeout": None,
    "reporting": {
        "format": [],
        "output_dir": None,
    },
}


@dataclass
class BuildGateConfig:
    """Full BuildGate configuration loaded from `.buildgate.yml`."""

    command: list[str] = field(default_factory=lambda: shlex.split(DEFAULT_COMMAND))
    timeout: float | None = None
    report_formats: list[str] = field(default_factory=list)
    output_dir: str | None = None

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> BuildGateConfig:
        """Load configuration from a YAML file, falling back to defaults.

        Search order:
        1. Explicit ``config_path`` argument
        2. ``.buildgate.yml`` in the current directory
        3. Built-in defaults

        Raises:
            ConfigError: If an explicit path is missing, or the file cannot be
                read, is not valid YAML, or holds invalid values.
        """
        raw: dict[str, Any] = dict(_DEFAULT_CONFIG)

        search_paths: list[Path] = []
        if config_path:
            if not Path(config_path).exists():
                raise ConfigError(f"config file not found: {config_path}")
            search_paths.append(Path(config_path))
        search_paths.append(Path(CONFIG_FILENAME))

        for path in search_paths:
            if path.exists():
                try:
                    with open(path, encoding="utf-8") as f:
                        loaded = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ConfigError(f"invalid YAML in {path}: {e}") from e
                except UnicodeDecodeError as e:
                    raise ConfigError(f"{path} is not valid UTF-8: {e}") from e
                except OSError as e:
                    raise ConfigError(f"cannot read {path}: {e.strerror or e}") from e
                if loaded and isinstance(loaded, dict):
                    raw = _deep_merge(raw, loaded)
                break

        return cls._from_raw(raw)

    @classmethod
    def _from_raw(cls, raw: dict[str, Any]) -> BuildGateConfig:
        """Build config from a raw dict (merged defaults + user overrides)."""
        cfg = cls()
        cfg.command = parse_command(raw.get("command", DEFAULT_COMMAND))
        cfg.timeout = parse_timeout(raw.get("timeout"))

        reporting = raw.get("reporting") or {}
        if not isinstance(reporting, dict):
            raise ConfigError("'reporting' must be a mapping")
        formats = reporting.get("format") or []
        if isinstance(formats, str):
            formats = [formats]
        elif not isinstance(formats, list):
            raise ConfigError("'reporting.format' must be a string or a list")
        unknown = [f for f in formats if f not in REPORT_FORMATS]
        if unknown:
            raise ConfigError(f"unknown report format(s): {', '.join(map(str, unknown))}")
        cfg.report_formats = list(formats)
        output_dir = reporting.get("output_dir")
        cfg.output_dir = str(output_dir) if output_dir else None

        return cfg


def parse_command(value: Any) -> list[str]:
    """Normalize a command given as a shell-style string or an argv list."""
    if isinstance(value, str):
        try:
            argv = shlex.split(value)
        except ValueError as e:
            raise ConfigError(f"cannot parse command {value!r}: {e}") from e
    elif isinstance(value, list) and all(isinstance(v, (str, int, float)) for v in value):
        argv = [str(v) for v in value]
    else:
        raise ConfigError("'command' must be a string or a list of strings")

    if not argv:
        raise ConfigError("'command' must not be empty")
    return argv


def parse_timeout(value: Any) -> float | None:
    """Validate a timeout in seconds; ``None`` means wait forever."""
    if value is None:
        return None
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError("'timeout' must be a number of seconds or null")
    if value <= 0:
        raise ConfigError("'timeout' must be greater than zero")
    return float(value)


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep-merge override dict into base dict."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result

"""BuildGate — run a build check before every commit."""

from buildgate.errors import (
    BuildGateError,
    CommandFailed,
    CommandNotFound,
    CommandTimeout,
    ConfigError,
)
from buildgate.runner import run_pre_commit

__version__ = "0.1.0"

__all__ = [
    "BuildGateError",
    "CommandFailed",
    "CommandNotFound",
    "CommandTimeout",
    "ConfigError",
    "run_pre_commit",
]

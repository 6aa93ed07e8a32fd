"""Exception types raised by BuildGate."""

from __future__ import annotations

import shlex

from buildgate.models import CommandResult


class BuildGateError(Exception):
    """Base class for all BuildGate errors."""


class ConfigError(BuildGateError):
    """Raised when `.buildgate.yml` cannot be parsed or holds invalid values."""


class CommandNotFound(BuildGateError):
    """The build-check executable is missing or cannot be executed."""

    def __init__(self, command: list[str], reason: str = "") -> None:
        self.command = command
        self.reason = reason
        msg = f"command not found: {command[0] if command else '<empty>'}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)

    @property
    def output(self) -> str:
        return self.reason


class CommandFailed(BuildGateError):
    """The build-check command ran and exited non-zero."""

    def __init__(self, result: CommandResult) -> None:
        self.result = result
        super().__init__(
            f"command failed with exit code {result.returncode}: {shlex.join(result.command)}"
        )

    @property
    def command(self) -> list[str]:
        return self.result.command

    @property
    def returncode(self) -> int:
        return self.result.returncode

    @property
    def output(self) -> str:
        return self.result.output


class CommandTimeout(CommandFailed):
    """The build-check command did not finish within the configured timeout."""

    def __init__(self, result: CommandResult, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(result)
        self.args = (f"command timed out after {timeout:g}s: {shlex.join(result.command)}",)

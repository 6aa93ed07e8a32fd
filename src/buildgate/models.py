"""Data models for BuildGate results and reports."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from enum import Enum


class HookStatus(str, Enum):
    """Outcome of a single hook run."""

    PASS = "PASS"
    FAIL = "FAIL"
    NOT_FOUND = "NOT_FOUND"
    TIMEOUT = "TIMEOUT"


@dataclass
class CommandResult:
    """Exit status and captured output of the build-check process."""

    command: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    duration: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Combined stdout and stderr, in that order, for diagnostics."""
        parts = [p.rstrip("\n") for p in (self.stdout, self.stderr) if p and p.strip()]
        return "\n".join(parts)


@dataclass
class HookReport:
    """A serializable summary of one hook run."""

    status: HookStatus
    command: list[str]
    timestamp: str
    message: str = ""
    returncode: int | None = None
    stdout: str = ""
    stderr: str = ""
    duration: float = 0.0

    @property
    def command_line(self) -> str:
        return shlex.join(self.command)

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "command": list(self.command),
            "returncode": self.returncode,
            "duration": round(self.duration, 3),
            "timestamp": self.timestamp,
            "message": self.message,
            "stdout": self.stdout,
            "stderr": self.stderr,
        }

"""Hook runner — runs the build-check command once and propagates its outcome."""

from __future__ import annotations

import subprocess
import time
from datetime import datetime, timezone
from typing import Any, Callable

from buildgate.config import BuildGateConfig
from buildgate.errors import CommandFailed, CommandNotFound, CommandTimeout
from buildgate.models import CommandResult, HookReport, HookStatus

Runner = Callable[..., Any]


def run_pre_commit(
    config: BuildGateConfig | None = None,
    runner: Runner | None = None,
) -> CommandResult:
    """Run the configured build-check command and wait for it to exit.

    The command inherits the caller's environment and working directory and
    is spawned exactly once. Its output is captured so it can be surfaced
    when the check fails.

    Args:
        config: Configuration to use. Defaults to ``BuildGateConfig.load()``.
        runner: Process-execution callable with the ``subprocess.run``
                signature. Defaults to ``subprocess.run``.

    Returns:
        The CommandResult of a command that exited with status 0.

    Raises:
        CommandNotFound: If the executable cannot be located or started.
        CommandTimeout: If the configured timeout expires.
        CommandFailed: If the command exits non-zero.
    """
    if config is None:
        config = BuildGateConfig.load()
    run = runner or subprocess.run
    command = list(config.command)

    started = time.monotonic()
    try:
        completed = run(
            command,
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
            timeout=config.timeout,
        )
    except subprocess.TimeoutExpired as e:
        result = CommandResult(
            command=command,
            returncode=-1,
            stdout=_decode(e.stdout),
            stderr=_decode(e.stderr),
            duration=time.monotonic() - started,
        )
        raise CommandTimeout(result, e.timeout) from e
    except OSError as e:
        # missing, not executable, or not a valid program (ENOEXEC)
        raise CommandNotFound(command, e.strerror or str(e)) from e

    result = CommandResult(
        command=command,
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
        duration=time.monotonic() - started,
    )
    if not result.succeeded:
        raise CommandFailed(result)
    return result


def _decode(data: str | bytes | None) -> str:
    """Partial output from a timed-out process may still be raw bytes."""
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


def make_report(outcome: CommandResult | CommandNotFound | CommandFailed) -> HookReport:
    """Summarize a run outcome (a result or a runner error) as a HookReport."""
    timestamp = datetime.now(timezone.utc).isoformat()

    if isinstance(outcome, CommandNotFound):
        return HookReport(
            status=HookStatus.NOT_FOUND,
            command=outcome.command,
            timestamp=timestamp,
            message=str(outcome),
        )

    if isinstance(outcome, CommandFailed):
        status = HookStatus.TIMEOUT if isinstance(outcome, CommandTimeout) else HookStatus.FAIL
        result = outcome.result
        message = str(outcome)
    else:
        status = HookStatus.PASS
        result = outcome
        message = "build check passed"

    return HookReport(
        status=status,
        command=result.command,
        timestamp=timestamp,
        message=message,
        returncode=None if status == HookStatus.TIMEOUT else result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
        duration=result.duration,
    )

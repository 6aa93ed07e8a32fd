"""BuildGate CLI entry point.

Usage:
    buildgate                      # same as `buildgate run`, for use as a git hook
    buildgate run [--config PATH] [--timeout SECONDS] [--format json|markdown] [-- COMMAND...]
    buildgate init [--path DIR] [--command CMD] [--force]
    buildgate install [--path DIR] [--force]
    python -m buildgate [options]
"""

from __future__ import annotations

import argparse
import shlex
import sys
from pathlib import Path

from buildgate import __version__
from buildgate.config import REPORT_FORMATS, BuildGateConfig, parse_command, parse_timeout
from buildgate.errors import CommandFailed, CommandNotFound, CommandTimeout, ConfigError
from buildgate.init_command import init_command
from buildgate.install_command import install_command
from buildgate.models import HookReport, HookStatus
from buildgate.reporters import REPORTERS
from buildgate.runner import make_report, run_pre_commit

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def exit_code_for(error: BaseException | None) -> int:
    """Map a runner outcome to the hook's process exit code.

    A failed command propagates its own exit code; anything without a usable
    positive code (missing executable, timeout, signal deaths) exits 1.
    """
    if error is None:
        return EXIT_SUCCESS
    if isinstance(error, CommandFailed) and not isinstance(error, CommandTimeout):
        if error.returncode > 0:
            return error.returncode
    return EXIT_FAILURE


def _apply_overrides(config: BuildGateConfig, args: argparse.Namespace) -> None:
    """Apply CLI flags on top of the loaded config."""
    command = list(getattr(args, "cmd", None) or [])
    if command and command[0] == "--":
        command = command[1:]
    if command:
        config.command = parse_command(command)
    if getattr(args, "timeout", None) is not None:
        config.timeout = parse_timeout(args.timeout)
    if getattr(args, "format", None):
        config.report_formats = list(args.format)
    if getattr(args, "output_dir", None):
        config.output_dir = args.output_dir


def _emit_reports(report: HookReport, config: BuildGateConfig) -> None:
    for fmt in config.report_formats:
        reporter_cls, _ = REPORTERS[fmt]
        print(reporter_cls().render(report))

    if config.output_dir:
        formats = config.report_formats or list(REPORT_FORMATS)
        for fmt in formats:
            reporter_cls, filename = REPORTERS[fmt]
            try:
                reporter_cls().write(report, Path(config.output_dir) / filename)
            except OSError as e:
                print(f"❌ Could not write {filename}: {e.strerror or e}", file=sys.stderr)
                return
        print(f"📁 Reports written to {config.output_dir}/", file=sys.stderr)


def run_command(args: argparse.Namespace) -> int:
    """Execute the build check as a pre-commit hook."""
    try:
        config = BuildGateConfig.load(getattr(args, "config", None))
        _apply_overrides(config, args)
    except ConfigError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    verbose = bool(getattr(args, "verbose", False))
    print(f"🔨 Running build check: {shlex.join(config.command)}", file=sys.stderr)

    error: CommandNotFound | CommandFailed | None = None
    try:
        result = run_pre_commit(config)
        report = make_report(result)
    except (CommandNotFound, CommandFailed) as e:
        error = e
        report = make_report(e)

    if isinstance(error, CommandFailed):
        if error.output:
            print(error.output, file=sys.stderr)
    elif error is None and verbose and result.output:
        print(result.output, file=sys.stderr)

    _emit_reports(report, config)

    if report.status == HookStatus.PASS:
        print(f"✅ Build check passed ({report.duration:.2f}s)", file=sys.stderr)
    elif report.status == HookStatus.NOT_FOUND:
        print(f"❓ {report.message}. Is it installed and on PATH?", file=sys.stderr)
    else:
        print(f"🚫 {report.message}", file=sys.stderr)
        print("Commit blocked. Fix the problems above and try again.", file=sys.stderr)

    return exit_code_for(error)


def _add_path_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--path",
        type=str,
        default=None,
        help="Target directory (default: current directory)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        default=False,
        help="Overwrite existing files",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="buildgate",
        description="BuildGate — run a build check before every commit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run subcommand
    run_parser = subparsers.add_parser("run", help="Run the build check (default)")
    run_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to .buildgate.yml config file",
    )
    run_parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Kill the build check after this many seconds",
    )
    run_parser.add_argument(
        "--format",
        type=str,
        nargs="+",
        choices=list(REPORT_FORMATS),
        default=None,
        help="Report format(s) printed to stdout",
    )
    run_parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory to write report files to",
    )
    run_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Echo the build check's output even when it passes",
    )
    run_parser.add_argument(
        "cmd",
        nargs="*",
        metavar="COMMAND",
        help="Override the configured command (put it after `--`)",
    )

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Bootstrap BuildGate config files for this project",
    )
    init_parser.add_argument(
        "--command",
        dest="check_command",
        type=str,
        default=None,
        help="Build-check command to write into .buildgate.yml",
    )
    _add_path_args(init_parser)

    # install subcommand
    install_parser = subparsers.add_parser(
        "install",
        help="Install BuildGate as the git pre-commit hook",
    )
    _add_path_args(install_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # git runs hooks without arguments
    if args.command is None:
        args = parser.parse_args(["run"])

    if args.command == "run":
        sys.exit(run_command(args))
    elif args.command == "init":
        sys.exit(init_command(args))
    elif args.command == "install":
        sys.exit(install_command(args))
    else:  # pragma: no cover
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":  # pragma: no cover
    main()

"""BuildGate init command — bootstrap project configuration files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from buildgate.config import CONFIG_FILENAME, DEFAULT_COMMAND

# ---------------------------------------------------------------------------
# Template builders
# ---------------------------------------------------------------------------


def _build_buildgate_yml(command: str) -> str:
    return f"""\
# .buildgate.yml — BuildGate Configuration
#
# Build-check command run before every commit. A string is split with
# shell-style quoting rules (no shell is involved); a list is used as-is.
command: {command}

# Seconds to wait before killing the check; null waits forever
timeout: null

# ---------------------------------------------------------------------------
# Reporting
# format: json | markdown  (printed to stdout)
# ---------------------------------------------------------------------------
reporting:
  format: []
  output_dir: null
"""


def _build_precommit_config() -> str:
    return """\
# .pre-commit-config.yaml — BuildGate pre-commit hook
# Install: pip install pre-commit && pre-commit install
repos:
  - repo: local
    hooks:
      - id: buildgate
        name: BuildGate Build Check
        entry: python -m buildgate run
        language: python
        always_run: true
        pass_filenames: false
"""


# ---------------------------------------------------------------------------
# Writer
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str, force: bool) -> bool:
    """Write a file unless it already exists. Returns True if written."""
    if path.exists() and not force:
        print(f"⏭️  {path.name} already exists, skipping (use --force to overwrite)", file=sys.stderr)
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    print(f"📝 Wrote {path}", file=sys.stderr)
    return True


def init_command(args: argparse.Namespace) -> int:
    """Bootstrap `.buildgate.yml` and `.pre-commit-config.yaml`."""
    root = Path(getattr(args, "path", None) or ".").resolve()
    if not root.is_dir():
        print(f"❌ Not a directory: {root}", file=sys.stderr)
        return 1

    command = getattr(args, "check_command", None) or DEFAULT_COMMAND
    force = bool(getattr(args, "force", False))

    _write_file(root / CONFIG_FILENAME, _build_buildgate_yml(command), force)
    _write_file(root / ".pre-commit-config.yaml", _build_precommit_config(), force)

    print("✅ BuildGate initialized. Run 'pre-commit install' or 'buildgate install'.", file=sys.stderr)
    return 0

"""BuildGate install command — write a git pre-commit hook script."""

from __future__ import annotations

import argparse
import stat
import sys
from pathlib import Path

HOOK_MARKER = "# buildgate-managed-hook"

_HOOK_SCRIPT = f"""\
#!/usr/bin/env python3
{HOOK_MARKER}
\"\"\"Git pre-commit hook installed by BuildGate.\"\"\"

import subprocess
import sys

sys.exit(subprocess.run([sys.executable, "-m", "buildgate", "run"]).returncode)
"""


def resolve_git_dir(repo_root: Path) -> Path | None:
    """Locate the git directory for ``repo_root``.

    Handles both a regular ``.git`` directory and a ``.git`` file pointing
    elsewhere (worktrees, submodules). Returns None outside a repository.
    """
    dotgit = repo_root / ".git"
    if dotgit.is_dir():
        return dotgit

    if dotgit.is_file():
        content = dotgit.read_text(encoding="utf-8").strip()
        if content.lower().startswith("gitdir:"):
            gitdir = Path(content.split(":", 1)[1].strip())
            return gitdir if gitdir.is_absolute() else (repo_root / gitdir).resolve()

    return None


def _make_executable(path: Path) -> None:
    mode = path.stat().st_mode
    path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def install_command(args: argparse.Namespace) -> int:
    """Install the BuildGate pre-commit hook into the repository's hooks dir."""
    root = Path(getattr(args, "path", None) or ".").resolve()
    force = bool(getattr(args, "force", False))

    git_dir = resolve_git_dir(root)
    if git_dir is None:
        print(f"❌ Not a git repository: {root}", file=sys.stderr)
        return 1

    dest = git_dir / "hooks" / "pre-commit"
    if dest.exists() and not force:
        existing = dest.read_text(encoding="utf-8", errors="replace")
        if HOOK_MARKER not in existing:
            print(
                f"❌ {dest} already exists and was not installed by BuildGate "
                "(use --force to overwrite)",
                file=sys.stderr,
            )
            return 1

    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(_HOOK_SCRIPT, encoding="utf-8")
    _make_executable(dest)
    print(f"🔗 Installed pre-commit hook: {dest}", file=sys.stderr)
    return 0

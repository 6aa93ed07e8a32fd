#!/usr/bin/env python3
"""Git pre-commit hook for BuildGate.

Install by copying or symlinking this file to `.git/hooks/pre-commit`
(or run `buildgate install`), or use with the pre-commit framework:

    # .pre-commit-config.yaml
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

from __future__ import annotations

import subprocess
import sys


def main() -> int:
    """Run the BuildGate build check; its exit code blocks or allows the commit."""
    cmd = [sys.executable, "-m", "buildgate", "run"]

    result = subprocess.run(cmd)
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())

"""Tests for the init and install commands."""

import argparse
import os
import stat

import yaml

from buildgate.config import BuildGateConfig
from buildgate.init_command import _build_buildgate_yml, _build_precommit_config, init_command
from buildgate.install_command import HOOK_MARKER, install_command, resolve_git_dir


def _ns(**kwargs):
    defaults = {"path": None, "force": False, "check_command": None}
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


class TestTemplates:
    def test_buildgate_yml_loads_back(self, tmp_path):
        cfg_file = tmp_path / ".buildgate.yml"
        cfg_file.write_text(_build_buildgate_yml("cargo check --all-targets"))
        config = BuildGateConfig.load(cfg_file)
        assert config.command == ["cargo", "check", "--all-targets"]
        assert config.timeout is None

    def test_precommit_config_has_buildgate_hook(self):
        data = yaml.safe_load(_build_precommit_config())
        hook = data["repos"][0]["hooks"][0]
        assert hook["id"] == "buildgate"
        assert hook["entry"] == "python -m buildgate run"
        assert hook["pass_filenames"] is False


class TestInitCommand:
    def test_writes_both_files(self, tmp_path):
        assert init_command(_ns(path=str(tmp_path))) == 0
        assert (tmp_path / ".buildgate.yml").exists()
        assert (tmp_path / ".pre-commit-config.yaml").exists()

    def test_custom_command(self, tmp_path):
        init_command(_ns(path=str(tmp_path), check_command="npm run build"))
        assert "command: npm run build" in (tmp_path / ".buildgate.yml").read_text()

    def test_skips_existing_without_force(self, tmp_path, capsys):
        existing = tmp_path / ".buildgate.yml"
        existing.write_text("command: make\n")
        init_command(_ns(path=str(tmp_path)))
        assert existing.read_text() == "command: make\n"
        assert "skipping" in capsys.readouterr().err

    def test_force_overwrites(self, tmp_path):
        existing = tmp_path / ".buildgate.yml"
        existing.write_text("command: make\n")
        init_command(_ns(path=str(tmp_path), force=True))
        assert "cargo check" in existing.read_text()

    def test_missing_directory_fails(self, tmp_path):
        assert init_command(_ns(path=str(tmp_path / "nope"))) == 1


class TestResolveGitDir:
    def test_git_directory(self, tmp_path):
        (tmp_path / ".git").mkdir()
        assert resolve_git_dir(tmp_path) == tmp_path / ".git"

    def test_gitdir_file(self, tmp_path):
        real = tmp_path / "real-git"
        real.mkdir()
        work = tmp_path / "work"
        work.mkdir()
        (work / ".git").write_text("gitdir: ../real-git\n")
        assert resolve_git_dir(work) == real.resolve()

    def test_not_a_repo(self, tmp_path):
        assert resolve_git_dir(tmp_path) is None


class TestInstallCommand:
    def test_installs_executable_hook(self, tmp_path):
        (tmp_path / ".git").mkdir()
        assert install_command(_ns(path=str(tmp_path))) == 0
        hook = tmp_path / ".git" / "hooks" / "pre-commit"
        content = hook.read_text()
        assert HOOK_MARKER in content
        assert '"-m", "buildgate", "run"' in content
        assert hook.stat().st_mode & stat.S_IXUSR
        assert os.access(hook, os.X_OK)

    def test_reinstall_over_own_hook(self, tmp_path):
        (tmp_path / ".git").mkdir()
        install_command(_ns(path=str(tmp_path)))
        assert install_command(_ns(path=str(tmp_path))) == 0

    def test_refuses_foreign_hook(self, tmp_path, capsys):
        hooks = tmp_path / ".git" / "hooks"
        hooks.mkdir(parents=True)
        (hooks / "pre-commit").write_text("#!/bin/sh\nmake lint\n")
        assert install_command(_ns(path=str(tmp_path))) == 1
        assert (hooks / "pre-commit").read_text() == "#!/bin/sh\nmake lint\n"
        assert "--force" in capsys.readouterr().err

    def test_force_replaces_foreign_hook(self, tmp_path):
        hooks = tmp_path / ".git" / "hooks"
        hooks.mkdir(parents=True)
        (hooks / "pre-commit").write_text("#!/bin/sh\nmake lint\n")
        assert install_command(_ns(path=str(tmp_path), force=True)) == 0
        assert HOOK_MARKER in (hooks / "pre-commit").read_text()

    def test_outside_repo_fails(self, tmp_path):
        assert install_command(_ns(path=str(tmp_path))) == 1

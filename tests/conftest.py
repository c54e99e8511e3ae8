"""Shared fixtures for the gostrap test suite."""

from __future__ import annotations

import os
from pathlib import Path
import sys

import pytest

_FAKE_GO = """\
#!/bin/sh
echo "go $*" >> "$GOSTRAP_TOOL_LOG"
if [ "$1" = "mod" ] && [ "$2" = "init" ]; then
    printf 'module %s\\n\\ngo 1.22\\n' "$3" > go.mod
fi
"""

_FAKE_GIT = """\
#!/bin/sh
echo "git $*" >> "$GOSTRAP_TOOL_LOG"
if [ "$1" = "init" ]; then
    mkdir .git
fi
"""

_FAILING_TOOL = """\
#!/bin/sh
echo "$0 $*" >> "$GOSTRAP_TOOL_LOG"
exit 1
"""


class ToolBox:
    """Fake ``go`` and ``git`` executables placed first on ``PATH``."""

    def __init__(self, bin_dir: Path, log: Path) -> None:
        self.bin_dir = bin_dir
        self.log = log

    def install(self, name: str, script: str) -> None:
        path = self.bin_dir / name
        path.write_text(script)
        path.chmod(0o755)

    def fail(self, name: str) -> None:
        """Replace ``name`` with a tool that always exits with status 1."""
        self.install(name, _FAILING_TOOL)

    def remove(self, name: str) -> None:
        """Drop the fake so the real tool on ``PATH`` is used."""
        (self.bin_dir / name).unlink()

    def calls(self) -> list[str]:
        if not self.log.exists():
            return []
        return self.log.read_text().splitlines()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty current directory for the project to be created in."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def tools(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> ToolBox:
    if sys.platform == "win32":
        pytest.skip("fake tools are POSIX shell scripts")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    log = tmp_path / "tools.log"
    box = ToolBox(bin_dir, log)
    box.install("go", _FAKE_GO)
    box.install("git", _FAKE_GIT)
    monkeypatch.setenv("GOSTRAP_TOOL_LOG", str(log))
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return box


@pytest.fixture
def git_identity(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Make real ``git commit`` work regardless of the user's configuration."""
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for var in ("GIT_AUTHOR_NAME", "GIT_COMMITTER_NAME"):
        monkeypatch.setenv(var, "gostrap tests")
    for var in ("GIT_AUTHOR_EMAIL", "GIT_COMMITTER_EMAIL"):
        monkeypatch.setenv(var, "tests@example.com")

"""Enums and records shared by the CLI modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath


class IgnoreSource(str, Enum):
    """Where the generated .gitignore comes from."""

    REMOTE = "remote"
    BUNDLED = "bundled"

    @property
    def label(self) -> str:
        labels: dict[IgnoreSource, str] = {
            IgnoreSource.REMOTE: "downloaded from github/gitignore",
            IgnoreSource.BUNDLED: "rendered from the bundled template",
        }
        return labels[self]


@dataclass(frozen=True, kw_only=True)
class ProjectContext:
    """
    Identity of the project being scaffolded.

    Attributes:
        module_name: The raw command line argument, used as the Go module path.
        project_name: Final path segment of ``module_name``.
        directory: Directory the project is created in.
    """

    module_name: str
    project_name: str
    directory: Path

    @classmethod
    def from_module_name(cls, module_name: str, base_dir: Path | None = None) -> ProjectContext:
        if not module_name.strip():
            raise ValueError("module name must not be empty.")
        project_name = PurePosixPath(module_name.rstrip("/")).name or module_name
        directory = (base_dir or Path.cwd()) / module_name
        return cls(module_name=module_name, project_name=project_name, directory=directory)


@dataclass(frozen=True, kw_only=True)
class ScaffoldOptions:
    """
    Configuration for a single run.

    Attributes:
        greeting: Text printed by the generated ``main.go``.
        ignore_source: Strategy used to provision ``.gitignore``.
        taskfile: Whether to render a ``Taskfile.yml``.
        commit: Whether to stage everything and record an initial commit.
        verbose: Whether debug logging is enabled.
    """

    greeting: str = "Hello, World!"
    ignore_source: IgnoreSource = IgnoreSource.REMOTE
    taskfile: bool = False
    commit: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        if not self.greeting:
            raise ValueError("greeting must not be empty.")

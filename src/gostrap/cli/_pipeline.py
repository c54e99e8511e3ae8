"""The ordered scaffolding steps and the loop that runs them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import json
import logging

from gostrap.cli._errors import ScaffoldError
from gostrap.cli._gitignore import provision_gitignore
from gostrap.cli._renderer import write_template
from gostrap.cli._runner import run_command
from gostrap.cli._types import ProjectContext, ScaffoldOptions

logger = logging.getLogger(__name__)

INITIAL_COMMIT_MESSAGE = "Initial commit"


@dataclass(frozen=True)
class Step:
    """
    One pipeline step.

    Attributes:
        done: Status line printed once the step succeeded.
        failure: Prefix of the error reported when the step fails.
        action: Callable doing the work.
    """

    done: str
    failure: str
    action: Callable[[ProjectContext, ScaffoldOptions], object]


def _create_directory(ctx: ProjectContext, options: ScaffoldOptions) -> None:
    ctx.directory.mkdir(parents=True)


def _init_module(ctx: ProjectContext, options: ScaffoldOptions) -> None:
    run_command("go", "mod", "init", ctx.module_name, cwd=ctx.directory)


def _init_repository(ctx: ProjectContext, options: ScaffoldOptions) -> None:
    run_command("git", "init", cwd=ctx.directory)


def _write_readme(ctx: ProjectContext, options: ScaffoldOptions) -> None:
    write_template(
        "readme.md.tmpl",
        ctx.directory / "README.md",
        {"PROJECT_NAME": ctx.project_name, "MODULE_NAME": ctx.module_name},
    )


def _write_main(ctx: ProjectContext, options: ScaffoldOptions) -> None:
    # JSON string escapes are valid Go interpreted string literal escapes.
    message = json.dumps(options.greeting, ensure_ascii=False)
    write_template("main.go.tmpl", ctx.directory / "main.go", {"MESSAGE": message})


def _write_gitignore(ctx: ProjectContext, options: ScaffoldOptions) -> None:
    provision_gitignore(ctx.directory, options.ignore_source)


def _write_taskfile(ctx: ProjectContext, options: ScaffoldOptions) -> None:
    write_template(
        "taskfile.yml.tmpl",
        ctx.directory / "Taskfile.yml",
        {"PROJECT_NAME": ctx.project_name, "MODULE_NAME": ctx.module_name},
    )


def _commit(ctx: ProjectContext, options: ScaffoldOptions) -> None:
    run_command("git", "add", ".", cwd=ctx.directory)
    run_command("git", "commit", "-m", INITIAL_COMMIT_MESSAGE, cwd=ctx.directory)


def build_steps(options: ScaffoldOptions) -> list[Step]:
    """Return the steps enabled by ``options``, in execution order."""
    steps = [
        Step("Project directory created", "Error creating project directory", _create_directory),
        Step("Go module initialized", "Error initializing Go module", _init_module),
        Step(
            "Git repository initialized", "Error initializing Git repository", _init_repository
        ),
        Step("README.md created", "Error creating README.md", _write_readme),
        Step("Hello World main.go created", "Error creating main.go", _write_main),
        Step(
            f".gitignore {options.ignore_source.label}",
            "Error provisioning .gitignore",
            _write_gitignore,
        ),
    ]
    if options.taskfile:
        steps.append(Step("Taskfile.yml created", "Error creating Taskfile.yml", _write_taskfile))
    if options.commit:
        steps.append(Step("Initial commit created", "Error creating initial commit", _commit))
    return steps


def run_pipeline(
    ctx: ProjectContext,
    options: ScaffoldOptions,
    on_done: Callable[[Step], None] | None = None,
) -> None:
    """Run every enabled step in order, stopping at the first failure.

    Nothing created by earlier steps is removed when a later one fails.

    Raises:
        ScaffoldError: Message is ``"<step failure prefix>: <cause>"``.
    """
    for step in build_steps(options):
        logger.debug("running step %s", step.action.__name__)
        try:
            step.action(ctx, options)
        except (ScaffoldError, OSError, UnicodeError) as exc:
            raise ScaffoldError(f"{step.failure}: {exc}") from exc
        if on_done is not None:
            on_done(step)

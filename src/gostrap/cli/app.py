"""Typer CLI application for gostrap."""

from __future__ import annotations

import logging
from typing import Annotated

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer import Argument, Exit, Option, Typer
from typer.core import TyperCommand

import gostrap
from gostrap.cli._errors import ScaffoldError
from gostrap.cli._pipeline import INITIAL_COMMIT_MESSAGE, Step, run_pipeline
from gostrap.cli._types import IgnoreSource, ProjectContext, ScaffoldOptions

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()

_USAGE = "Usage: gostrap MODULE_NAME [OPTIONS]"


class _ScaffoldCommand(TyperCommand):
    """Reports every usage error with exit status 1 instead of Click's 2."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.show()
            ctx.exit(1)


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("gostrap")
    if not verbose:
        logger.setLevel(logging.WARNING)
        return
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=_console, show_path=False))
    logger.setLevel(logging.DEBUG)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"gostrap {gostrap.__version__}")
        raise Exit()


def _print_done(step: Step) -> None:
    _console.print(f"[bold green]◇[/]  {step.done}")


def _print_next_steps(options: ScaffoldOptions) -> None:
    _console.print("[dim]│[/]")
    _console.print("[bold cyan]●[/]  Go project setup completed successfully!")
    _console.print("Next steps:")
    _console.print("  go run main.go    # Run the hello world program")
    if options.taskfile:
        _console.print("  task --list       # Show the available tasks")
    if not options.commit:
        _console.print("  git add .")
        _console.print(f'  git commit -m "{INITIAL_COMMIT_MESSAGE}"')
    _console.print()


@app.command(cls=_ScaffoldCommand)
def create(
    module_name: Annotated[
        str | None,
        Argument(help="Go module path; its last segment names the project", show_default=False),
    ] = None,
    greeting: Annotated[
        str,
        Option("--greeting", "-g", envvar="GOSTRAP_GREETING", help="Text printed by main.go"),
    ] = "Hello, World!",
    ignore_source: Annotated[
        IgnoreSource,
        Option(
            "--gitignore",
            envvar="GOSTRAP_GITIGNORE",
            help="Download .gitignore from github/gitignore or render the bundled copy",
        ),
    ] = IgnoreSource.REMOTE,
    taskfile: Annotated[
        bool,
        Option("--taskfile/--no-taskfile", envvar="GOSTRAP_TASKFILE", help="Write a Taskfile.yml"),
    ] = False,
    commit: Annotated[
        bool,
        Option(
            "--commit/--no-commit",
            envvar="GOSTRAP_COMMIT",
            help="Stage everything and record an initial commit",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        Option("--verbose", "-v", envvar="GOSTRAP_VERBOSE", help="Log debug details"),
    ] = False,
    version: Annotated[
        bool,
        Option(
            "--version",
            "-V",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Scaffold a new Go module in a directory named after MODULE_NAME."""
    if module_name is None:
        _console.print(_USAGE)
        raise Exit(code=1)

    try:
        options = ScaffoldOptions(
            greeting=greeting,
            ignore_source=ignore_source,
            taskfile=taskfile,
            commit=commit,
            verbose=verbose,
        )
        ctx = ProjectContext.from_module_name(module_name)
    except ValueError as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=1) from None

    _configure_logging(options.verbose)

    _console.print()
    _console.print(
        f"[bold cyan]●[/]  Setting up Go project: {escape(module_name)}", soft_wrap=True
    )
    _console.print("[dim]│[/]")

    try:
        run_pipeline(ctx, options, on_done=_print_done)
    except ScaffoldError as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}", soft_wrap=True, highlight=False)
        raise Exit(code=1) from None

    _print_next_steps(options)

"""Runs external tools with their output streamed to the terminal."""

from __future__ import annotations

import logging
from pathlib import Path
import subprocess

from gostrap.cli._errors import CommandError

logger = logging.getLogger(__name__)


def run_command(*args: str, cwd: Path) -> None:
    """Run ``args`` in ``cwd``. The child inherits stdout and stderr; there is no timeout."""
    logger.debug("running %s in %s", " ".join(args), cwd)
    try:
        completed = subprocess.run(args, cwd=cwd, check=False)
    except OSError as exc:
        raise CommandError(args, f"cannot run '{args[0]}': {exc}") from exc

    if completed.returncode != 0:
        raise CommandError(
            args, f"'{' '.join(args)}' exited with status {completed.returncode}"
        )
    logger.debug("%s finished", args[0])

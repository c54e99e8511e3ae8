"""Exceptions raised while scaffolding a project."""

from __future__ import annotations


class ScaffoldError(Exception):
    """A pipeline step failed. The message names the step and its cause."""


class CommandError(ScaffoldError):
    """An external command could not be started or exited with a nonzero status."""

    def __init__(self, args: tuple[str, ...], message: str) -> None:
        super().__init__(message)
        self.command = args


class TemplateError(ScaffoldError):
    """A bundled template could not be rendered or written."""


class ProvisionError(ScaffoldError):
    """The ignore file could not be fetched or written."""

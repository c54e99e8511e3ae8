"""Command line interface for gostrap."""

from gostrap.cli.app import app

__all__ = ["app"]

"""Renders bundled templates to files on disk."""

from __future__ import annotations

from collections.abc import Mapping
import importlib.resources as ilr
import logging
from pathlib import Path
import re

from gostrap.cli._errors import TemplateError

logger = logging.getLogger(__name__)

_TEMPLATE_PACKAGE = "gostrap.cli"
_TEMPLATE_DIR = "scaffold"

# __PROJECT_NAME__, __MESSAGE__, ...
_PLACEHOLDER = re.compile(r"__([A-Z][A-Z0-9]*(?:_[A-Z0-9]+)*)__")


def _read(name: str) -> str:
    try:
        resource = ilr.files(_TEMPLATE_PACKAGE).joinpath(_TEMPLATE_DIR).joinpath(name)
        return resource.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateError(f"failed to read template {name}: {exc}") from exc


def render_template(name: str, values: Mapping[str, str] | None = None) -> str:
    """Substitute every ``__KEY__`` placeholder in the bundled template ``name``.

    Raises:
        TemplateError: The template is missing or references a key not in ``values``.
    """
    values = values or {}
    content = _read(name)

    def substitute(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in values:
            raise TemplateError(f"failed to parse template {name}: unknown placeholder __{key}__")
        return values[key]

    return _PLACEHOLDER.sub(substitute, content)


def write_template(name: str, target: Path, values: Mapping[str, str] | None = None) -> Path:
    """Render ``name`` and write it to the new file ``target``. Returns ``target``."""
    rendered = render_template(name, values)
    logger.debug("writing %s from template %s", target, name)
    try:
        with target.open("w", encoding="utf-8") as fh:
            fh.write(rendered)
    except (OSError, UnicodeError) as exc:
        raise TemplateError(f"failed to write {target.name}: {exc}") from exc
    return target

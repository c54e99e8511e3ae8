"""Provisions the .gitignore of a new project."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from gostrap.cli._errors import ProvisionError
from gostrap.cli._renderer import write_template
from gostrap.cli._types import IgnoreSource

logger = logging.getLogger(__name__)

GITIGNORE_URL = "https://raw.githubusercontent.com/github/gitignore/main/Go.gitignore"
GITIGNORE_TEMPLATE = "gitignore.tmpl"

_CHUNK_SIZE = 8192


def download_gitignore(target: Path, url: str = GITIGNORE_URL) -> Path:
    """Stream ``url`` verbatim into ``target``.

    The file is only created once the server has answered with a 2xx status.
    """
    logger.debug("GET %s", url)
    try:
        with requests.get(url, stream=True) as response:
            logger.debug("%s answered %s", url, response.status_code)
            if not 200 <= response.status_code < 300:
                raise ProvisionError(f"failed to download .gitignore: HTTP {response.status_code}")
            try:
                with target.open("wb") as fh:
                    for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                        fh.write(chunk)
            except OSError as exc:
                raise ProvisionError(f"failed to write {target.name}: {exc}") from exc
    except requests.RequestException as exc:
        raise ProvisionError(f"failed to download .gitignore: {exc}") from exc
    return target


def provision_gitignore(directory: Path, source: IgnoreSource) -> Path:
    """Create ``directory/.gitignore`` using exactly one ``source`` strategy."""
    target = directory / ".gitignore"
    if source == IgnoreSource.REMOTE:
        return download_gitignore(target)
    return write_template(GITIGNORE_TEMPLATE, target)

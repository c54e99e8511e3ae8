"""gostrap: scaffolding tool for new Go modules."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gostrap")
except PackageNotFoundError:
    __version__ = "0.0.0"

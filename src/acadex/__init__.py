"""Acadex: a catalog of academic works with search, statistics, and reports."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("acadex")
except PackageNotFoundError:  # source checkout without installed metadata
    __version__ = "0.0.0"

__all__ = ["__version__"]

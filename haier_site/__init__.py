"""Haier personal website."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("haier-site")
except PackageNotFoundError:
    __version__ = "dev"

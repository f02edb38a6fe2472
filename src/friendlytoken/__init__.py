"""Generation and validation of prefixed friendly tokens."""

from importlib.metadata import PackageNotFoundError, version

__all__ = ["__version__"]

__version__: str
"""The version string of friendlytoken (PEP 440 / SemVer compatible)."""

try:
    __version__ = version("friendlytoken")
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0"

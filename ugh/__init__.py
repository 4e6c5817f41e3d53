"""ugh: draft tickets and branches from uncommitted work."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("ugh")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"

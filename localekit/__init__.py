"""localekit - XML-driven runtime localization for pygame kiosks."""

from localekit.__version__ import __version__

__all__ = ["__version__"]

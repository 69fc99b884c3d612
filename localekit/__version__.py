"""Version information for localekit."""

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history
# 0.1.0 - XML translation store, bound labels, pygame demo kiosk

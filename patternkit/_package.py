"""Package metadata and naming constants."""

from patternkit._version import __version__

PACKAGE_NAME = "patternkit"
VERSION = __version__
DESCRIPTION = "Reference implementations of creational and behavioral design patterns"

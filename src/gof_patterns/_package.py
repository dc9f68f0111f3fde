"""Package metadata and naming constants."""

PACKAGE_NAME = "gof-patterns"
__version__ = "1.0.0"

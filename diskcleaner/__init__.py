"""Interactive directory size analyzer and cleanup tool."""

__version__ = "0.1.0"

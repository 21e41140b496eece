"""File reading, padding, writing and secure deletion, and getopt-style option scanning."""

__version__ = "0.1.0"
__all__ = ["rwfile", "cmdline"]
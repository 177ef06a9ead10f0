"""strext: string extension utilities with a small CLI."""

__version__ = "0.1.0"

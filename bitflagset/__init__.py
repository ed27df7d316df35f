"""Typed sets of named bit flags with set operations, iteration and a text format."""

__version__ = "0.1.0"
__all__ = ["base", "flags", "parser"]
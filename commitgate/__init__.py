"""Commit message and pull request merge policy checks."""

__version__ = "0.3.0"

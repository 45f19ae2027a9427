"""Embedded semantic vector search, in memory or persisted to a directory."""

__version__ = "0.1.0"
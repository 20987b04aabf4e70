"""Bookmarker: a terminal bookmark manager backed by a local JSON file."""

__version__ = "0.1.0"

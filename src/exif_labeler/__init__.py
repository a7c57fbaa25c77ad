"""Stamp camera settings captions onto photos."""

__version__ = "0.1.0"

"""Command-line interface for depthflow."""

from .main import main

__all__ = ["main"]

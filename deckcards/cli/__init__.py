"""Console front-end for the deck."""

from .main import app, main

__all__ = ["app", "main"]

"""Storyboard Studio: editor core for short-video storyboards."""

__version__ = "0.1.0"

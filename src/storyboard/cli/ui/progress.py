"""Spinner wrapper for the Storyboard CLI."""

from collections.abc import Generator
from contextlib import contextmanager

from .console import BRAND_COLOR, console


@contextmanager
def spinner(message: str) -> Generator[None, None, None]:
    """Display a spinner with a message while a block executes.

    Usage::

        with spinner("Generating AI-assisted rewrite..."):
            asyncio.run(session.run_assist(assistant))
    """
    with console.status(f"[{BRAND_COLOR}]{message}[/{BRAND_COLOR}]"):
        yield

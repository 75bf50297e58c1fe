"""CLI UI components for Storyboard Studio."""

from .console import (
    console,
    print_asset_table,
    print_error,
    print_header,
    print_info,
    print_key_value_table,
    print_muted,
    print_readiness,
    print_scene_table,
    print_success,
    print_warning,
)
from .progress import spinner
from .prompts import confirm_export
from .setup import run_setup_check

__all__ = [
    "confirm_export",
    "console",
    "print_asset_table",
    "print_error",
    "print_header",
    "print_info",
    "print_key_value_table",
    "print_muted",
    "print_readiness",
    "print_scene_table",
    "print_success",
    "print_warning",
    "run_setup_check",
    "spinner",
]

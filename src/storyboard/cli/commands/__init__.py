"""CLI commands for Storyboard Studio."""

from .assist import assist
from .config_cmd import config
from .export_cmd import export_storyboard
from .status import status

__all__ = [
    "assist",
    "config",
    "export_storyboard",
    "status",
]

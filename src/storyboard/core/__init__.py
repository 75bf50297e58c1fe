"""Core editor components for Storyboard Studio."""

from .attachments import AttachmentIndex
from .catalog import AssetCatalog
from .exporter import ExportConfigurator
from .ids import CounterIdAllocator, IdAllocator, UuidIdAllocator, create_id_allocator
from .readiness import ReadinessReport, evaluate_readiness, readiness_score
from .timeline import MoveDirection, SceneTimeline

__all__ = [
    # Ids
    "CounterIdAllocator",
    "IdAllocator",
    "UuidIdAllocator",
    "create_id_allocator",
    # Components
    "AssetCatalog",
    "AttachmentIndex",
    "ExportConfigurator",
    "MoveDirection",
    "SceneTimeline",
    # Readiness
    "ReadinessReport",
    "evaluate_readiness",
    "readiness_score",
]

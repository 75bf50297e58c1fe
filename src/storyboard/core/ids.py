"""Id allocation for scenes, assets and export requests.

Allocators are injected into the editor so tests can use a deterministic
counter while the CLI uses random UUIDs.
"""

import itertools
import uuid
from collections import defaultdict
from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class IdAllocator(Protocol):
    """Produces a fresh, never-repeated id for a given prefix."""

    def allocate(self, prefix: str) -> str:
        """Return a new id such as ``scene-3`` or ``asset-1f0c...``."""
        ...


class CounterIdAllocator:
    """Monotonic per-prefix counter: ``scene-1``, ``scene-2``, ``asset-1``..."""

    def __init__(self, start: int = 1) -> None:
        self._counters: defaultdict[str, Iterator[int]] = defaultdict(
            lambda: itertools.count(start)
        )

    def allocate(self, prefix: str) -> str:
        return f"{prefix}-{next(self._counters[prefix])}"


class UuidIdAllocator:
    """Random ids with a short hex suffix, e.g. ``scene-3f9a1c2e``."""

    def __init__(self, length: int = 8) -> None:
        self.length = length

    def allocate(self, prefix: str) -> str:
        return f"{prefix}-{uuid.uuid4().hex[: self.length]}"


def create_id_allocator(strategy: str) -> IdAllocator:
    """Build the allocator named by ``EditorSettings.id_strategy``.

    Raises:
        ValueError: If the strategy name is unrecognised.
    """
    if strategy == "counter":
        return CounterIdAllocator()
    if strategy == "uuid":
        return UuidIdAllocator()
    raise ValueError(
        f"Unknown id strategy: {strategy!r}. Supported strategies: uuid, counter"
    )

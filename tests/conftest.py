"""Pytest configuration and fixtures for Storyboard Studio tests."""

from pathlib import Path

import pytest

from storyboard.core.ids import CounterIdAllocator
from storyboard.models import DEFAULT_SCRIPT, LIBRARY_ASSETS, STARTER_SCENES
from storyboard.state import EditorSession
from tests.fakes import FakeMicrophone, RecordingRenderer


@pytest.fixture
def ids() -> CounterIdAllocator:
    return CounterIdAllocator()


@pytest.fixture
def microphone() -> FakeMicrophone:
    return FakeMicrophone()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def session(ids: CounterIdAllocator, microphone: FakeMicrophone) -> EditorSession:
    """A seeded session with deterministic ids: scene-1..3, library-1..3."""
    return EditorSession(
        ids=ids,
        microphone=microphone,
        script=DEFAULT_SCRIPT,
        starters=STARTER_SCENES,
        library=LIBRARY_ASSETS,
    )


@pytest.fixture
def temp_build_dir(tmp_path: Path) -> Path:
    """Return a temporary build directory for testing."""
    build_dir = tmp_path / "build"
    build_dir.mkdir()
    return build_dir

"""File-based handoff of export requests to an external render service."""

import logging
from pathlib import Path

from storyboard.models.export import ExportRequest

logger = logging.getLogger(__name__)


class FileRenderQueue:
    """Drops each export request as a JSON file into a queue directory.

    Implements RendererProtocol. The render service watches the directory;
    the editor never learns about progress or completion.
    """

    def __init__(self, queue_dir: Path | str) -> None:
        self.queue_dir = Path(queue_dir)

    def path_for(self, request: ExportRequest) -> Path:
        return self.queue_dir / f"{request.id}.json"

    def submit(self, request: ExportRequest) -> None:
        self.queue_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(request)
        path.write_text(request.model_dump_json(indent=2), encoding="utf-8")
        logger.info("Queued export %s at %s", request.id, path)

    def pending(self) -> list[Path]:
        """Queued request files, oldest first."""
        if not self.queue_dir.exists():
            return []
        return sorted(self.queue_dir.glob("*.json"), key=lambda p: p.stat().st_mtime)

    def load(self, path: Path | str) -> ExportRequest:
        """Read a queued request back.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        return ExportRequest.model_validate_json(Path(path).read_text(encoding="utf-8"))

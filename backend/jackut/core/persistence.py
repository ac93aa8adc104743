# jackut/core/persistence.py
"""
Snapshot persistence.
Reads and writes the whole user + community registry as one JSON document.
There is no locking or atomic rename: the file is written once per shutdown
by a single process, last write wins.
"""
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from jackut.core.errors import SnapshotCorrupted
from jackut.models.snapshot import Snapshot

logger = logging.getLogger("uvicorn.error")


class SnapshotStore:
    """
    File-backed store for a single Snapshot.

    Args:
        path: Location of the snapshot file; parent directories are created on save
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Optional[Snapshot]:
        """
        Read the snapshot file.

        Returns:
            The stored Snapshot, or None when no file exists yet

        Raises:
            SnapshotCorrupted: If the file exists but cannot be decoded
        """
        if not self.exists():
            logger.info("[snapshot] no snapshot at %s, starting empty", self.path)
            return None
        try:
            raw = self.path.read_text(encoding="utf-8")
            snapshot = Snapshot.model_validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            logger.exception("[snapshot] failed to read %s", self.path)
            raise SnapshotCorrupted(f"Snapshot file could not be read: {self.path}") from exc
        logger.info("[snapshot] loaded %s -> users=%d communities=%d",
                    self.path, len(snapshot.users), len(snapshot.communities))
        return snapshot

    def save(self, snapshot: Snapshot) -> None:
        """Overwrite the snapshot file with ``snapshot``."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
        logger.info("[snapshot] saved %s -> users=%d communities=%d",
                    self.path, len(snapshot.users), len(snapshot.communities))

    def delete(self) -> bool:
        """Remove the snapshot file; returns False if there was nothing to remove."""
        if not self.exists():
            return False
        self.path.unlink()
        logger.info("[snapshot] deleted %s", self.path)
        return True

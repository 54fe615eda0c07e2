"""Index (staging area) implementation."""

import json
import logging
from pathlib import Path
from typing import List, Optional

from .errors import InvalidObjectError
from .fs import FileSystem
from .objects import StagingEntry

logger = logging.getLogger(__name__)


class Index:
    """
    Grove index (staging area) implementation.

    The index stores the ordered list of files queued for the next commit,
    persisted as a JSON list of ``{"path", "hash"}`` objects. Nothing is
    cached between calls: every operation re-reads the index file.

    Staging a path that is already staged replaces the earlier entry, and
    the new entry moves to the end of the list (keep-last).
    """

    def __init__(self, index_file: Path, fs: Optional[FileSystem] = None):
        """
        Initialize index.

        Args:
            index_file: Path to the index file
            fs: Filesystem to use (defaults to the local disk)
        """
        self.index_file = Path(index_file)
        self.fs = fs or FileSystem()

    def load(self) -> List[StagingEntry]:
        """
        Read staged entries from disk.

        Returns:
            List of entries in staging order; empty if nothing is staged

        Raises:
            InvalidObjectError: If the index file is malformed
        """
        if not self.fs.exists(self.index_file):
            return []

        raw = self.fs.read_text(self.index_file)
        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except ValueError:
            raise InvalidObjectError(f"Index file {self.index_file} is not valid JSON")

        if not isinstance(data, list):
            raise InvalidObjectError(f"Index file {self.index_file} must hold a list")

        return [StagingEntry.from_dict(item) for item in data]

    def append(self, path: str, digest: str) -> StagingEntry:
        """
        Stage a path at the given content digest.

        Args:
            path: File path relative to repository root
            digest: Hash of the file content

        Returns:
            StagingEntry: The new entry
        """
        existing = self.load()
        entries = [e for e in existing if e.path != path]
        if len(entries) < len(existing):
            logger.debug("Replacing staged entry for %s", path)

        entry = StagingEntry(path, digest)
        entries.append(entry)
        self._write(entries)
        logger.debug("Staged %s at %s", path, digest[:7])
        return entry

    def clear(self) -> None:
        """Remove all staged entries."""
        self._write([])
        logger.debug("Cleared index")

    def _write(self, entries: List[StagingEntry]) -> None:
        data = json.dumps([e.to_dict() for e in entries], separators=(',', ':'), ensure_ascii=False)
        self.fs.write_text(self.index_file, data)

    def __len__(self) -> int:
        """Number of staged entries."""
        return len(self.load())

    def __repr__(self) -> str:
        """String representation."""
        return f"Index(path={self.index_file})"

"""HEAD reference management for Grove."""

import logging
from pathlib import Path
from typing import Optional

from .fs import FileSystem

logger = logging.getLogger(__name__)


class HeadRef:
    """
    Manages the HEAD pointer.

    HEAD is a text file holding the digest of the most recent commit. An
    empty or missing file means no commit has been made yet. History is
    linear, so HEAD always points directly at a commit.
    """

    def __init__(self, head_file: Path, fs: Optional[FileSystem] = None):
        """
        Initialize HEAD reference.

        Args:
            head_file: Path to the HEAD file
            fs: Filesystem to use (defaults to the local disk)
        """
        self.head_file = Path(head_file)
        self.fs = fs or FileSystem()

    def read(self) -> Optional[str]:
        """
        Resolve HEAD to a commit hash.

        Returns:
            Commit hash or None if no commit has been made
        """
        if not self.fs.exists(self.head_file):
            return None

        content = self.fs.read_text(self.head_file).strip()
        return content or None

    def update(self, commit_hash: str) -> None:
        """
        Point HEAD at a commit.

        Args:
            commit_hash: Commit hash to point to
        """
        self.fs.write_text(self.head_file, commit_hash)
        logger.debug("HEAD -> %s", commit_hash[:7])

    def __repr__(self) -> str:
        return f"HeadRef(head={self.read()})"

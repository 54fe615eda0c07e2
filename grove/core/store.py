"""Content-addressed object store for Grove."""

import logging
from pathlib import Path
from typing import Iterator, Optional

from .errors import ObjectNotFoundError
from .fs import FileSystem
from .hash import hash_object

logger = logging.getLogger(__name__)


class ObjectStore:
    """
    Flat, append-only mapping from digest to bytes.

    Each object lives at ``objects/<digest>``. Objects are written once and
    never overwritten: identical content always hashes identically, so a
    second write of the same digest is a no-op.
    """

    def __init__(self, objects_dir: Path, fs: Optional[FileSystem] = None):
        """
        Initialize object store.

        Args:
            objects_dir: Directory holding the objects
            fs: Filesystem to use (defaults to the local disk)
        """
        self.objects_dir = Path(objects_dir)
        self.fs = fs or FileSystem()

    def object_path(self, digest: str) -> Path:
        """
        Get filesystem path for an object.

        Args:
            digest: 40-character SHA-1 hash

        Returns:
            Path: Full path to object file
        """
        return self.objects_dir / digest

    def put(self, data: bytes) -> str:
        """
        Store data unless an object with the same digest already exists.

        Args:
            data: Bytes to store

        Returns:
            str: SHA-1 hash of the data
        """
        digest = hash_object(data)
        self.fs.mkdir_all(self.objects_dir)
        try:
            self.fs.write_bytes(self.object_path(digest), data, exclusive=True)
        except FileExistsError:
            logger.debug("Object %s already stored, skipped", digest[:7])
            return digest
        logger.debug("Stored object %s (%d bytes)", digest[:7], len(data))
        return digest

    def get(self, digest: str) -> bytes:
        """
        Read an object's content.

        Args:
            digest: 40-character SHA-1 hash

        Returns:
            bytes: Stored content

        Raises:
            ObjectNotFoundError: If no object exists for the digest
        """
        if not self.exists(digest):
            raise ObjectNotFoundError(digest)
        return self.fs.read_bytes(self.object_path(digest))

    def exists(self, digest: str) -> bool:
        """Check if an object exists in the store."""
        if not digest or '/' in digest or digest.startswith('.'):
            return False
        return self.fs.exists(self.object_path(digest))

    def size(self, digest: str) -> int:
        """Size of a stored object in bytes."""
        if not self.exists(digest):
            raise ObjectNotFoundError(digest)
        return self.fs.size(self.object_path(digest))

    def find_by_prefix(self, prefix: str) -> list:
        """Digests starting with prefix, sorted."""
        return [digest for digest in self if digest.startswith(prefix)]

    def __contains__(self, digest: str) -> bool:
        return self.exists(digest)

    def __iter__(self) -> Iterator[str]:
        return iter(self.fs.list_dir(self.objects_dir))

    def __len__(self) -> int:
        return len(self.fs.list_dir(self.objects_dir))

    def __repr__(self) -> str:
        return f"ObjectStore(path={self.objects_dir})"

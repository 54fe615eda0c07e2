"""Grove objects: blobs, staging entries and commits."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple

from .errors import InvalidObjectError
from .hash import hash_object

# Bump when the commit serialization changes; digests depend on it.
COMMIT_FORMAT_VERSION = 1


class GroveObject(ABC):
    """Base class for all stored Grove objects."""

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Serialized object data
        """
        pass

    @property
    def type(self) -> str:
        """
        Return object type name.

        Returns:
            str: Object type (blob, commit)
        """
        return self.__class__.__name__.lower()

    @property
    def hash(self) -> str:
        """
        Get object hash.

        The hash is taken over the serialized bytes exactly as they are
        written to the object store.

        Returns:
            str: 40-character SHA-1 hash
        """
        return hash_object(self.serialize())


class Blob(GroveObject):
    """
    Represents file content.

    A blob stores the raw content of a file without any metadata
    like filename or permissions.
    """

    def __init__(self, data: Optional[bytes] = None):
        """
        Initialize a blob.

        Args:
            data: File content as bytes
        """
        self.data = data or b''

    def serialize(self) -> bytes:
        """Return the raw file content."""
        return self.data

    def text(self) -> str:
        """Decode content as UTF-8, replacing undecodable bytes."""
        return self.data.decode('utf-8', errors='replace')

    def __repr__(self) -> str:
        """String representation of blob."""
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"


@dataclass(frozen=True)
class StagingEntry:
    """A file path and the digest of its content as of the last add."""
    path: str
    hash: str

    def to_dict(self) -> dict:
        return {'path': self.path, 'hash': self.hash}

    @classmethod
    def from_dict(cls, data: dict) -> 'StagingEntry':
        """
        Build an entry from its serialized form.

        Raises:
            InvalidObjectError: If required fields are missing
        """
        try:
            path = data['path']
            obj_hash = data['hash']
        except (KeyError, TypeError):
            raise InvalidObjectError(f"Malformed staging entry: {data!r}")
        if not isinstance(path, str) or not isinstance(obj_hash, str):
            raise InvalidObjectError(f"Malformed staging entry: {data!r}")
        return cls(path, obj_hash)

    def __repr__(self) -> str:
        return f"StagingEntry({self.hash[:7]} {self.path})"


def utc_timestamp() -> str:
    """Current time as ISO-8601 UTC with millisecond precision, e.g. 2026-10-18T09:30:00.123Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass(frozen=True)
class Commit(GroveObject):
    """
    Represents a snapshot of staged files linked to its parent.

    A commit captures:
    - Timestamp (ISO-8601, UTC)
    - Commit message
    - Staged files, in staging order
    - Parent commit digest (None for the first commit)

    Serialized as UTF-8 JSON with a fixed key order:
    version, timestamp, message, files, parent_commit
    """
    timestamp: str
    message: str
    files: Tuple[StagingEntry, ...] = field(default_factory=tuple)
    parent_commit: Optional[str] = None

    def serialize(self) -> bytes:
        """
        Serialize commit to its canonical JSON form.

        Returns:
            bytes: UTF-8 encoded JSON
        """
        payload = {
            'version': COMMIT_FORMAT_VERSION,
            'timestamp': self.timestamp,
            'message': self.message,
            'files': [entry.to_dict() for entry in self.files],
            'parent_commit': self.parent_commit,
        }
        return json.dumps(payload, separators=(',', ':'), ensure_ascii=False).encode('utf-8')

    @classmethod
    def deserialize(cls, data: bytes) -> 'Commit':
        """
        Parse a commit from its serialized form.

        Args:
            data: Serialized commit data

        Returns:
            Commit: Parsed commit

        Raises:
            InvalidObjectError: If data is not a commit of a known format
        """
        try:
            payload = json.loads(data.decode('utf-8'))
        except (UnicodeDecodeError, ValueError):
            raise InvalidObjectError("Object is not a commit")

        if not isinstance(payload, dict):
            raise InvalidObjectError("Object is not a commit")

        version = payload.get('version')
        if version != COMMIT_FORMAT_VERSION:
            raise InvalidObjectError(f"Unsupported commit format version: {version!r}")

        try:
            timestamp = payload['timestamp']
            message = payload['message']
            files = payload['files']
            parent = payload['parent_commit']
        except KeyError as e:
            raise InvalidObjectError(f"Commit is missing field {e.args[0]!r}")

        if not isinstance(timestamp, str):
            raise InvalidObjectError(f"Commit timestamp must be a string, got {timestamp!r}")
        if not isinstance(message, str):
            raise InvalidObjectError(f"Commit message must be a string, got {message!r}")
        if not isinstance(files, list):
            raise InvalidObjectError("Commit files must be a list")
        if parent is not None and not isinstance(parent, str):
            raise InvalidObjectError(f"Commit parent must be a digest or null, got {parent!r}")

        return cls(
            timestamp=timestamp,
            message=message,
            files=tuple(StagingEntry.from_dict(f) for f in files),
            parent_commit=parent or None,
        )

    @classmethod
    def create(
        cls,
        message: str,
        files,
        parent_commit: Optional[str] = None,
        timestamp: Optional[str] = None
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            message: Commit message
            files: Staged entries to snapshot
            parent_commit: Parent commit digest (None for the first commit)
            timestamp: ISO-8601 timestamp (defaults to current time)

        Returns:
            Commit: New commit object
        """
        return cls(
            timestamp=timestamp or utc_timestamp(),
            message=message,
            files=tuple(files),
            parent_commit=parent_commit or None,
        )

    def find_file(self, path: str) -> Optional[StagingEntry]:
        """
        Look up a file entry by path.

        If the commit holds several entries for one path, the last wins.
        """
        for entry in reversed(self.files):
            if entry.path == path:
                return entry
        return None

    def __repr__(self) -> str:
        """String representation."""
        parent_info = f", parent={self.parent_commit[:7]}" if self.parent_commit else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"

"""Grove error types."""

from typing import Optional


class GroveError(Exception):
    """Base class for all errors raised by the Grove core."""


class StorageError(GroveError):
    """Raised when an underlying filesystem read or write fails.

    Attributes:
        path: The path that could not be read or written.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)


class ObjectNotFoundError(GroveError, KeyError):
    """Raised when a digest has no stored object.

    Attributes:
        digest: The digest that was looked up.
    """

    def __init__(self, digest: str, message: Optional[str] = None) -> None:
        self.digest = digest
        super().__init__(message or f"Object {digest} not found")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class CommitNotFoundError(ObjectNotFoundError):
    """Raised when a requested commit digest is absent from the store."""

    def __init__(self, digest: str) -> None:
        super().__init__(digest, f"Commit {digest} not found")


class CorruptHistoryError(GroveError):
    """Raised when a commit's parent is missing from the store.

    Attributes:
        digest: The missing parent digest.
        child: The commit that references it.
    """

    def __init__(self, digest: str, child: str) -> None:
        self.digest = digest
        self.child = child
        super().__init__(
            f"History is corrupt: commit {child} references missing parent {digest}"
        )


class InvalidObjectError(GroveError):
    """Raised when a stored object cannot be parsed as the expected record."""


class ConfigError(GroveError):
    """Raised when a configuration file cannot be parsed.

    Attributes:
        path: The offending config file.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)

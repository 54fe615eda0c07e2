"""Core functionality for Grove.

This module contains the core data structures:
- Grove objects (Blob, StagingEntry, Commit)
- Object store
- Index/staging area
- HEAD reference and commit graph
- Repository management
- Configuration management
- Hashing utilities

For diffing, see grove.operations
"""

from grove.core.errors import (
    GroveError,
    StorageError,
    ObjectNotFoundError,
    CommitNotFoundError,
    CorruptHistoryError,
    InvalidObjectError,
    ConfigError,
)
from grove.core.objects import GroveObject, Blob, StagingEntry, Commit
from grove.core.fs import FileSystem
from grove.core.store import ObjectStore
from grove.core.index import Index
from grove.core.refs import HeadRef
from grove.core.history import CommitGraph
from grove.core.repository import Repository
from grove.core.hash import hash_object, hash_file
from grove.core.config import Config, get_config

__all__ = [
    'GroveError',
    'StorageError',
    'ObjectNotFoundError',
    'CommitNotFoundError',
    'CorruptHistoryError',
    'InvalidObjectError',
    'ConfigError',
    'GroveObject',
    'Blob',
    'StagingEntry',
    'Commit',
    'FileSystem',
    'ObjectStore',
    'Index',
    'HeadRef',
    'CommitGraph',
    'Repository',
    'Config',
    'get_config',
    'hash_object',
    'hash_file',
]

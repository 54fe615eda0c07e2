"""Repository management for Grove."""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .errors import CommitNotFoundError
from .fs import FileSystem
from .history import CommitGraph
from .index import Index
from .objects import Commit, StagingEntry
from .refs import HeadRef
from .store import ObjectStore

logger = logging.getLogger(__name__)

GROVE_DIR = '.grove'
MIN_PREFIX_LENGTH = 4


class Repository:
    """
    Represents a Grove repository.

    A repository owns the .grove directory and the object store, staging
    index, HEAD pointer and commit graph inside it. Instances share no
    state, so several repositories can be used from one process.
    """

    def __init__(self, path: str = '.', fs: Optional[FileSystem] = None):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
            fs: Filesystem to use (defaults to the local disk)
        """
        self.work_tree = Path(path).resolve()
        self.grove_dir = self.work_tree / GROVE_DIR
        self.objects_dir = self.grove_dir / 'objects'
        self.head_file = self.grove_dir / 'HEAD'
        self.index_file = self.grove_dir / 'index'
        self.config_file = self.grove_dir / 'config'

        self.fs = fs or FileSystem()
        self.objects = ObjectStore(self.objects_dir, self.fs)
        self.index = Index(self.index_file, self.fs)
        self.head = HeadRef(self.head_file, self.fs)
        self.graph = CommitGraph(self.objects, self.head, self.index)

        # Lazy loading to avoid circular import
        self._diff_engine = None

    @property
    def diff(self):
        """Get DiffEngine instance."""
        if self._diff_engine is None:
            from grove.operations.diff import DiffEngine
            self._diff_engine = DiffEngine(self)
        return self._diff_engine

    def init(self) -> bool:
        """
        Initialize the repository, creating anything that is missing.

        Creates the .grove directory structure:
        .grove/
        ├── objects/       # Object database
        ├── HEAD           # Current commit (empty until the first commit)
        ├── index          # Staging area
        └── config         # Repository configuration

        Running init on an existing repository leaves it untouched.

        Returns:
            bool: True if newly initialized, False if it already existed
        """
        self.fs.mkdir_all(self.objects_dir)

        created = self._create_if_absent(self.head_file, '')
        self._create_if_absent(self.index_file, '[]')
        self._create_if_absent(self.config_file, '[core]\nformatversion = 1\n')

        if not created:
            logger.info("Repository already initialized at %s", self.grove_dir)
            return False

        logger.debug("Initialized repository at %s", self.grove_dir)
        return True

    def _create_if_absent(self, path: Path, content: str) -> bool:
        try:
            self.fs.write_text(path, content, exclusive=True)
        except FileExistsError:
            return False
        return True

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Searches from the given path upwards until it finds a .grove directory
        or reaches the filesystem root.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / GROVE_DIR).is_dir():
                return cls(str(current))

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    def relative_path(self, filepath) -> str:
        """
        Path of a file relative to the work tree, with '/' separators.

        Raises:
            ValueError: If the file is outside the work tree
        """
        file_path = Path(filepath)
        if not file_path.is_absolute():
            file_path = Path.cwd() / file_path
        file_path = file_path.resolve()

        try:
            rel_path = file_path.relative_to(self.work_tree)
        except ValueError:
            raise ValueError(f"{filepath} is outside repository at {self.work_tree}")

        if rel_path.parts and rel_path.parts[0] == GROVE_DIR:
            raise ValueError(f"Cannot add repository internals: {filepath}")
        return rel_path.as_posix()

    def add(self, filepath) -> str:
        """
        Stage a file for commit.

        Writes the file's content to the object store and appends the
        path to the index.

        Args:
            filepath: Path to file (absolute, or relative to the current directory)

        Returns:
            str: SHA-1 hash of staged content

        Raises:
            StorageError: If the file cannot be read
            ValueError: If the path is a directory or outside the repository
        """
        rel_path = self.relative_path(filepath)
        file_path = self.work_tree / rel_path

        if file_path.is_dir():
            raise ValueError(f"Not a file: {filepath}")

        data = self.fs.read_bytes(file_path)
        digest = self.objects.put(data)
        self.index.append(rel_path, digest)
        return digest

    def status(self) -> List[StagingEntry]:
        """Staged entries waiting for the next commit."""
        return self.index.load()

    def commit(self, message: str, timestamp: Optional[str] = None) -> str:
        """
        Commit everything in the staging area.

        Args:
            message: Commit message
            timestamp: ISO-8601 timestamp (defaults to current time)

        Returns:
            str: Hash of the new commit

        Raises:
            ValueError: If the message is empty or nothing is staged
        """
        if not message:
            raise ValueError("Commit message required")

        staged = self.index.load()
        if not staged:
            raise ValueError("Nothing to commit (staging area is empty)")

        return self.graph.create_commit(message, staged, timestamp=timestamp)

    def head_commit(self) -> Optional[str]:
        """Hash of the current HEAD commit, or None before the first commit."""
        return self.graph.read_head()

    def read_commit(self, commit_hash: str) -> Commit:
        """Load a commit by hash."""
        return self.graph.read_commit(commit_hash)

    def log(self, max_count: Optional[int] = None) -> Iterator[Tuple[str, Commit]]:
        """
        Walk history from HEAD, newest first.

        Args:
            max_count: Stop after this many commits

        Yields:
            (commit_hash, commit) tuples
        """
        for count, item in enumerate(self.graph.walk_history()):
            if max_count is not None and count >= max_count:
                return
            yield item

    def show_commit_diff(self, commit_hash: str):
        """Diff a commit against its parent. See DiffEngine.show_commit_diff."""
        return self.diff.show_commit_diff(commit_hash)

    def resolve(self, ref: str) -> str:
        """
        Resolve HEAD or an abbreviated hash to a full object hash.

        Args:
            ref: 'HEAD', a full hash, or a unique prefix of at least 4 characters

        Returns:
            str: Full 40-character hash

        Raises:
            CommitNotFoundError: If nothing matches or the prefix is ambiguous
        """
        if ref == 'HEAD':
            head = self.head_commit()
            if not head:
                raise CommitNotFoundError('HEAD')
            return head

        if self.objects.exists(ref):
            return ref

        if len(ref) >= MIN_PREFIX_LENGTH:
            matches = self.objects.find_by_prefix(ref)
            if len(matches) == 1:
                return matches[0]
            if len(matches) > 1:
                logger.debug("Ambiguous prefix %s matches %d objects", ref, len(matches))

        raise CommitNotFoundError(ref)

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"

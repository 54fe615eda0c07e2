"""Commit graph: creating commits and walking history."""

import logging
from typing import Iterator, Optional, Sequence, Tuple

from .errors import CommitNotFoundError, CorruptHistoryError, ObjectNotFoundError
from .index import Index
from .objects import Commit, StagingEntry
from .refs import HeadRef
from .store import ObjectStore

logger = logging.getLogger(__name__)


class CommitGraph:
    """
    Append-only, singly-linked commit history.

    Each commit records the digest of its parent; the first commit has no
    parent. HEAD names the newest commit. A parent always exists before its
    child is written, so the chain is acyclic.
    """

    def __init__(self, store: ObjectStore, head: HeadRef, index: Index):
        """
        Initialize commit graph.

        Args:
            store: Object store holding commits and blobs
            head: HEAD reference
            index: Staging index cleared after each commit
        """
        self.store = store
        self.head = head
        self.index = index

    def read_head(self) -> Optional[str]:
        """
        Get hash of current HEAD commit, if any.

        Returns:
            Commit hash or None if no commit has been made
        """
        return self.head.read()

    def create_commit(
        self,
        message: str,
        staged_files: Sequence[StagingEntry],
        timestamp: Optional[str] = None
    ) -> str:
        """
        Record staged files as a new commit on top of HEAD.

        Steps, in order: read HEAD as the parent, build the commit, store
        it, move HEAD to it, clear the index.

        Args:
            message: Commit message
            staged_files: Entries to snapshot, in staging order
            timestamp: ISO-8601 timestamp (defaults to current time)

        Returns:
            str: Hash of the new commit

        Raises:
            ObjectNotFoundError: If a staged digest is missing from the store
        """
        for entry in staged_files:
            if not self.store.exists(entry.hash):
                raise ObjectNotFoundError(
                    entry.hash, f"Staged file {entry.path} refers to missing object {entry.hash}"
                )

        parent = self.read_head()
        commit = Commit.create(
            message=message,
            files=staged_files,
            parent_commit=parent,
            timestamp=timestamp
        )

        commit_hash = self.store.put(commit.serialize())
        self.head.update(commit_hash)
        self.index.clear()

        logger.debug(
            "Created commit %s (parent %s, %d file(s))",
            commit_hash[:7], parent[:7] if parent else 'none', len(commit.files)
        )
        return commit_hash

    def read_commit(self, commit_hash: str) -> Commit:
        """
        Load a commit from the store.

        Args:
            commit_hash: Commit hash

        Returns:
            Commit: Parsed commit

        Raises:
            CommitNotFoundError: If no object exists for the hash
            InvalidObjectError: If the object is not a commit
        """
        try:
            data = self.store.get(commit_hash)
        except ObjectNotFoundError:
            raise CommitNotFoundError(commit_hash)
        return Commit.deserialize(data)

    def walk_history(self, start: Optional[str] = None) -> Iterator[Tuple[str, Commit]]:
        """
        Walk commit history from HEAD (or start) back to the first commit.

        Yields newest first. Every call starts over from the current HEAD.

        Args:
            start: Commit hash to start from (defaults to HEAD)

        Yields:
            (commit_hash, commit) tuples

        Raises:
            CommitNotFoundError: If the starting commit is missing
            CorruptHistoryError: If a parent commit is missing
        """
        commit_hash = start or self.read_head()
        child = None

        while commit_hash:
            try:
                commit = self.read_commit(commit_hash)
            except CommitNotFoundError:
                if child is None:
                    raise
                raise CorruptHistoryError(commit_hash, child)

            yield commit_hash, commit
            child = commit_hash
            commit_hash = commit.parent_commit

    def __repr__(self) -> str:
        return f"CommitGraph(head={self.read_head()})"

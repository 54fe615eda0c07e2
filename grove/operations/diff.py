"""Diff engine for comparing file versions across commits."""

import logging
from dataclasses import dataclass, field
from difflib import SequenceMatcher
from typing import List, Optional

from grove.core.errors import CommitNotFoundError, CorruptHistoryError
from grove.core.objects import Blob, Commit

logger = logging.getLogger(__name__)

UNCHANGED = 'unchanged'
ADDED = 'added'
REMOVED = 'removed'

# Per-file status in a commit diff
STATUS_INITIAL = 'initial'
STATUS_NEW = 'new'
STATUS_MODIFIED = 'modified'
STATUS_UNCHANGED = 'unchanged'


@dataclass(frozen=True)
class DiffSegment:
    """A run of consecutive lines sharing one kind (unchanged, added or removed)."""
    kind: str
    text: str

    @property
    def lines(self) -> List[str]:
        return self.text.splitlines(keepends=True)


def _append(segments: List[DiffSegment], kind: str, lines: List[str]) -> None:
    if not lines:
        return
    text = ''.join(lines)
    if segments and segments[-1].kind == kind:
        segments[-1] = DiffSegment(kind, segments[-1].text + text)
    else:
        segments.append(DiffSegment(kind, text))


def diff_lines(old_text: str, new_text: str) -> List[DiffSegment]:
    """
    Compute a line-level edit script from old_text to new_text.

    Lines keep their terminators. Consecutive lines of the same kind are
    merged into one segment. Where a block of lines is replaced, the removed
    segment always comes before the added one.

    Args:
        old_text: Original text
        new_text: Changed text

    Returns:
        Ordered list of DiffSegment
    """
    if old_text == new_text:
        return [DiffSegment(UNCHANGED, old_text)]

    old_lines = old_text.splitlines(keepends=True)
    new_lines = new_text.splitlines(keepends=True)

    matcher = SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    segments: List[DiffSegment] = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == 'equal':
            _append(segments, UNCHANGED, old_lines[i1:i2])
        elif tag == 'delete':
            _append(segments, REMOVED, old_lines[i1:i2])
        elif tag == 'insert':
            _append(segments, ADDED, new_lines[j1:j2])
        elif tag == 'replace':
            _append(segments, REMOVED, old_lines[i1:i2])
            _append(segments, ADDED, new_lines[j1:j2])

    return segments


@dataclass
class FileChange:
    """
    Represents one file entry of a commit compared with the parent commit.

    status is one of:
    - 'initial': the commit has no parent, nothing to compare against
    - 'new': the path does not appear in the parent commit
    - 'modified': content differs from the parent's version
    - 'unchanged': same content as the parent's version
    """
    path: str
    hash: str
    content: str
    status: str
    parent_hash: Optional[str] = None
    segments: List[DiffSegment] = field(default_factory=list)

    @property
    def is_new(self) -> bool:
        return self.status == STATUS_NEW

    @property
    def added_lines(self) -> int:
        return sum(len(s.lines) for s in self.segments if s.kind == ADDED)

    @property
    def removed_lines(self) -> int:
        return sum(len(s.lines) for s in self.segments if s.kind == REMOVED)


@dataclass
class CommitDiff:
    """All file changes recorded by one commit."""
    commit_hash: str
    commit: Commit
    changes: List[FileChange] = field(default_factory=list)

    @property
    def is_initial(self) -> bool:
        return self.commit.parent_commit is None


class DiffEngine:
    """
    Engine for computing diffs between a commit and its parent.

    Presentation (colors, prefixes) is left to the caller.
    """

    def __init__(self, repo):
        """
        Initialize diff engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def read_blob(self, digest: str) -> Blob:
        """
        Load a blob from the object store.

        Raises:
            ObjectNotFoundError: If the blob is missing
        """
        return Blob(self.repo.objects.get(digest))

    def show_commit_diff(self, commit_hash: str) -> CommitDiff:
        """
        Compare every file in a commit with the parent commit's version.

        Args:
            commit_hash: Commit hash

        Returns:
            CommitDiff with one FileChange per file entry, in commit order

        Raises:
            CommitNotFoundError: If the commit does not exist
            CorruptHistoryError: If the commit's parent does not exist
            ObjectNotFoundError: If a referenced blob is missing
        """
        commit = self.repo.graph.read_commit(commit_hash)

        parent = None
        if commit.parent_commit:
            try:
                parent = self.repo.graph.read_commit(commit.parent_commit)
            except CommitNotFoundError:
                raise CorruptHistoryError(commit.parent_commit, commit_hash)

        result = CommitDiff(commit_hash, commit)

        for entry in commit.files:
            blob = self.read_blob(entry.hash)

            if parent is None:
                change = FileChange(entry.path, entry.hash, blob.text(), STATUS_INITIAL)
            else:
                parent_entry = parent.find_file(entry.path)
                if parent_entry is None:
                    change = FileChange(entry.path, entry.hash, blob.text(), STATUS_NEW)
                else:
                    parent_blob = self.read_blob(parent_entry.hash)
                    status = STATUS_UNCHANGED if parent_entry.hash == entry.hash else STATUS_MODIFIED
                    change = FileChange(
                        entry.path,
                        entry.hash,
                        blob.text(),
                        status,
                        parent_hash=parent_entry.hash,
                        segments=diff_lines(parent_blob.text(), blob.text()),
                    )

            result.changes.append(change)

        logger.debug("Diffed commit %s: %d file(s)", commit_hash[:7], len(result.changes))
        return result

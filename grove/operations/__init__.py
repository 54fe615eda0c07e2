"""Operations module for high-level Grove operations.

This module contains the business logic for:
- Line diffs between file versions
- Commit-against-parent diff reports
"""

from grove.operations.diff import DiffEngine, DiffSegment, FileChange, CommitDiff, diff_lines

__all__ = [
    'DiffEngine', 'DiffSegment', 'FileChange', 'CommitDiff', 'diff_lines',
]

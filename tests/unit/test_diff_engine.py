"""Unit tests for the diff engine."""

import pytest
from grove.core.errors import CommitNotFoundError, CorruptHistoryError
from grove.operations.diff import (
    ADDED, REMOVED, UNCHANGED, DiffEngine, DiffSegment, diff_lines,
)


@pytest.mark.parametrize('text', ['', 'one line', 'hello\n', 'a\nb\nc\n', 'no\ntrailing'])
def test_diff_identity(text):
    """Identical texts give a single unchanged segment."""
    assert diff_lines(text, text) == [DiffSegment(UNCHANGED, text)]


def test_diff_appended_line():
    assert diff_lines('hello\n', 'hello\nworld\n') == [
        DiffSegment(UNCHANGED, 'hello\n'),
        DiffSegment(ADDED, 'world\n'),
    ]


def test_diff_removed_line():
    assert diff_lines('a\nb\nc\n', 'a\nc\n') == [
        DiffSegment(UNCHANGED, 'a\n'),
        DiffSegment(REMOVED, 'b\n'),
        DiffSegment(UNCHANGED, 'c\n'),
    ]


def test_diff_replacement_removes_before_adding():
    assert diff_lines('a\nold\nc\n', 'a\nnew\nc\n') == [
        DiffSegment(UNCHANGED, 'a\n'),
        DiffSegment(REMOVED, 'old\n'),
        DiffSegment(ADDED, 'new\n'),
        DiffSegment(UNCHANGED, 'c\n'),
    ]


def test_diff_from_empty():
    assert diff_lines('', 'x\ny\n') == [DiffSegment(ADDED, 'x\ny\n')]


def test_diff_to_empty():
    assert diff_lines('x\ny\n', '') == [DiffSegment(REMOVED, 'x\ny\n')]


def test_diff_missing_trailing_newline_is_a_change():
    assert diff_lines('a\nb', 'a\nb\n') == [
        DiffSegment(UNCHANGED, 'a\n'),
        DiffSegment(REMOVED, 'b'),
        DiffSegment(ADDED, 'b\n'),
    ]


def test_diff_merges_adjacent_lines_of_same_kind():
    segments = diff_lines('a\n', 'a\nb\nc\nd\n')
    assert segments[-1] == DiffSegment(ADDED, 'b\nc\nd\n')
    assert segments[-1].lines == ['b\n', 'c\n', 'd\n']


def test_diff_segments_rebuild_both_sides():
    old = 'keep\ndrop\nkeep2\nchange\n'
    new = 'insert\nkeep\nkeep2\nchanged\ntail\n'
    segments = diff_lines(old, new)
    
    assert ''.join(s.text for s in segments if s.kind != ADDED) == old
    assert ''.join(s.text for s in segments if s.kind != REMOVED) == new


def test_diff_engine_init(repo):
    """Test DiffEngine initialization."""
    engine = DiffEngine(repo)
    assert engine.repo == repo


def test_show_commit_diff_initial(repo_with_commits):
    first = repo_with_commits.commit_hashes[0]
    result = repo_with_commits.show_commit_diff(first)
    
    assert result.is_initial
    assert [(c.path, c.status) for c in result.changes] == [('a.txt', 'initial')]
    assert result.changes[0].content == 'hello\n'
    assert result.changes[0].segments == []


def test_show_commit_diff_modified_and_new(repo_with_commits):
    second = repo_with_commits.commit_hashes[1]
    result = repo_with_commits.show_commit_diff(second)
    
    changes = {c.path: c for c in result.changes}
    assert changes['a.txt'].status == 'modified'
    assert changes['a.txt'].segments == [
        DiffSegment(UNCHANGED, 'hello\n'),
        DiffSegment(ADDED, 'world\n'),
    ]
    assert changes['a.txt'].added_lines == 1
    assert changes['a.txt'].removed_lines == 0
    assert changes['b.txt'].is_new
    assert changes['b.txt'].segments == []


def test_show_commit_diff_unchanged_file(repo, write_file):
    repo.add(write_file('a.txt', 'same\n'))
    repo.commit('first')
    repo.add(write_file('a.txt', 'same\n'))
    second = repo.commit('second')
    
    change = repo.show_commit_diff(second).changes[0]
    assert change.status == 'unchanged'
    assert change.segments == [DiffSegment(UNCHANGED, 'same\n')]


def test_show_commit_diff_missing_commit(repo):
    with pytest.raises(CommitNotFoundError):
        repo.show_commit_diff('0' * 40)


def test_show_commit_diff_missing_parent(repo_with_commits):
    first, second = repo_with_commits.commit_hashes
    repo_with_commits.objects.object_path(first).unlink()
    
    with pytest.raises(CorruptHistoryError):
        repo_with_commits.show_commit_diff(second)

"""Repository initialization and command-surface tests."""

import hashlib
import logging
import pytest
from grove.core.errors import CommitNotFoundError, StorageError
from grove.core.repository import Repository


def test_repository_init(temp_dir):
    """Test repository initialization creates structure."""
    repo = Repository(str(temp_dir))
    assert repo.init() is True
    
    assert repo.grove_dir.is_dir()
    assert repo.objects_dir.is_dir()
    assert repo.head_file.read_text() == ''
    assert repo.index_file.read_text() == '[]'
    assert repo.config_file.exists()


def test_repository_reinit_is_noop(repo, write_file, caplog):
    """Test a second init keeps existing state and only reports it."""
    repo.add(write_file('a.txt', 'hello\n'))
    commit_hash = repo.commit('first')
    
    with caplog.at_level(logging.INFO, logger='grove.core.repository'):
        assert Repository(str(repo.work_tree)).init() is False
    
    assert 'already initialized' in caplog.text
    assert repo.head_commit() == commit_hash


def test_init_restores_missing_index(repo):
    repo.index_file.unlink()
    repo.init()
    assert repo.index_file.read_text() == '[]'


def test_add_scenario(repo, write_file):
    """add("a.txt") with "hello\\n" stages its sha1 and stores the blob."""
    digest = repo.add(write_file('a.txt', 'hello\n'))
    
    assert digest == hashlib.sha1(b'hello\n').hexdigest()
    staged = repo.status()
    assert len(staged) == 1
    assert staged[0].path == 'a.txt'
    assert staged[0].hash == digest
    assert repo.objects.get(digest) == b'hello\n'


def test_add_relative_path(repo, write_file, monkeypatch):
    write_file('a.txt', 'x')
    monkeypatch.chdir(repo.work_tree)
    repo.add('a.txt')
    assert repo.status()[0].path == 'a.txt'


def test_add_nested_path_uses_forward_slashes(repo):
    (repo.work_tree / 'docs').mkdir()
    (repo.work_tree / 'docs' / 'notes.txt').write_text('n')
    repo.add(repo.work_tree / 'docs' / 'notes.txt')
    assert repo.status()[0].path == 'docs/notes.txt'


def test_add_missing_file(repo):
    with pytest.raises(StorageError):
        repo.add(repo.work_tree / 'missing.txt')
    assert repo.status() == []


def test_add_directory_rejected(repo):
    (repo.work_tree / 'sub').mkdir()
    with pytest.raises(ValueError, match="Not a file"):
        repo.add(repo.work_tree / 'sub')


def test_add_outside_repository_rejected(repo, tmp_path):
    outside = tmp_path / 'outside.txt'
    outside.write_text('x')
    with pytest.raises(ValueError, match="outside"):
        repo.add(outside)


def test_add_identical_content_deduplicates(repo, write_file):
    """Two files with the same content share one object."""
    before = len(repo.objects)
    first = repo.add(write_file('a.txt', 'same\n'))
    second = repo.add(write_file('b.txt', 'same\n'))
    
    assert first == second
    assert len(repo.objects) == before + 1
    assert len(repo.status()) == 2


def test_commit_requires_message(repo, write_file):
    repo.add(write_file('a.txt', 'x'))
    with pytest.raises(ValueError, match="message"):
        repo.commit('')


def test_commit_requires_staged_files(repo):
    with pytest.raises(ValueError, match="Nothing to commit"):
        repo.commit('empty')


def test_first_commit_scenario(repo, write_file):
    """Commit "first" on an empty HEAD has no parent and becomes HEAD."""
    repo.add(write_file('a.txt', 'hello\n'))
    commit_hash = repo.commit('first')
    
    commit = repo.read_commit(commit_hash)
    assert commit.parent_commit is None
    assert commit.message == 'first'
    assert repo.head_commit() == commit_hash
    assert repo.status() == []


def test_log_respects_max_count(repo_with_commits):
    history = list(repo_with_commits.log(max_count=1))
    assert [h for h, _ in history] == [repo_with_commits.commit_hashes[1]]


def test_log_empty_repository(repo):
    assert list(repo.log()) == []


def test_resolve_head_and_prefix(repo_with_commits):
    first, second = repo_with_commits.commit_hashes
    assert repo_with_commits.resolve('HEAD') == second
    assert repo_with_commits.resolve(first) == first
    assert repo_with_commits.resolve(first[:10]) == first


def test_resolve_unknown(repo_with_commits):
    with pytest.raises(CommitNotFoundError):
        repo_with_commits.resolve('0' * 40)


def test_resolve_head_without_commits(repo):
    with pytest.raises(CommitNotFoundError):
        repo.resolve('HEAD')


def test_find_repository_in_subdirectory(repo):
    """Test finding repo from nested directory."""
    subdir = repo.work_tree / 'subdir' / 'nested'
    subdir.mkdir(parents=True)
    
    found_repo = Repository.find_repository(str(subdir))
    assert found_repo is not None
    assert found_repo.work_tree == repo.work_tree


def test_find_repository_none(tmp_path):
    """Test no repo found returns None."""
    assert Repository.find_repository(str(tmp_path)) is None


def test_repositories_are_independent(tmp_path):
    """Two repositories in one process share no state."""
    (tmp_path / 'one').mkdir()
    (tmp_path / 'two').mkdir()
    one = Repository(str(tmp_path / 'one'))
    two = Repository(str(tmp_path / 'two'))
    one.init()
    two.init()
    
    (tmp_path / 'one' / 'a.txt').write_text('a')
    one.add(tmp_path / 'one' / 'a.txt')
    one.commit('only in one')
    
    assert one.head_commit() is not None
    assert two.head_commit() is None
    assert len(two.objects) == 0
